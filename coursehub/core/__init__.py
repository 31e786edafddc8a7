"""Core domain: exceptions, caller identity and aggregate math."""
