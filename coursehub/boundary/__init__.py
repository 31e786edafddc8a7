"""Boundary adapters (relational store)."""
