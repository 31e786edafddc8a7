"""CourseHub: online course marketplace backend."""

__version__ = "0.1.0"
