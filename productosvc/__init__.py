"""REST service for managing products stored in MongoDB."""

__version__ = "0.1.0"