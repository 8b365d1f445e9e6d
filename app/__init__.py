"""
Movie Master Pro backend application package.

This package contains the HTTP API, identity verification, document store
access, and utilities.
"""

__version__ = "1.0.0"
