"""
Movies API application package.

This package contains the HTTP layer, request validation, the in-memory
movie store and shared utilities.
"""

__version__ = "1.0.0"
