"""
Exception handlers for the BuzzHub server.

This package contains the domain error mapping and the catch-all handler,
plus a setup function to register them with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
