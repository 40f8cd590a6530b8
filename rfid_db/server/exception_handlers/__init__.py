"""
Exception handlers for the RFID database server.

This package contains the exception handlers for storage, request-parsing and
unexpected errors, and a setup function to register them with the FastAPI
application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
