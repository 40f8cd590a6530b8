"""
Core utilities for the RFID database service.

This package provides shared functionality including logging configuration,
database setup and the I/O models used by the HTTP layer.
"""

from rfid_db.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
