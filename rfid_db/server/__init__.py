"""
RFID Database Server Package.

This package contains the web server implementation: the FastAPI application,
its configuration, routers and exception handlers.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration settings and constants.
    exception_handlers: Mapping of errors onto HTTP responses.
    services: Request-scoped dependencies (database session, repositories).
"""
