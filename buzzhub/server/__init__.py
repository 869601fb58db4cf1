"""
BuzzHub Server Package.

This package contains the web server implementation for the BuzzHub platform.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration.
    services: Business logic and dependency providers.
    middleware: Request logging middleware.
    exception_handlers: Global exception handling.
"""
