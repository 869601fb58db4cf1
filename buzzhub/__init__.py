"""BuzzHub.

This package contains the BuzzHub content platform: a FastAPI server for
viral-style blog content and a small HTTP client for it.

Subpackages
-----------

- ``buzzhub.core``: configuration-independent building blocks.

  - Logging setup and optional Logfire tracing.
  - SQLModel entities, API I/O schemas and domain enums.
  - The ``BlogStorage`` interface with in-memory and SQL backends.

- ``buzzhub.content``: SEO heuristics, the templated post generator and the
  CSV/XML exporter.
- ``buzzhub.auth``: placeholder cookie tokens and role-based permission checks.
- ``buzzhub.youtube``: YouTube Data API client and the cached title lookup.
- ``buzzhub.server``: the FastAPI application, routers and services.
- ``buzzhub.client``: an ``httpx`` client that keeps the auth cookies.

Tokens issued by ``buzzhub.auth`` are placeholders and are not signed; do not
rely on them for anything but routing a session.
"""

__version__ = "0.1.0"
