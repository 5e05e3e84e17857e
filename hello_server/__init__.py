"""hello_server package root.

Two static endpoints (``GET /`` and ``GET /health``) on Flask; everything
else is answered with 404. Build the application with :func:`create_app`.
"""

from .app import create_app

__all__ = ["create_app"]
