"""WSGI entrypoint for production servers (Gunicorn, uWSGI, etc.).

Exposes ``app`` so a server can import ``hello_server.wsgi:app``.
"""
from __future__ import annotations

from .app import create_app

app = create_app()
