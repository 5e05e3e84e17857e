from __future__ import annotations

import argparse
import sys

from hello_server.app import create_app
from hello_server.config import Settings, get_settings
from hello_server.logging_config import get_logger


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range 1-65535: {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hello-server",
        description="Run the hello-server development server.",
    )
    parser.add_argument("--host", help="bind address (default: HELLO_SERVER_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=_port, help="listening port (default: HELLO_SERVER_PORT or 4000)")
    parser.add_argument("--debug", action="store_true", default=None, help="enable Flask debug mode")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {
        key: value
        for key, value in (("HOST", args.host), ("PORT", args.port), ("DEBUG", args.debug))
        if value is not None
    }
    settings = Settings.model_validate({**get_settings().model_dump(), **overrides})

    app = create_app(settings)
    get_logger().info("Server is running on http://localhost:%d", settings.PORT)
    # Reloader would re-exec the process and log the banner twice
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG, use_reloader=False)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
