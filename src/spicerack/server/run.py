"""Helper for running the spicerack ASGI application."""

from __future__ import annotations

import os
from typing import Optional

import uvicorn


def serve(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False) -> None:
    """Run the API with uvicorn; host and port default to SPICERACK_SERVER_HOST/PORT."""

    host = host or os.environ.get("SPICERACK_SERVER_HOST", "127.0.0.1")
    if port is None:
        raw_port = os.environ.get("SPICERACK_SERVER_PORT", "8000")
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise SystemExit(f"Invalid SPICERACK_SERVER_PORT '{raw_port}': {exc}") from exc

    uvicorn.run(
        "spicerack.server.app:app",
        host=host,
        port=port,
        reload=reload,
        # Logging is configured by create_app.
        log_config=None,
    )


def main() -> None:
    serve(reload=os.environ.get("RELOAD") == "1")


if __name__ == "__main__":
    main()
