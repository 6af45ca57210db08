#!/usr/bin/env python3
"""Serve the Gram API with uvicorn."""

import sys

import logfire
import uvicorn

from gram.config import Settings
from gram.util.logging import setup_logging
from gram.util.observability import configure_logfire


def main() -> int:
    """Run the API server; startup failures are reported to Logfire."""
    settings = Settings()

    # Configured before uvicorn imports the app so import errors are traced
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting Gram API", host=settings.host, port=settings.port)
        uvicorn.run(
            "gram.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Gram API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
