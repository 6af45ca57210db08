"""Logging configuration for the application.

Server code logs through logfire directly. Stdlib loggers (our client
package and third-party libraries) are bridged into logfire so that
everything ends up in the same trace.
"""

import logging

import logfire

from gram.config import Settings

_NOISY_LOGGERS = ("httpx", "httpcore", "asyncio", "sqlalchemy.engine")


def resolve_level(settings: Settings) -> int:
    """Pick the log level for the environment.

    Args:
        settings: Application settings

    Returns:
        A stdlib logging level
    """
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire.

    Call after logfire.configure().

    Args:
        settings: Application settings
    """
    level = resolve_level(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Override any existing configuration
    )

    # Third-party loggers only report problems
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("gram").setLevel(level)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )

