"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Like added", target_id=str(target_id), user_id=str(user_id))

    with logfire.span("like_service.toggle", target_id=str(target_id)):
        ...
"""

import httpx
import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gram.config import Settings

SERVICE_NAME = "gram-api"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is present."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Development gets rich console output; production keeps the console
    quiet and relies on Logfire cloud when a token is configured
    (OBSERVABILITY__LOGFIRE_TOKEN).

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=(
            False
            if settings.environment == "production"
            else logfire.ConsoleOptions(
                colors="auto",
                span_style="show-parents",
                include_timestamps=True,
                verbose=settings.debug,
            )
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries, including the like/notification transactions.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx(client: httpx.AsyncClient) -> None:
    """Trace outbound HTTP requests made by the like client.

    Args:
        client: httpx client owned by the gateway
    """
    logfire.instrument_httpx(client)
