"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from gram.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every production provider plus the FastAPI request context."""
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach container to app so DishkaRoute handlers can resolve from it."""
    setup_dishka(container, app)
