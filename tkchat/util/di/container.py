"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from tkchat.util.di import select_providers


def create_container() -> AsyncContainer:
    """Build the container with every component real.

    Settings are read from the environment when first requested.
    """
    return make_async_container(*select_providers(mocked=set()), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use FromDishka."""
    setup_dishka(container, app)
