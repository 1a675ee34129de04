"""Dependency injection container."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from gather.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are read from the environment when first requested.
    """
    providers = [base.implementation(use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    Args:
        app: FastAPI application
        container: DI container, closed when the app shuts down
    """
    setup_dishka(container, app)


@asynccontextmanager
async def container_lifespan(app: FastAPI):
    """Close the app's container (and the resources it owns) on shutdown."""
    yield
    container: AsyncContainer = app.state.dishka_container
    await container.close()
    logfire.info("DI container closed")
