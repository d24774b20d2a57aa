"""
Main entrypoint for the resource collection services.

This module assembles FastAPI applications, sets up logging and
includes the routers.  ``create_app`` builds one service from a
``ServiceDefinition``; the three deployable services are instantiated
at module import time as ``users_app``, ``products_app`` and
``orders_app`` so they can be served directly, e.g.::

    uvicorn collection_services.app.main:products_app --port 3001

Each application owns its own ``RecordStore``.  Nothing is shared
between services, even when they run in the same process.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.router import build_router
from .core.config import SERVICES, ServiceDefinition, settings
from .core.logging_config import setup_logging
from .core.store import RecordStore


def create_app(
    definition: ServiceDefinition,
    store: Optional[RecordStore] = None,
    port: Optional[int] = None,
) -> FastAPI:
    """Create and configure a FastAPI application for one service.

    Parameters
    ----------
    definition : ServiceDefinition
        The service to build (routes, name, default port).
    store : Optional[RecordStore]
        Collection backing the service.  A new empty store is created
        when omitted.
    port : Optional[int]
        Port announced in the startup line.  Defaults to the configured
        port for the service.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    if port is None:
        port = settings.port_for(definition)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print(f"{definition.title} is running on port {port}", flush=True)
        yield

    app = FastAPI(
        title=definition.title,
        description=f"{settings.project_name}: {definition.name} collection",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.definition = definition
    app.state.store = store if store is not None else RecordStore()
    app.state.port = port

    app.include_router(build_router(definition))
    return app


# Create the application instances at import time so that tools such as
# uvicorn can discover them without calling create_app manually.
users_app = create_app(SERVICES["users"])
products_app = create_app(SERVICES["products"])
orders_app = create_app(SERVICES["orders"])
