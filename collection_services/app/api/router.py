"""
Top‑level router for a resource service.

Aggregates the collection routes for the chosen service definition
and the shared health probe.  Routes are mounted at the root of the
application because the create and list paths are part of the
external contract.
"""

from fastapi import APIRouter

from collection_services.app.core.config import ServiceDefinition
from .endpoints import health
from .endpoints.collection import build_collection_router


def build_router(definition: ServiceDefinition) -> APIRouter:
    """Return the complete router for ``definition``."""
    router = APIRouter()
    router.include_router(build_collection_router(definition))
    router.include_router(health.router, tags=["health"])
    return router
