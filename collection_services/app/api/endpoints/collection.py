"""
Create and list endpoints for a resource collection.

The paths differ per service (``/register`` + ``/users`` for users,
``/products`` for products, ``/orders`` for orders), so routes are
registered on a fresh router by ``build_collection_router`` rather
than with decorators.  Both endpoints are public; there is no
authentication, pagination or filtering.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, status

from collection_services.app.api.routing import StrictJSONRoute
from collection_services.app.core.config import ServiceDefinition
from collection_services.app.schemas.record import Payload
from collection_services.app.services.collection_service import (
    CollectionService,
    get_collection_service,
)


async def create_record(
    payload: Payload = Body(..., examples=[{"name": "pen", "price": 1.5}]),
    service: CollectionService = Depends(get_collection_service),
) -> Payload:
    """Store a new record and echo it back.

    The body must be a JSON object or array.  It is appended to the
    collection as received and returned with HTTP 201.  Malformed JSON,
    including the constants ``NaN`` and ``Infinity``, is rejected with a
    422 response and never reaches the collection.
    """
    return await service.create(payload)


async def list_records(
    service: CollectionService = Depends(get_collection_service),
) -> List[Payload]:
    """Return all stored records in the order they were created."""
    return await service.list()


def build_collection_router(definition: ServiceDefinition) -> APIRouter:
    """Return a router exposing create and list for ``definition``."""
    router = APIRouter(tags=[definition.name], route_class=StrictJSONRoute)
    router.add_api_route(
        definition.create_path,
        create_record,
        methods=["POST"],
        response_model=Payload,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{definition.record_name}",
        summary=f"Create a {definition.record_name}",
    )
    router.add_api_route(
        definition.list_path,
        list_records,
        methods=["GET"],
        response_model=List[Payload],
        name=f"list_{definition.name}",
        summary=f"List all {definition.name}",
    )
    return router
