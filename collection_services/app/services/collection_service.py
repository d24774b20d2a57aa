"""
Service layer for resource collections.

``CollectionService`` implements the two operations every resource
service exposes: appending a record and listing the whole collection.
It is deliberately thin.  Records are neither validated nor copied;
the store receives exactly the object the API layer parsed from the
request body.

The methods are coroutines like the rest of the service layer but
contain no ``await``, so a request is handled to completion before the
next one can observe the collection.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import Depends, Request

from collection_services.app.core.config import ServiceDefinition
from collection_services.app.core.store import RecordStore, get_store
from collection_services.app.schemas.record import Payload

logger = logging.getLogger(__name__)


class CollectionService:
    """Create and list records of one resource type."""

    def __init__(self, definition: ServiceDefinition, store: RecordStore) -> None:
        self.definition = definition
        self.store = store

    async def create(self, payload: Payload) -> Payload:
        """Append ``payload`` to the collection and return it unchanged."""
        record = self.store.append(payload)
        logger.info(
            "Created %s record (%d stored)", self.definition.record_name, len(self.store)
        )
        return record

    async def list(self) -> List[Payload]:
        """Return every stored record in insertion order."""
        records = self.store.all()
        logger.debug("Listing %d %s records", len(records), self.definition.record_name)
        return records


def get_collection_service(
    request: Request, store: RecordStore = Depends(get_store)
) -> CollectionService:
    """FastAPI dependency building a service bound to the current app."""
    return CollectionService(request.app.state.definition, store)
