"""
Health probe endpoint.

``GET /health`` reports that the process is serving requests together
with the service name and the current size of its collection.  It is
meant for container orchestrators and load balancers.
"""

from fastapi import APIRouter, Depends, Request

from collection_services.app.core.store import RecordStore, get_store
from collection_services.app.schemas.record import HealthRead

router = APIRouter()


@router.get("/health", response_model=HealthRead)
async def health(request: Request, store: RecordStore = Depends(get_store)) -> HealthRead:
    """Return service liveness information."""
    return HealthRead(status="ok", service=request.app.state.definition.name, records=len(store))
