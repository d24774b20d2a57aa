"""
Payload types for resource collections.

A record is whatever JSON the client sends.  No field is interpreted,
validated or defaulted.  The create body is declared as a JSON object
or array, the two shapes a strict JSON body parser accepts; bare
scalars and malformed JSON are rejected by FastAPI before any handler
runs.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field

# A single client record, stored verbatim.
Record = Dict[str, Any]

# Any body accepted by a create endpoint.
Payload = Union[Record, List[Any]]


class HealthRead(BaseModel):
    """Schema for the health probe response."""

    status: str = Field("ok", examples=["ok"])
    service: str = Field(..., examples=["products"])
    records: int = Field(..., ge=0, description="Number of records currently stored")
