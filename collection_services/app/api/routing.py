"""
Strict JSON request handling.

Python's ``json`` module accepts the non‑standard constants ``NaN``,
``Infinity`` and ``-Infinity``.  They are not JSON and cannot be
echoed back faithfully (they serialise as ``null``), so routes built
with ``StrictJSONRoute`` reject them the same way FastAPI rejects any
other undecodable body: with a 422 ``json_invalid`` error, before the
handler runs.
"""

import json
from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute


class StrictJSONRequest(Request):
    """Request whose ``json()`` refuses non‑finite number constants."""

    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            body = await self.body()
            doc = body.decode("utf-8", errors="replace")

            def reject_constant(name: str) -> Any:
                raise json.JSONDecodeError(f"Invalid constant {name}", doc, max(doc.find(name), 0))

            self._json = json.loads(body, parse_constant=reject_constant)
        return self._json


class StrictJSONRoute(APIRoute):
    """API route that parses bodies with ``StrictJSONRequest``."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def strict_route_handler(request: Request) -> Response:
            request = StrictJSONRequest(request.scope, request.receive)
            return await original_route_handler(request)

        return strict_route_handler
