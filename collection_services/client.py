"""
HTTP client for the resource collection services.

``CollectionClient`` wraps the two operations a service exposes
(create and list) using the ``requests`` library.  The routes are
taken from the service's ``ServiceDefinition`` so callers only need
the base URL and the service name::

    client = CollectionClient("http://localhost:3001", "products")
    product, error = client.create({"name": "pen", "price": 1.5})
    products, error = client.list()

Methods never raise on HTTP or network failures.  They return a
``(data, error)`` tuple instead, where ``error`` is ``None`` on
success or a dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import requests

from collection_services.app.core.config import ServiceDefinition, get_service

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CollectionClient:
    """Client for one resource collection service."""

    def __init__(
        self,
        base_url: str,
        service: Union[str, ServiceDefinition],
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            service: Service name (``users``, ``products``, ``orders``) or
                a ``ServiceDefinition``.  Unknown names raise
                ``UnknownServiceError``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.service = get_service(service) if isinstance(service, str) else service
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the service.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict) and "detail" in err_json:
                        message = str(err_json["detail"])
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("%s request failed (%s): %s", self.service.name, status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("%s request failed: %s", self.service.name, exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------
    def create(self, payload: Any) -> Tuple[Optional[Any], Optional[Error]]:
        """Store a record.

        Returns:
            A tuple ``(record, error)`` where ``record`` is the echoed
            payload.
        """
        return self._request("POST", self.service.create_path, json_body=payload)

    def list(self) -> Tuple[List[Any], Optional[Error]]:
        """Retrieve every record of the service in creation order.

        Returns:
            A tuple ``(records, error)``.  ``records`` is empty on failure,
            including when the server answers with anything but a JSON array.
        """
        data, error = self._request("GET", self.service.list_path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        logger.error(
            "%s list returned %s instead of a JSON array", self.service.name, type(data).__name__
        )
        return [], {"status_code": None, "message": "unexpected response: expected a JSON array"}
