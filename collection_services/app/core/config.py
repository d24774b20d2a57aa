"""
Simple configuration management.

Two kinds of configuration live here.  ``ServiceDefinition`` objects
describe the fixed shape of each resource service (its name, default
port and routes); they are part of the external contract and are not
configurable.  The ``Settings`` dataclass reads the deployment knobs
(log level, bind host, port overrides) directly from environment
variables.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional


class UnknownServiceError(KeyError):
    """Raised when a service name is not present in ``SERVICES``."""

    def __init__(self, name: str) -> None:
        self.name = name
        choices = ", ".join(sorted(SERVICES))
        super().__init__(f"Unknown service {name!r}; expected one of: {choices}")

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class ServiceDefinition:
    """Describes one resource collection service.

    Attributes
    ----------
    name : str
        Short identifier, also used for the port override variable
        (``<NAME>_PORT``).
    title : str
        Human‑readable name used in the startup line and the OpenAPI title.
    record_name : str
        Singular noun for a stored record, used in log messages.
    port : int
        Default TCP port the service binds to.
    create_path : str
        Route that accepts ``POST`` requests to append a record.
    list_path : str
        Route that answers ``GET`` requests with the whole collection.
    """

    name: str
    title: str
    record_name: str
    port: int
    create_path: str
    list_path: str


SERVICES: Dict[str, ServiceDefinition] = {
    "users": ServiceDefinition(
        name="users",
        title="User Service",
        record_name="user",
        port=3000,
        create_path="/register",
        list_path="/users",
    ),
    "products": ServiceDefinition(
        name="products",
        title="Product Service",
        record_name="product",
        port=3001,
        create_path="/products",
        list_path="/products",
    ),
    "orders": ServiceDefinition(
        name="orders",
        title="Order Service",
        record_name="order",
        port=3002,
        create_path="/orders",
        list_path="/orders",
    ),
}


def get_service(name: str) -> ServiceDefinition:
    """Return the definition registered under ``name``.

    Raises ``UnknownServiceError`` if no such service exists.
    """
    try:
        return SERVICES[name]
    except KeyError:
        raise UnknownServiceError(name) from None


def _optional_int(var: str) -> Optional[int]:
    value = os.getenv(var)
    return int(value) if value else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Resource Collection Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path to a log file in addition to console output.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    host: str = os.getenv("HOST", "0.0.0.0")

    # Per‑service port overrides.  When unset, the port from the
    # service definition is used.
    users_port: Optional[int] = _optional_int("USERS_PORT")
    products_port: Optional[int] = _optional_int("PRODUCTS_PORT")
    orders_port: Optional[int] = _optional_int("ORDERS_PORT")

    def port_for(self, service: ServiceDefinition) -> int:
        """Return the port ``service`` should bind to."""
        override = getattr(self, f"{service.name}_port", None)
        return override if override is not None else service.port


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
