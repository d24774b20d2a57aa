"""Unified entry point for the resource collection services.

Each service (users, products, orders) is normally deployed as its own
process.  This script launches one of them, or all three concurrently
on a single event loop for local development.  Every service gets its
own application and its own in‑memory store, so nothing is shared
between them.

Host, ports and logging are read from environment variables (see
``collection_services.app.core.config``).

Usage:
    python run.py products
    python run.py all --host 127.0.0.1
"""
import argparse
import asyncio
import logging
from typing import List, Optional, Sequence

from uvicorn import Config, Server

from collection_services.app.core.config import SERVICES, ServiceDefinition, get_service, settings
from collection_services.app.main import create_app

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run resource collection services.")
    ap.add_argument(
        "service",
        choices=sorted(SERVICES) + ["all"],
        help="Service to run, or 'all' to run every service in one process.",
    )
    ap.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    ap.add_argument("--log-level", default=settings.log_level.lower(), help="Uvicorn log level")
    return ap.parse_args(argv)


def selected_services(name: str) -> List[ServiceDefinition]:
    """Return the definitions to launch for the CLI ``service`` argument."""
    if name == "all":
        return list(SERVICES.values())
    return [get_service(name)]


def build_server(definition: ServiceDefinition, host: str, log_level: str = "info") -> Server:
    """Create a Uvicorn server for one service on its configured port."""
    port = settings.port_for(definition)
    app = create_app(definition, port=port)
    config = Config(app=app, host=host, port=port, reload=False, log_level=log_level)
    return Server(config)


async def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the selected services until one of them stops."""
    args = parse_args(argv)
    servers = [build_server(d, args.host, args.log_level) for d in selected_services(args.service)]
    tasks = [asyncio.create_task(server.serve()) for server in servers]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logger.error("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
