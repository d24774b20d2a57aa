"""
API package containing the HTTP routes.

The routes of a service are not known until its ``ServiceDefinition``
is chosen, so instead of module‑level routers this package exposes
``build_router`` which assembles one for a given definition.
"""
