"""
Top‑level package for the resource collection services.

The package bundles three independently deployable HTTP services
(users, products and orders) that share one implementation in
``collection_services.app``, plus a small HTTP client in
``collection_services.client``.  Importing the package itself has no
side effects; all functionality lives in submodules.
"""

__all__ = []
