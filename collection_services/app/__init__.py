"""
Application package initializer.

This package contains the application factory and all of its
submodules.  The code is organised into logical pieces:

* ``core`` – configuration, logging and the in‑memory record store.
* ``schemas`` – payload types accepted and returned by the API.
* ``services`` – the create/list operations on a collection.
* ``api`` – routers that expose the services over HTTP.

Every service (users, products, orders) is an instance of the same
application built by ``create_app`` with a different
``ServiceDefinition``.
"""

from .main import create_app  # noqa: F401
