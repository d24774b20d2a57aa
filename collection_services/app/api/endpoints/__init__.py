"""
Endpoint subpackage.

Each module defines the routes for one concern.  The routers are
aggregated in ``api/router.py`` and then included in the application.
"""
