"""
Service layer abstraction.

Each service encapsulates the operations on one domain.  Keeping them
here lets the API handlers stay thin and lets the storage be swapped
without touching the routes.
"""
