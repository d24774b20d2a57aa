"""
Pydantic schema definitions for API payloads.

Records are schema‑less: the services accept any JSON object (or
array) and echo it back untouched, so ``record`` only defines type
aliases for them.  Fixed‑shape responses such as the health probe use
regular Pydantic models.
"""
