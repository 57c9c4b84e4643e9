"""API Layer — FastAPI routes, authentication middleware and error handlers.

Invariants:
    - Routes registered explicitly through routes/registry.py (no auto-discovery)
    - Authentication happens in middleware; routes only read the resulting Identity
    - Secret values and API keys are returned as text/plain; everything else is JSON
"""
