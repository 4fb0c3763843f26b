"""API Layer — FastAPI routes, dependencies, middleware and the Response Mapper.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every rejection leaves through api/error_handlers.map_failure

Design Decisions:
    - Thin routes delegate to the Store (ADR: impureim sandwich)
"""
