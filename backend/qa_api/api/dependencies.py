"""Dependency injection providers for route handlers.

The Store is built once by the application lifespan and kept on
``app.state.store``; handlers receive it through ``get_store`` so tests can
swap it with ``app.dependency_overrides``.
"""

from fastapi import Request

from qa_api.core.repository_protocols import Store


def get_store(request: Request) -> Store:
    """Dependency provider for the process-wide Store."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store
