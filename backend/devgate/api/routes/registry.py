"""Route Registry — builds the route table with the dev route always first.

Invariants:
    - After any number of rebuilds: exactly one GET /dev route (when enabled), ahead of
      every application route
    - Application routers are registered in the order given; none are dropped
    - Routes the registry did not add (OpenAPI schema, docs) are captured once, on the
      first rebuild, as app.state.base_routes and restored on every rebuild

Design Decisions:
    - Explicit rebuild function called by create_app (and by anything reloading routers)
      instead of wrapping FastAPI's registration methods
    - Rebuilt from the recorded base list, never by filtering on route classes: how
      include_router stores routes differs between FastAPI releases
"""

from collections.abc import Sequence

from fastapi import APIRouter, FastAPI

from devgate.api.routes import dev


def rebuild_route_table(
    app: FastAPI, routers: Sequence[APIRouter], include_dev: bool = True,
) -> None:
    """Replace all registered routes: dev router, base routes, then routers in order."""
    if not hasattr(app.state, "base_routes"):
        app.state.base_routes = list(app.router.routes)
    app.router.routes.clear()
    if include_dev:
        app.include_router(dev.router)
    app.router.routes.extend(app.state.base_routes)
    for router in routers:
        app.include_router(router)
    app.openapi_schema = None
