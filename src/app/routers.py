"""REST API routers."""

from fastapi import FastAPI

from app.endpoints import (
    info,
    models,
    root,
    generate,
    history,
    health,
    metrics,
)


def include_routers(app: FastAPI) -> None:
    """Include FastAPI routers for different endpoints.

    Args:
        app: The `FastAPI` app instance.
    """
    app.include_router(root.router)

    app.include_router(info.router, prefix="/api")
    app.include_router(models.router, prefix="/api")
    app.include_router(generate.router, prefix="/api")
    app.include_router(history.router, prefix="/api")

    # probes and metrics are not part of the playground API
    app.include_router(health.router)
    app.include_router(metrics.router)
