"""Definition of FastAPI based web service."""

import os
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

import constants
import metrics
import version
from app import routers
from app.exception_handlers import register_exception_handlers
from client import CompletionClientHolder
from configuration import configuration
from log import get_logger

logger = get_logger(__name__)

logger.info("Initializing app")

# each uvicorn worker imports this module, so the configuration is loaded here
# unless somebody (CLI, tests) has done it already
if not configuration.is_loaded():
    configuration.load_configuration(os.environ.get(constants.ENV_CONFIG_PATH))

service_name = configuration.configuration.name


# running on FastAPI startup
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """
    Initialize app resources.

    FastAPI lifespan context: checks the default API key, creates the
    completion API client and the prompt history before serving requests
    and closes the client on shutdown.
    """
    configuration.check_api_key()
    if not configuration.upstream_configuration.has_api_key:
        logger.warning("No default API key configured, requests must supply one")
    CompletionClientHolder().load(configuration.upstream_configuration)
    history_cache = configuration.history_cache
    logger.info("Prompt history ready: %s", history_cache.ready())
    logger.info("App startup complete")

    yield

    await CompletionClientHolder().close()
    logger.info("App shutdown complete")


app = FastAPI(
    title=f"{service_name} service - OpenAPI",
    summary=f"{service_name} service API specification.",
    description=f"{service_name} service API specification.",
    version=version.__version__,
    license_info={
        "name": "Apache 2.0",
        "url": "https://www.apache.org/licenses/LICENSE-2.0.html",
    },
    servers=[
        {"url": "http://localhost:3000/", "description": "Locally running service"}
    ],
    lifespan=lifespan,
)

cors = configuration.service_configuration.cors

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.allow_origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)


@app.middleware("http")
async def rest_api_metrics(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Middleware with REST API counter update and request logging logic."""
    path = request.url.path
    logger.debug("Received request for path: %s", path)

    start = time.monotonic()
    response = await call_next(request)
    duration = time.monotonic() - start

    # the router stores the matched route in the request scope;
    # ignore paths that are not part of the app routes
    if request.scope.get("route") is None:
        return response

    metrics.response_duration_seconds.labels(path).observe(duration)
    duration_ms = duration * 1000

    if path.startswith("/api"):
        logger.info(
            "%s %s %d in %.0fms",
            request.method,
            path,
            response.status_code,
            duration_ms,
        )

    # ignore /metrics endpoint that will be called periodically
    if not path.endswith("/metrics"):
        # just update metrics
        metrics.rest_api_calls_total.labels(path, response.status_code).inc()
    return response


logger.info("Including routers")
routers.include_routers(app)
register_exception_handlers(app)