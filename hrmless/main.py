"""FastAPI application entry point: the host's view of the connector."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hrmless.actions.router import ACTIONS
from hrmless.api.actions import router as actions_router
from hrmless.api.oauth import router as oauth_router
from hrmless.core.config import VERSION
from hrmless.core.errors import HrmlessError
from hrmless.core.logging import logger, setup_logging

# Configure logging
setup_logging()

# Response status per error kind; remote failures surface as bad gateway
ERROR_STATUS = {
    "NotFound": 404,
    "Unauthorized": 401,
    "MissingParameter": 400,
    "AuthenticationTestFailure": 401,
    "HttpFailure": 502,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    logger.info("application_ready", actions=len(ACTIONS))
    yield
    logger.info("application_stopped")


async def handle_hrmless_error(request: Request, exc: Exception) -> JSONResponse:
    """Render domain errors as {detail, error_code}."""
    if not isinstance(exc, HrmlessError):
        raise exc

    status_code = ERROR_STATUS.get(exc.kind, 500)
    logger.warning(
        "request_failed",
        path=request.url.path,
        error_code=exc.kind,
        upstream_status=exc.status,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


app = FastAPI(
    title="HRMLESS Connector",
    description="HRMLESS recruiting API exposed as automation actions",
    version=VERSION,
    lifespan=lifespan,
)

app.add_exception_handler(HrmlessError, handle_hrmless_error)

app.include_router(actions_router)
app.include_router(oauth_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "HRMLESS Connector"}
