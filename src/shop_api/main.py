"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shop_api.config import get_settings
from shop_api.routes import api_router
from shop_api.services.database import open_database
from shop_common import messages

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database before serving and close it on shutdown."""
    logger.info(f"{settings.app_name} v{settings.app_version} starting")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Database backend: {settings.database_backend}")

    # Requests are only accepted once the database is open
    app.state.database = await open_database(settings)
    logger.info(f"{settings.app_name} started")

    yield

    logger.info(f"{settings.app_name} shutting down")
    await app.state.database.close()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Shop API - users, products and orders over a document database",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request bodies and query parameters."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.info("Invalid request to %s: %s", request.url.path, problems)
    return JSONResponse(
        status_code=422,
        content={"message": f"{messages.INVALID_REQUEST} {problems}".strip()},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything a route did not translate."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": messages.INTERNAL_ERROR},
    )


# Include routers
app.include_router(api_router)


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "shop_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
