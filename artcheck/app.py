"""
FastAPI application entry point for the artcheck API.
"""

from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from artcheck.config import Settings, get_settings
from artcheck.controllers import failure
from artcheck.dependencies import Backends, build_container
from artcheck.routes import router, status_router
from artcheck.storage import StorageError

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, backends: Optional[Backends] = None
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO)
    )

    app = FastAPI(title="Artcheck API", version="0.1.0")
    app.state.settings = settings
    app.state.container = build_container(settings, backends)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return failure("Storage failure", status_code=500, error=str(exc))

    app.include_router(status_router)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
