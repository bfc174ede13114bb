"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.routes import customers, health
from .config import settings
from .errors import AppError, ErrorCode

_STATUS_BY_CODE = {
    ErrorCode.INVALID_CONFIGURATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.SOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STRICT_INGESTION_FAILURE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.RECORD_PROCESSING_FAILURE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=exc.to_dict(),
    )


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)
    app.add_exception_handler(AppError, app_error_handler)

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(customers.router, prefix=settings.api_prefix)
    return app


app = create_app()
