"""Mappings from service-layer exceptions to HTTP error responses."""
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from blog_api.exceptions import ConflictError, ResourceNotFoundError
from blog_api.schemas import ErrorDetails


def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    body = ErrorDetails(
        timestamp=datetime.now(timezone.utc),
        message=message,
        details=f"uri={request.url.path}",
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register the handlers that render blog errors as ``ErrorDetails`` bodies."""

    @app.exception_handler(ResourceNotFoundError)
    async def not_found_handler(request: Request, exc: ResourceNotFoundError):
        return _error_response(request, 404, str(exc))

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return _error_response(request, exc.status_code, exc.message)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        return _error_response(
            request, 409, "The request conflicts with existing data"
        )
