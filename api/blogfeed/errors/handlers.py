"""Exception handlers for Blog Feed API."""

import logging
from typing import Any, Dict, List, Union
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from pydantic import ValidationError

from .problem_details import ProblemDetailException, create_problem_response

logger = logging.getLogger(__name__)


# Map common HTTP status codes to appropriate titles
STATUS_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout"
}


def summarize_errors(errors: List[Dict[str, Any]]) -> tuple[str, List[Dict[str, Any]]]:
    """Flatten pydantic errors into a message and JSON-safe error entries."""
    messages = []
    entries = []
    for error in errors:
        loc = " -> ".join(str(x) for x in error["loc"])
        messages.append(f"{loc}: {error['msg']}")
        entries.append({
            "loc": [str(x) for x in error["loc"]],
            "msg": error["msg"],
            "type": error["type"]
        })
    return "; ".join(messages), entries


async def problem_detail_exception_handler(
    request: Request, 
    exc: ProblemDetailException
) -> JSONResponse:
    """Handle ProblemDetailException instances."""
    logger.info(
        f"Problem detail exception: {exc.status} - {exc.title}",
        extra={
            "status_code": exc.status,
            "path": str(request.url.path),
            "method": request.method,
            "detail": exc.detail
        }
    )
    return exc.to_response(request)


async def http_exception_handler(
    request: Request, 
    exc: Union[HTTPException, StarletteHTTPException]
) -> JSONResponse:
    """Handle FastAPI HTTPException and Starlette HTTPException."""
    logger.info(
        f"HTTP exception: {exc.status_code} - {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": str(request.url.path),
            "method": request.method
        }
    )
    
    response = create_problem_response(
        status=exc.status_code,
        title=STATUS_TITLES.get(exc.status_code, "HTTP Error"),
        detail=str(exc.detail) if exc.detail else None,
        request=request
    )
    
    for key, value in (getattr(exc, "headers", None) or {}).items():
        response.headers[key] = value
    
    return response


async def validation_exception_handler(
    request: Request, 
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors (bad query or path parameters)."""
    detail, entries = summarize_errors(exc.errors())
    logger.info(
        f"Validation error: {detail}",
        extra={
            "path": str(request.url.path),
            "method": request.method
        }
    )
    
    return create_problem_response(
        status=422,
        title="Validation Error",
        detail="Validation failed: " + detail,
        request=request,
        validation_errors=entries
    )


async def pydantic_validation_exception_handler(
    request: Request,
    exc: ValidationError
) -> JSONResponse:
    """Handle pydantic errors raised while building models in code."""
    detail, entries = summarize_errors(exc.errors())
    logger.info(
        f"Pydantic validation error: {detail}",
        extra={
            "path": str(request.url.path),
            "method": request.method
        }
    )
    
    return create_problem_response(
        status=400,
        title="Validation Error",
        detail="Data validation failed: " + detail,
        request=request,
        validation_errors=entries
    )


async def general_exception_handler(
    request: Request, 
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions, including storage failures."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__} - {str(exc)}",
        extra={
            "path": str(request.url.path),
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )
    
    # Don't expose internal error details
    return create_problem_response(
        status=500,
        title="Internal Server Error",
        detail="An unexpected error occurred",
        request=request
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(ProblemDetailException, problem_detail_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
    
    # Catch-all for unexpected exceptions
    app.add_exception_handler(Exception, general_exception_handler)
