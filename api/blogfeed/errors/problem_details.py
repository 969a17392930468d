"""Problem Details (RFC 9457) responses for Blog Feed API."""

from typing import Optional, Any
from pydantic import BaseModel, Field
from fastapi import Request
from fastapi.responses import JSONResponse


PROBLEM_JSON = "application/problem+json"


class ProblemDetail(BaseModel):
    """Problem Details as defined in RFC 9457."""
    
    type: str = Field(default="about:blank", description="A URI reference that identifies the problem type")
    title: str = Field(description="A short, human-readable summary of the problem type")
    status: int = Field(description="The HTTP status code")
    detail: Optional[str] = Field(default=None, description="A human-readable explanation specific to this occurrence")
    instance: Optional[str] = Field(default=None, description="A URI reference that identifies the specific occurrence")
    
    # Extension members such as validation_errors
    model_config = {"extra": "allow"}


class ProblemDetailException(Exception):
    """Base exception rendered as a Problem Details response.
    
    Subclasses fix ``status`` and ``title``; ``detail`` and any keyword
    extensions vary per occurrence.
    """
    
    status: int = 500
    title: str = "Internal Server Error"
    default_detail: Optional[str] = None
    
    def __init__(
        self,
        detail: Optional[str] = None,
        type_uri: str = "about:blank",
        instance: Optional[str] = None,
        **extensions: Any
    ):
        self.detail = detail if detail is not None else self.default_detail
        self.type_uri = type_uri
        self.instance = instance
        self.extensions = extensions
        super().__init__(self.detail or self.title)
    
    def to_response(self, request: Optional[Request] = None) -> JSONResponse:
        """Convert to JSONResponse with Problem Details format."""
        return create_problem_response(
            status=self.status,
            title=self.title,
            detail=self.detail,
            type_uri=self.type_uri,
            instance=self.instance,
            request=request,
            **self.extensions
        )


class BadRequestError(ProblemDetailException):
    """400 Bad Request error."""
    
    status = 400
    title = "Bad Request"


class NotFoundError(ProblemDetailException):
    """404 Not Found error."""
    
    status = 404
    title = "Not Found"
    default_detail = "Resource not found"


class ServiceUnavailableError(ProblemDetailException):
    """503 Service Unavailable error."""
    
    status = 503
    title = "Service Unavailable"
    default_detail = "Service temporarily unavailable"


def create_problem_response(
    status: int,
    title: str,
    detail: Optional[str] = None,
    type_uri: str = "about:blank",
    instance: Optional[str] = None,
    request: Optional[Request] = None,
    **extensions: Any
) -> JSONResponse:
    """Create a Problem Details response."""
    if instance is None and request:
        instance = str(request.url.path)
    
    problem = ProblemDetail(
        type=type_uri,
        title=title,
        status=status,
        detail=detail,
        instance=instance,
        **extensions
    )
    
    return JSONResponse(
        status_code=status,
        content=problem.model_dump(mode="json", exclude_none=True),
        media_type=PROBLEM_JSON
    )
