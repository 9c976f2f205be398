"""
Application error taxonomy and FastAPI exception handlers
"""

from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import structlog

logger = structlog.get_logger(__name__)


class ErrorCategory:
    """Error categories for structured error responses"""
    NOT_FOUND = "not_found_error"
    CONFLICT = "conflict_error"
    INTEGRITY = "integrity_error"
    TRANSITION = "invalid_transition"


class AppError(Exception):
    """Base application error with structured information"""

    def __init__(
        self,
        message: str,
        category: str = ErrorCategory.CONFLICT,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.category = category
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class RecordNotFoundError(AppError):
    def __init__(self, model_name: str, record_id=None):
        super().__init__(
            message=f"{model_name} not found",
            category=ErrorCategory.NOT_FOUND,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"id": str(record_id)} if record_id is not None else None,
        )


class TenantMismatchError(RecordNotFoundError):
    """A referenced row belongs to another tenant; reported as not found"""


class DuplicateRecordError(AppError):
    def __init__(self, message: str = "Record already exists"):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFLICT,
            status_code=status.HTTP_409_CONFLICT,
        )


class IntegrityViolationError(AppError):
    def __init__(self, message: str = "Database constraint violated"):
        super().__init__(
            message=message,
            category=ErrorCategory.INTEGRITY,
            status_code=status.HTTP_409_CONFLICT,
        )


class InvalidTransitionError(AppError):
    def __init__(self, message: str):
        super().__init__(
            message=message,
            category=ErrorCategory.TRANSITION,
            status_code=status.HTTP_409_CONFLICT,
        )


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "request_failed",
        path=request.url.path,
        category=exc.category,
        message=exc.message,
    )
    content = {"detail": exc.message, "error": exc.category}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)
