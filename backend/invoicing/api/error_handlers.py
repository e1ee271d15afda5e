"""Error Handlers — map escaped exceptions onto JSON error responses.

Invariants:
    - InvoicingError → exc.http_status with to_response(): the user-facing message,
      never the internal one when a user message was attached
    - Logged at the level matching the error's severity, tagged with the action
      and invoice id the failing action recorded in exc.context
    - Any other exception → 500 with a generic body, traceback logged only

Design Decisions:
    - No RequestValidationError handler: routes read raw forms and form
      validation comes back as ActionState, so it never escapes as an exception
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from invoicing.core.errors import ErrorCategory, ErrorSeverity, InvoicingError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}

_INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


async def invoicing_error_handler(request: Request, exc: InvoicingError) -> JSONResponse:
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "action": exc.context.action,
            "invoice_id": exc.context.invoice_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc, extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_INTERNAL_ERROR_BODY,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvoicingError, invoicing_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
