# mylife/middleware/error_handlers.py
"""
App-level exception handlers. Every failure that escapes a router is
rendered as the same envelope the services return.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from mylife.core.errors import UnauthenticatedError
from mylife.core.results import Invalid, Outcome, Unauthenticated, present
from mylife.schemas.base import BaseResponse

logger = structlog.get_logger(__name__)

def _envelope(outcome_or_response, headers=None) -> JSONResponse:
    body = outcome_or_response if isinstance(outcome_or_response, BaseResponse) else present(outcome_or_response)
    return JSONResponse(
        status_code=body.status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )

def _field_errors(exc: RequestValidationError) -> list:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return errors

async def handle_unauthenticated(request: Request, exc: UnauthenticatedError) -> JSONResponse:
    logger.info("request_unauthenticated", reason=exc.message)
    outcome: Outcome = Unauthenticated(exc.message)
    return _envelope(outcome, headers={"WWW-Authenticate": "Bearer"})

async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.info("request_validation_failed", errors=errors)
    return _envelope(Invalid("Validation failed", errors))

async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = BaseResponse(message=str(exc.detail), is_success=False, status_code=exc.status_code)
    return _envelope(body, headers=getattr(exc, "headers", None))

async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", error_type=type(exc).__name__)
    body = BaseResponse(message="Internal server error", is_success=False, status_code=500)
    # this response bypasses RequestIdMiddleware's send wrapper
    request_id = getattr(request.state, "request_id", None)
    return _envelope(body, headers={"X-Request-ID": request_id} if request_id else None)

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnauthenticatedError, handle_unauthenticated)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
