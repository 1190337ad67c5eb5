"""
Request error type and the exception handlers that render it.

Services raise RequestError with an HTTP status and a message; the handler
turns it into `{"detail": message}` with that exact status. Nothing is
retried: every rule violation ends the request.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

logger = get_logger(__name__)


class RequestError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"<RequestError({self.status_code}, {self.message!r})>"


def bad_request(message: str = "bad request") -> RequestError:
    return RequestError(status.HTTP_400_BAD_REQUEST, message)


def unauthorized(message: str = "unauthorized") -> RequestError:
    return RequestError(status.HTTP_401_UNAUTHORIZED, message)


def payment_required(message: str = "Payment required") -> RequestError:
    return RequestError(status.HTTP_402_PAYMENT_REQUIRED, message)


def forbidden(message: str = "forbidden") -> RequestError:
    return RequestError(status.HTTP_403_FORBIDDEN, message)


def not_found(message: str = "not found") -> RequestError:
    return RequestError(status.HTTP_404_NOT_FOUND, message)


def conflict(message: str) -> RequestError:
    return RequestError(status.HTTP_409_CONFLICT, message)


async def request_error_handler(request: Request, exc: RequestError) -> JSONResponse:
    logger.info(
        "request_rejected",
        status_code=exc.status_code,
        reason=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are a client error (400), not FastAPI's default 422."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.info("request_validation_failed", errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestError, request_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
