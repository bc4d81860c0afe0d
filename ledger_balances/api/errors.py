"""Centralized API exception definitions and handlers."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base domain/application error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(AppError):
    """Raised when domain-level validation fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=422)


class LedgerError(AppError):
    """Raised when the ledger server could not answer a request."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message=message, status_code=status_code)


class LedgerConnectionError(LedgerError):
    """Transport-level failure talking to the ledger server."""


class RippledError(LedgerError):
    """Error object returned by rippled inside a JSON-RPC result."""

    def __init__(self, error: str, error_message: Optional[str] = None) -> None:
        super().__init__(f"{error}: {error_message}" if error_message else error)
        self.error = error
        self.error_message = error_message


class ResolutionError(LedgerError):
    """Raised when the current validated ledger index cannot be resolved."""


class FetchError(LedgerError):
    """Raised when a native balance or trustline fetch fails."""


class AccountNotFoundError(FetchError):
    """Raised when the account does not exist at the requested ledger version."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=404)


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    """Render typed application exceptions as JSON responses."""

    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler for non-domain errors."""

    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach API exception handlers once during startup."""

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
