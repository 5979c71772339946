from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from idtoken_verifier.jose.errors import (
    DecodeError,
    InvalidURL,
    KeyNotFound,
    MalformedKey,
    MalformedSignature,
    MalformedToken,
    NetworkError,
    SignatureValidationError,
    VerificationFailed,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[SignatureValidationError], int] = {
    InvalidURL: 400,
    MalformedToken: 400,
    MalformedSignature: 400,
    KeyNotFound: 401,
    VerificationFailed: 401,
    NetworkError: 502,
    DecodeError: 502,
    MalformedKey: 502,
}


def status_for(exc: SignatureValidationError) -> int:
    if isinstance(exc, NetworkError) and exc.timeout:
        return 504
    for error_cls in type(exc).__mro__:
        if error_cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_cls]
    return 500


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(SignatureValidationError)
    async def signature_error_handler(_: Request, exc: SignatureValidationError):
        return JSONResponse(
            status_code=status_for(exc),
            content={"valid": False, "error": exc.kind, "detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(_: Request, exc: Exception):
        logger.exception("unhandled error", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
