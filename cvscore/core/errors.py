from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location)
        message = error.get("msg") or "invalid value"
        if field:
            return f"Invalid request field '{field}': {message}"
        return f"Invalid request: {message}"
    return "Invalid request"


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("request_validation_failed path=%s: %s", request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)
