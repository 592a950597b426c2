"""
Error handlers for the DocSign API.

Every client error in this API is a 400 with an {"error": ...} body.
FastAPI's default for a malformed body is a 422 with a pydantic error
list, so that case is remapped here.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

SIGNATURE_REQUIRED = "Signature is required"
SIGN_FAILED = "Document not found or already signed"
INVALID_BODY = "Invalid request body"


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Error entries carry the rejected input; keep body values out of the log.
    problems = [(e["loc"], e["type"]) for e in exc.errors()]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, problems)
    return error_response(INVALID_BODY)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
