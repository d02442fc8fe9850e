"""
Exception handlers that turn every failure into a localized envelope.

- APIException: its message key and params, with its status code
- other HTTPException (404 route, 405): the detail as message key
- RequestValidationError: the first error, localized, as a 400
- anything else: logged with traceback, answered with a generic 500
"""

import logging
from typing import Any, Dict, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.utils.exceptions import APIException
from common.utils.logger import log_error
from common.utils.responses import error_envelope
from fitness.http import json_response
from fitness.i18n.language import get_request_language
from fitness.i18n.validation_messages import (
    INVALID,
    REQUIRED,
    ValidationFailure,
    localize_failure,
)
from fitness.middleware.sanitize import SanitizedJSONResponse
from fitness.validation import FIELD_RULE_ERROR

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong"
INVALID_BODY_MESSAGE = "Invalid request body"


def _field_from_loc(loc: Sequence[Any]) -> Optional[str]:
    """Last string segment after the source ("body", "query", "path")."""
    names = [part for part in loc[1:] if isinstance(part, str)]
    return names[-1] if names else None


def first_validation_failure(errors: Sequence[Dict[str, Any]]) -> ValidationFailure:
    """
    Reduce pydantic errors to the first failure.

    Rule errors keep their phrase and label. Pydantic's own errors become
    the required / invalid templates for their field.
    """
    if not errors:
        return ValidationFailure(field=None, message=INVALID_BODY_MESSAGE)

    error = errors[0]
    field = _field_from_loc(error.get("loc", ()))
    error_type = error.get("type")

    if error_type == FIELD_RULE_ERROR:
        label = (error.get("ctx") or {}).get("field") or field
        return ValidationFailure(field=label, message=error.get("msg", ""))

    if field is None:
        return ValidationFailure(field=None, message=INVALID_BODY_MESSAGE)

    if error_type == "missing":
        return ValidationFailure(field=field, message=REQUIRED)

    return ValidationFailure(field=field, message=INVALID)


async def api_exception_handler(request: Request, exc: APIException):
    return json_response(
        request,
        None,
        exc.message,
        status_code=exc.status_code,
        params=exc.params,
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if isinstance(detail, dict):
        detail = detail.get("message")
    message = detail if isinstance(detail, str) and detail else GENERIC_ERROR_MESSAGE

    return json_response(
        request,
        None,
        message,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    failure = first_validation_failure(exc.errors())
    message = localize_failure(failure, get_request_language(request))
    logger.debug(f"Validation failed on {request.method} {request.url.path}: {failure}")
    return SanitizedJSONResponse(error_envelope(message), status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception):
    log_error(logger, exc, "Unhandled error", request)
    return json_response(request, None, GENERIC_ERROR_MESSAGE, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler on the application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
