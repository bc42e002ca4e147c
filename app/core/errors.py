"""Domain exceptions and the handlers that render them as response envelopes."""

import logging
from collections.abc import Mapping, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.schemas.api_response import APIResponse
from app.validators.coupon_validator import violation_messages

logger = logging.getLogger(__name__)


class CouponAPIError(Exception):
    """Base exception carrying the HTTP status and envelope messages."""

    def __init__(self, message: str, status_code: int = 400, messages: Sequence[str] | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.messages = list(messages) if messages else [message]


class DuplicateCouponNameError(CouponAPIError):
    def __init__(self) -> None:
        super().__init__("Coupon Name already Exists", status_code=400)


class CouponNotFoundError(CouponAPIError):
    def __init__(self, coupon_id: int | None = None):
        super().__init__("Invalid Id", status_code=400)
        self.coupon_id = coupon_id


def surface_messages(messages: Sequence[str]) -> list[str]:
    """Pick the violations reported to the caller: all of them, or only the first."""
    if settings.REPORT_ALL_VALIDATION_ERRORS:
        return list(messages)
    return list(messages[:1])


def error_response(
    messages: list[str],
    status_code: int,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    envelope: APIResponse[None] = APIResponse(
        is_success=False,
        status_code=status_code,
        error_messages=messages,
    )
    return JSONResponse(
        envelope.model_dump(by_alias=True, mode="json"),
        status_code=status_code,
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(CouponAPIError)
    async def handle_coupon_error(_request: Request, exc: CouponAPIError) -> JSONResponse:
        return error_response(exc.messages, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(_request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = violation_messages(exc.errors()) or ["Invalid request"]
        logger.warning("Rejected invalid request: %s", messages[0])
        return error_response(surface_messages(messages), 400)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response([str(exc.detail)], exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error: %s", exc)
        return error_response(["Internal server error"], 500)
