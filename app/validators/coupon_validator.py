"""Turns pydantic validation errors on coupon requests into ordered messages.

The rules themselves live on ``CouponCreate`` and ``CouponUpdate``; this
module runs them and phrases each failure for the response envelope.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from app.schemas.coupon import MAX_PERCENT, MIN_PERCENT, CouponCreate, CouponUpdate

FIELD_LABELS = {
    "name": "Coupon name",
    "percent": "Percent",
    "id": "Id",
}

RANGE_ERRORS = {"greater_than_equal", "less_than_equal"}


def describe_error(error: Mapping[str, Any]) -> str:
    """Phrase one pydantic error entry as a client-facing message."""
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    field = loc[-1] if loc else ""
    error_type = error.get("type", "")
    message = str(error.get("msg", "Invalid request"))

    if error_type == "missing" and field in FIELD_LABELS:
        return f"{FIELD_LABELS[field]} is required"
    if error_type == "value_error":
        return message.removeprefix("Value error, ")
    if field == "percent" and error_type in RANGE_ERRORS:
        return f"Percent must be between {MIN_PERCENT} and {MAX_PERCENT}"
    if field == "id" and error_type == "greater_than":
        return "Id must be greater than 0"
    return f"{'.'.join(loc)}: {message}" if loc else message


def violation_messages(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    return [describe_error(error) for error in errors]


def validate_coupon_create(payload: Mapping[str, Any]) -> list[str]:
    """Return every rule violation for a create request, in field order."""
    try:
        CouponCreate.model_validate(payload)
    except ValidationError as exc:
        return violation_messages(exc.errors())
    return []


def validate_coupon_update(payload: Mapping[str, Any]) -> list[str]:
    """Return every rule violation for an update request, in field order.

    Only ``id`` is required; ``name`` and ``percent`` are checked when sent.
    """
    try:
        CouponUpdate.model_validate(payload)
    except ValidationError as exc:
        return violation_messages(exc.errors())
    return []
