"""Conversions between coupon wire representations and the stored entity."""

from dataclasses import replace

from app.models.coupon import Coupon
from app.schemas.coupon import CouponCreate, CouponResponse, CouponUpdate


def coupon_from_create(data: CouponCreate) -> Coupon:
    return Coupon(name=data.name, percent=data.percent, is_active=data.is_active)


def apply_update(coupon: Coupon, data: CouponUpdate) -> Coupon:
    """Return a copy of ``coupon`` with the fields set on ``data`` applied.

    The ID and timestamps are never taken from the request.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})
    return replace(coupon, **changes)


def to_response(coupon: Coupon) -> CouponResponse:
    return CouponResponse.model_validate(coupon)
