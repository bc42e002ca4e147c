from app.schemas.api_response import APIResponse
from app.schemas.coupon import CouponCreate, CouponResponse, CouponUpdate

__all__ = [
    "APIResponse",
    "CouponCreate",
    "CouponResponse",
    "CouponUpdate",
]
