from app.repositories.coupon_repository import CouponRepository, InMemoryCouponRepository

__all__ = [
    "CouponRepository",
    "InMemoryCouponRepository",
]
