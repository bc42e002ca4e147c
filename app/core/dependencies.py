"""Process-wide store and cache instances, exposed as FastAPI dependencies."""

from app.core.cache import LookasideCache
from app.core.config import settings
from app.repositories.coupon_repository import CouponRepository, InMemoryCouponRepository

coupon_repository = InMemoryCouponRepository(seed=settings.SEED_COUPONS)

coupon_list_cache = LookasideCache(
    absolute_expiration=settings.CACHE_ABSOLUTE_EXPIRATION_SECONDS,
    sliding_expiration=settings.CACHE_SLIDING_EXPIRATION_SECONDS,
)


def get_coupon_repository() -> CouponRepository:
    return coupon_repository


def get_coupon_list_cache() -> LookasideCache | None:
    """Return the listing cache, or None when caching is switched off."""
    if not settings.CACHE_ENABLED:
        return None
    return coupon_list_cache
