"""Coupon API endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.core.cache import COUPON_LIST_KEY, LookasideCache
from app.core.config import settings
from app.core.dependencies import get_coupon_list_cache, get_coupon_repository
from app.core.errors import CouponNotFoundError, DuplicateCouponNameError
from app.repositories.coupon_repository import CouponRepository
from app.schemas.api_response import APIResponse
from app.schemas.coupon import CouponCreate, CouponResponse, CouponUpdate
from app.services.coupon_mapper import apply_update, coupon_from_create, to_response

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": APIResponse[None], "description": "Invalid request"},
}


def _invalidate_listing(cache: LookasideCache | None) -> None:
    if cache is not None and settings.CACHE_INVALIDATE_ON_WRITE:
        cache.invalidate(COUPON_LIST_KEY)


@router.get(
    "",
    response_model=APIResponse[list[CouponResponse]],
    summary="List coupons",
)
async def list_coupons(
    repo: CouponRepository = Depends(get_coupon_repository),
    cache: LookasideCache | None = Depends(get_coupon_list_cache),
) -> APIResponse[list[CouponResponse]]:
    """List all coupons, served from the lookaside cache when warm."""

    def load() -> tuple[CouponResponse, ...]:
        return tuple(to_response(coupon) for coupon in repo.get_all())

    if cache is None:
        coupons = load()
    else:
        coupons, hit = cache.get_or_set(COUPON_LIST_KEY, load)
        logger.debug("Coupon listing cache %s", "hit" if hit else "miss")

    logger.info("Getting all coupons")
    return APIResponse(is_success=True, status_code=status.HTTP_200_OK, result=list(coupons))


@router.get(
    "/{coupon_id}",
    response_model=APIResponse[CouponResponse],
    summary="Get coupon",
    responses=ERROR_RESPONSES,
)
async def get_coupon(
    coupon_id: int,
    response: Response,
    repo: CouponRepository = Depends(get_coupon_repository),
) -> APIResponse[CouponResponse]:
    """Get a coupon by ID. An unknown ID yields a null result, not an error."""
    response.headers["Cache-Control"] = f"public, max-age={settings.COUPON_CACHE_MAX_AGE_SECONDS}"
    response.headers["Vary"] = "Accept-Encoding"

    coupon = repo.get_by_id(coupon_id)
    logger.info("Getting coupon %d (found=%s)", coupon_id, coupon is not None)
    return APIResponse(
        is_success=True,
        status_code=status.HTTP_200_OK,
        result=to_response(coupon) if coupon is not None else None,
    )


@router.post(
    "",
    response_model=APIResponse[CouponResponse],
    status_code=201,
    summary="Create coupon",
    responses=ERROR_RESPONSES,
)
async def create_coupon(
    data: CouponCreate,
    repo: CouponRepository = Depends(get_coupon_repository),
    cache: LookasideCache | None = Depends(get_coupon_list_cache),
) -> APIResponse[CouponResponse]:
    """Create a new coupon.

    Field rules on ``CouponCreate`` run before this handler; violations are
    rendered by the request validation error handler.
    """
    if repo.get_by_name(data.name):
        logger.warning("Rejected coupon create: name %r already exists", data.name)
        raise DuplicateCouponNameError()

    coupon = repo.create(coupon_from_create(data))
    _invalidate_listing(cache)
    logger.info("Created coupon %d (%s)", coupon.id, coupon.name)
    return APIResponse(
        is_success=True,
        status_code=status.HTTP_201_CREATED,
        result=to_response(coupon),
    )


@router.put(
    "",
    response_model=APIResponse[CouponResponse],
    summary="Update coupon",
    responses=ERROR_RESPONSES,
)
async def update_coupon(
    data: CouponUpdate,
    repo: CouponRepository = Depends(get_coupon_repository),
    cache: LookasideCache | None = Depends(get_coupon_list_cache),
) -> APIResponse[CouponResponse]:
    """Update an existing coupon, identified by the ``id`` in the body."""
    existing = repo.get_by_id(data.id)
    updated = repo.update(apply_update(existing, data)) if existing is not None else None
    if updated is None:
        logger.warning("Rejected coupon update: no coupon with id %d", data.id)
        raise CouponNotFoundError(data.id)

    _invalidate_listing(cache)
    logger.info("Updated coupon %d", updated.id)
    return APIResponse(is_success=True, status_code=status.HTTP_200_OK, result=to_response(updated))


@router.delete(
    "/{coupon_id}",
    response_model=APIResponse[None],
    summary="Delete coupon",
    responses=ERROR_RESPONSES,
)
async def delete_coupon(
    coupon_id: int,
    repo: CouponRepository = Depends(get_coupon_repository),
    cache: LookasideCache | None = Depends(get_coupon_list_cache),
) -> APIResponse[None]:
    """Delete a coupon by ID."""
    if not repo.delete(coupon_id):
        logger.warning("Rejected coupon delete: no coupon with id %d", coupon_id)
        raise CouponNotFoundError(coupon_id)

    _invalidate_listing(cache)
    logger.info("Deleted coupon %d", coupon_id)
    return APIResponse(is_success=True, status_code=status.HTTP_204_NO_CONTENT)
