"""Wire representations of a coupon."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.core.config import settings

MIN_PERCENT = 1
MAX_PERCENT = 100


def _check_name(name: str) -> str:
    if not name.strip():
        raise ValueError("Coupon name must not be empty")
    if len(name) > settings.COUPON_NAME_MAX_LENGTH:
        raise ValueError(f"Coupon name must be at most {settings.COUPON_NAME_MAX_LENGTH} characters")
    return name


class CouponCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    percent: int = Field(ge=MIN_PERCENT, le=MAX_PERCENT)
    is_active: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)


class CouponUpdate(BaseModel):
    """Fields left unset keep their stored value."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(gt=0)
    name: str | None = None
    percent: int | None = Field(default=None, ge=MIN_PERCENT, le=MAX_PERCENT)
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_name(v)


class CouponResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    name: str
    percent: int
    is_active: bool
    created: datetime | None = None
    last_updated: datetime | None = None
