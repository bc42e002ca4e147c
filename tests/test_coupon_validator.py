"""Tests for coupon create/update validation rules."""

import pytest
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.coupon import CouponCreate, CouponUpdate
from app.validators.coupon_validator import (
    describe_error,
    validate_coupon_create,
    validate_coupon_update,
)


class TestCouponSchemas:
    def test_percent_range_on_create(self):
        with pytest.raises(ValidationError):
            CouponCreate(name="X", percent=0)
        with pytest.raises(ValidationError):
            CouponCreate(name="X", percent=101)
        assert CouponCreate(name="X", percent=100).percent == 100

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            CouponCreate(name="  ", percent=10)

    def test_update_name_optional(self):
        data = CouponUpdate(id=4)
        assert data.name is None
        assert data.percent is None


class TestValidateCouponCreate:
    def test_valid(self):
        assert validate_coupon_create({"name": "SUMMER10", "percent": 10}) == []

    def test_accepts_camel_case(self):
        assert validate_coupon_create({"name": "SUMMER10", "percent": 10, "isActive": True}) == []

    def test_missing_fields_reported_in_order(self):
        assert validate_coupon_create({}) == [
            "Coupon name is required",
            "Percent is required",
        ]

    def test_blank_name(self):
        errors = validate_coupon_create({"name": "   ", "percent": 10})
        assert errors == ["Coupon name must not be empty"]

    def test_name_too_long(self, monkeypatch):
        monkeypatch.setattr(settings, "COUPON_NAME_MAX_LENGTH", 5)
        errors = validate_coupon_create({"name": "TOOLONG", "percent": 10})
        assert errors == ["Coupon name must be at most 5 characters"]

    def test_percent_bounds(self):
        assert validate_coupon_create({"name": "X", "percent": 1}) == []
        assert validate_coupon_create({"name": "X", "percent": 100}) == []
        assert validate_coupon_create({"name": "X", "percent": 0}) == [
            "Percent must be between 1 and 100"
        ]
        assert validate_coupon_create({"name": "X", "percent": 101}) == [
            "Percent must be between 1 and 100"
        ]

    def test_multiple_violations(self):
        errors = validate_coupon_create({"name": "", "percent": -5})
        assert errors == [
            "Coupon name must not be empty",
            "Percent must be between 1 and 100",
        ]

    def test_wrong_type_keeps_field_name(self):
        errors = validate_coupon_create({"name": "X", "percent": "lots"})
        assert len(errors) == 1
        assert errors[0].startswith("percent: ")


class TestValidateCouponUpdate:
    def test_valid_with_only_id(self):
        assert validate_coupon_update({"id": 1}) == []

    def test_missing_id(self):
        assert validate_coupon_update({"percent": 10}) == ["Id is required"]

    def test_non_positive_id(self):
        assert validate_coupon_update({"id": 0}) == ["Id must be greater than 0"]

    def test_optional_fields_checked_when_sent(self):
        errors = validate_coupon_update({"id": 1, "name": "", "percent": 500})
        assert errors == [
            "Coupon name must not be empty",
            "Percent must be between 1 and 100",
        ]


class TestDescribeError:
    def test_strips_request_location_prefix(self):
        error = {"loc": ("body", "percent"), "type": "less_than_equal", "msg": "too big"}
        assert describe_error(error) == "Percent must be between 1 and 100"

    def test_unknown_error_uses_location_and_message(self):
        error = {"loc": ("path", "coupon_id"), "type": "int_parsing", "msg": "Input should be a valid integer"}
        assert describe_error(error) == "coupon_id: Input should be a valid integer"

    def test_no_location(self):
        assert describe_error({"loc": ("body",), "type": "missing", "msg": "Field required"}) == "Field required"
