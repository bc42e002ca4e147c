"""Coupon repository for data access."""

import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from app.models.coupon import Coupon

SEED_COUPONS: tuple[Coupon, ...] = (
    Coupon(name="10OFF", percent=10, is_active=True),
    Coupon(name="20OFF", percent=20, is_active=False),
)


class CouponRepository(ABC):
    """Storage interface the route handlers depend on."""

    @abstractmethod
    def get_all(self) -> list[Coupon]:
        """Get all coupons in insertion order."""

    @abstractmethod
    def get_by_id(self, coupon_id: int) -> Coupon | None:
        """Get a coupon by ID."""

    @abstractmethod
    def get_by_name(self, name: str) -> Coupon | None:
        """Get a coupon by name, ignoring case."""

    @abstractmethod
    def create(self, coupon: Coupon) -> Coupon:
        """Store a new coupon, assigning its ID and timestamps."""

    @abstractmethod
    def update(self, coupon: Coupon) -> Coupon | None:
        """Replace the stored coupon with the same ID."""

    @abstractmethod
    def delete(self, coupon_id: int) -> bool:
        """Delete a coupon by ID."""


class InMemoryCouponRepository(CouponRepository):
    """Process-local coupon store.

    Coupons live in a plain list for the lifetime of the process. IDs come
    from a counter that only moves forward, so deleting the newest coupon
    never frees its ID for reuse. Every access goes through one lock.
    """

    def __init__(self, seed: bool = True):
        self._seed = seed
        self._lock = threading.Lock()
        self._coupons: list[Coupon] = []
        self._last_id = 0
        self.reset()

    def reset(self) -> None:
        """Drop every coupon and restart IDs, re-applying seed data if enabled."""
        with self._lock:
            self._coupons = []
            self._last_id = 0
        if self._seed:
            for coupon in SEED_COUPONS:
                self.create(replace(coupon))

    def get_all(self) -> list[Coupon]:
        with self._lock:
            return list(self._coupons)

    def get_by_id(self, coupon_id: int) -> Coupon | None:
        with self._lock:
            return self._find(coupon_id)

    def get_by_name(self, name: str) -> Coupon | None:
        wanted = name.lower()
        with self._lock:
            for coupon in self._coupons:
                if coupon.name.lower() == wanted:
                    return coupon
        return None

    def create(self, coupon: Coupon) -> Coupon:
        now = datetime.now(UTC)
        with self._lock:
            self._last_id = max([self._last_id, *(c.id for c in self._coupons)]) + 1
            stored = replace(coupon, id=self._last_id, created=now, last_updated=now)
            self._coupons.append(stored)
        return stored

    def update(self, coupon: Coupon) -> Coupon | None:
        with self._lock:
            for index, current in enumerate(self._coupons):
                if current.id != coupon.id:
                    continue
                now = datetime.now(UTC)
                # last_updated must move strictly forward even within one clock tick
                if current.last_updated is not None and now <= current.last_updated:
                    now = current.last_updated + timedelta(microseconds=1)
                stored = replace(coupon, created=current.created, last_updated=now)
                self._coupons[index] = stored
                return stored
        return None

    def delete(self, coupon_id: int) -> bool:
        with self._lock:
            coupon = self._find(coupon_id)
            if coupon is None:
                return False
            self._coupons.remove(coupon)
            return True

    def _find(self, coupon_id: int) -> Coupon | None:
        for coupon in self._coupons:
            if coupon.id == coupon_id:
                return coupon
        return None
