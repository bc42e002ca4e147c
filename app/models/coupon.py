"""Coupon entity held by the in-memory store."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Coupon:
    """A discount record.

    ``id``, ``created`` and ``last_updated`` are assigned by the repository;
    callers building a new coupon leave them at their defaults.
    """

    name: str
    percent: int
    is_active: bool = False
    id: int = 0
    created: datetime | None = None
    last_updated: datetime | None = None
