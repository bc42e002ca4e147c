"""Uniform response envelope returned by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_success: bool = False
    status_code: int = 400
    result: T | None = None
    error_messages: list[str] = Field(default_factory=list)
