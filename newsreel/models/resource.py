"""Fetch result wrapper published by the news presenter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ResourceStatus(Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Resource(Generic[T]):
    """State of a fetch: in flight, finished with data, or failed with a message."""

    status: ResourceStatus
    data: T | None = None
    message: str | None = None

    @classmethod
    def loading(cls) -> Resource[T]:
        return cls(ResourceStatus.LOADING)

    @classmethod
    def success(cls, data: T) -> Resource[T]:
        return cls(ResourceStatus.SUCCESS, data=data)

    @classmethod
    def error(cls, message: str) -> Resource[T]:
        return cls(ResourceStatus.ERROR, message=message)
