from __future__ import annotations

from enum import Enum


class ApiStatus(str, Enum):
    """Outcome of a mutating operation on a subscription collection."""

    SUCCESS = "success"
    SUBSCRIPTION_DUPLICATED = "subscription_duplicated"
    PERSON_NOT_FOUND = "person_not_found"
    SUBSCRIPTION_NOT_FOUND = "subscription_not_found"
    ALLOCATION_FAILURE = "allocation_failure"

    @property
    def ok(self) -> bool:
        return self is ApiStatus.SUCCESS
