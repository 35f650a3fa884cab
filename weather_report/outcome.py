"""Outcome of a single weather fetch attempt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FetchOutcomeType(Enum):
    """Normalized fetch outcome types."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True)
class FetchOutcome:
    """Tagged result of one weather request.

    Attributes:
        type: Which outcome occurred.
        result: Parsed response body, only set on SUCCESS.
        status: HTTP status code, when a response was received.
        message: Diagnostic text for NETWORK_ERROR.
    """

    type: FetchOutcomeType
    result: dict[str, Any] | None = None
    status: int | None = None
    message: str | None = None

    @classmethod
    def success(cls, result: dict[str, Any]) -> FetchOutcome:
        return cls(type=FetchOutcomeType.SUCCESS, result=result, status=200)

    @classmethod
    def not_found(cls) -> FetchOutcome:
        return cls(type=FetchOutcomeType.NOT_FOUND, status=404)

    @classmethod
    def unauthorized(cls) -> FetchOutcome:
        return cls(type=FetchOutcomeType.UNAUTHORIZED, status=401)

    @classmethod
    def network_error(cls, message: str, status: int | None = None) -> FetchOutcome:
        return cls(type=FetchOutcomeType.NETWORK_ERROR, status=status, message=message)

    @property
    def ok(self) -> bool:
        """True only for SUCCESS."""
        return self.type is FetchOutcomeType.SUCCESS
