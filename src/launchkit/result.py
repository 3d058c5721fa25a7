"""
Uniform result envelope returned by every public operation.

Operations never raise across the package boundary: configuration,
validation, transport and decoding failures all come back as
Result(success=False, error=...).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


def _serialize(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    return value


@dataclass
class Result(Generic[T]):
    """Outcome of a single operation."""
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[Union[str, dict]] = None

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "Result[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: Union[str, dict]) -> "Result[T]":
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        out: dict = {"success": self.success}
        if self.data is not None:
            out["data"] = _serialize(self.data)
        if self.message is not None:
            out["message"] = self.message
        if self.error is not None:
            out["error"] = self.error
        return out


class BulkOutcome(str, Enum):
    """Aggregate state of a bulk operation."""
    ALL_SUCCEEDED = "all_succeeded"
    PARTIAL = "partial"
    ALL_FAILED = "all_failed"

    @classmethod
    def from_counts(cls, succeeded: int, attempted: int) -> "BulkOutcome":
        if succeeded == attempted:
            return cls.ALL_SUCCEEDED
        if succeeded == 0:
            return cls.ALL_FAILED
        return cls.PARTIAL


@dataclass
class BulkResult(Result[List[T]]):
    """
    Result of a partial-failure-tolerant bulk operation.

    success stays True once the sequence has run to completion; callers
    that care about degradation check ``outcome`` (or ``failures``).
    """
    outcome: BulkOutcome = BulkOutcome.ALL_SUCCEEDED
    attempted: int = 0
    failures: List[Union[str, dict]] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.data or [])

    def to_dict(self) -> dict:
        out = super().to_dict()
        out.update({
            "outcome": self.outcome.value,
            "attempted": self.attempted,
            "succeeded": self.succeeded,
            "failures": self.failures,
        })
        return out
