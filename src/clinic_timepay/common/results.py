from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SkipReason:
    item: Any
    reason: str


@dataclass(frozen=True)
class ItemFailure:
    item: Any
    error: Exception


@dataclass
class BatchResult(Generic[T]):
    """Outcome of a best-effort batch: one bad item never aborts the run."""

    created: list[T] = field(default_factory=list)
    skipped: list[SkipReason] = field(default_factory=list)
    failed: list[ItemFailure] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    def skip(self, item: Any, reason: str) -> None:
        self.skipped.append(SkipReason(item=item, reason=reason))

    def fail(self, item: Any, error: Exception) -> None:
        self.failed.append(ItemFailure(item=item, error=error))

    def summary(self) -> dict:
        return {
            "created": self.created_count,
            "skipped": self.skipped_count,
            "failed": self.failed_count,
            "errors": [str(f.error) for f in self.failed],
        }
