"""Result types for store operations."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ResultStatus(Enum):
    """Status of an operation result."""

    SUCCESS = "success"
    VALIDATION_FAILED = "validation_failed"
    CONFLICT = "conflict"
    ERROR = "error"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self is ResultStatus.SUCCESS

    def is_failure(self) -> bool:
        """Check if status indicates failure."""
        return not self.is_success()


@dataclass
class OperationResult:
    """Result of a single store operation."""

    status: ResultStatus
    message: str
    key: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    errors: list[str] | None = None

    @property
    def success(self) -> bool:
        """Check if the operation succeeded."""
        return self.status.is_success()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        result = {
            "status": self.status.value,
            "message": self.message,
            "key": self.key,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.errors:
            result["errors"] = self.errors

        return result
