from dataclasses import dataclass
from typing import Any, Optional


class PreconditionError(ValueError):
    """A required argument was missing; raised before any request is made."""


def require(value: Any, message: str) -> Any:
    if value is None:
        raise PreconditionError(message)
    return value


@dataclass
class ApiError(Exception):
    """Normalized error for GitHub API operations."""

    status_code: int
    message: str
    operation: str
    details: Optional[dict] = None

    def __str__(self) -> str:  # pragma: no cover - simple formatter
        base = f"{self.operation} failed with status {self.status_code}: {self.message}"
        if self.details:
            return f"{base} | details={self.details}"
        return base
