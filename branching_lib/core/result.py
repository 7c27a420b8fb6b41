"""
Operation result types for structured feedback.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from enum import Enum

class OperationStatus(Enum):
    """Status of an operation."""
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    FAILURE = "failure"

class ErrorCode(Enum):
    """Standard error codes for host consumption."""
    NO_SITES = "NO_SITES"
    NO_PATH = "NO_PATH"
    LIFETIME_NOT_SET = "LIFETIME_NOT_SET"
    NOT_SETTLED = "NOT_SETTLED"

@dataclass
class OperationResult:
    """
    Structured result from a mutating network operation.

    Runtime conditions such as an unreachable wall endpoint are reported
    here as failures instead of being raised.
    """

    status: OperationStatus
    message: str = ""
    new_ids: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    error_codes: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def is_success(self) -> bool:
        """True for full and partial success."""
        return self.status in (OperationStatus.SUCCESS, OperationStatus.PARTIAL_SUCCESS)

    def is_failure(self) -> bool:
        """True when nothing was changed because the operation failed."""
        return self.status == OperationStatus.FAILURE

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def add_error(self, error: str, code: Optional[ErrorCode] = None) -> None:
        """Add an error message with optional error code."""
        self.errors.append(error)
        if code is not None:
            self.error_codes.append(code.value)

    def to_dict(self) -> dict:
        """Plain-dict form for logging or JSON output."""
        return {
            "status": self.status.value,
            "message": self.message,
            "new_ids": self.new_ids,
            "warnings": self.warnings,
            "errors": self.errors,
            "error_codes": self.error_codes,
            "metadata": self.metadata,
        }

    @classmethod
    def success(cls, message: str = "", **kwargs) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, **kwargs)

    @classmethod
    def failure(
        cls,
        message: str = "",
        code: Optional[ErrorCode] = None,
        **kwargs,
    ) -> "OperationResult":
        """Create a failure result, recording ``message`` as an error."""
        result = cls(status=OperationStatus.FAILURE, message=message, **kwargs)
        result.add_error(message, code)
        return result

    @classmethod
    def partial_success(cls, message: str = "", **kwargs) -> "OperationResult":
        """Result for an operation that ran but stopped short, e.g. growth that did not settle."""
        return cls(status=OperationStatus.PARTIAL_SUCCESS, message=message, **kwargs)
