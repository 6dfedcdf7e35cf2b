"""
Result
======

Outcome envelope returned by every application service.

A Result is one of:
- success carrying data          -> Result.success(data, message)
- success with no data           -> Result.success(message=...)
- failure with a message/errors  -> Result.failure(message, errors)

Services never raise to their callers; the HTTP layer maps
``is_success`` to a status code.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_SUCCESS_MESSAGE = "Operation completed successfully"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Uniform success/failure outcome."""
    is_success: bool
    message: str
    data: Optional[T] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def success(cls, data: Optional[T] = None, message: str = DEFAULT_SUCCESS_MESSAGE) -> "Result[T]":
        """Build a successful outcome, with or without data."""
        return cls(is_success=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str, errors: Optional[List[str]] = None) -> "Result[T]":
        """Build a failed outcome."""
        return cls(is_success=False, message=message, errors=list(errors or []))

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON envelope shape."""
        return {
            "is_success": self.is_success,
            "message": self.message,
            "data": self.data,
            "errors": list(self.errors),
        }
