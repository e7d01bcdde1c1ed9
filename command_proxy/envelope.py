"""Uniform success/data/error envelope returned by every proxy command."""

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Result of one command invocation.

    ``success`` is True exactly when ``data`` carries the decoded payload and
    ``error`` is None; a failed invocation carries only the ``error`` text.
    Build instances with :meth:`ok` and :meth:`fail`.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_outcome_fields(self) -> "ApiResponse[T]":
        if self.success and self.error is not None:
            raise ValueError("a successful response cannot carry an error")
        if not self.success and self.data is not None:
            raise ValueError("a failed response cannot carry data")
        return self

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, data=None, error=message)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-compatible dict handed back to the webview."""
        return self.model_dump(mode="json")
