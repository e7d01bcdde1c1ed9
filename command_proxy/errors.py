"""Error types raised inside the command proxy before they are flattened into envelopes."""

from typing import Optional


class ProxyError(Exception):
    """Base error for a failed proxy invocation."""

    error_type = "proxy_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        correlation_id: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.correlation_id = correlation_id

    def __str__(self) -> str:
        parts = [f"{self.error_type}: {self.message}"]
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        if self.correlation_id:
            parts.append(f"correlation_id={self.correlation_id}")
        return "; ".join(parts)


class TransportError(ProxyError):
    """The HTTP exchange could not be completed (connection, DNS or I/O failure)."""

    error_type = "transport_error"


class DecodeError(ProxyError):
    """The backend answered but the body did not match the expected shape."""

    error_type = "decode_error"


def describe_exception(exc: BaseException) -> str:
    """Return the exception text, falling back to its class name when empty."""

    text = str(exc).strip()
    return text or exc.__class__.__name__
