"""
Error taxonomy for the Aptos REST client.

Every failure raised by this package is one of a closed set of variants. Each
variant carries ``kind`` so callers can dispatch with ``match err.kind`` instead
of walking the class hierarchy; ``isinstance`` checks work as well.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from aptos_rest.node_api.request import AptosRequest


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    API = "api"
    PARSE = "parse"
    FORMAT = "format"
    PAGINATION_EXHAUSTED = "pagination_exhausted"


class AptosClientError(Exception):
    """Base exception for every error raised by this package."""

    kind: ErrorKind

    def __init__(self, message: str, *, request: Optional["AptosRequest"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.request = request

    @property
    def endpoint(self) -> Optional[str]:
        return self.request.endpoint if self.request is not None else None


class TransportError(AptosClientError):
    """Raised when no response was obtained (refused, timed out, DNS failure)."""

    kind = ErrorKind.TRANSPORT


class ApiError(AptosClientError):
    """Raised when the node answered with a non-success status."""

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        *,
        status: int,
        status_text: str,
        data: Any,
        url: str,
        request: Optional["AptosRequest"] = None,
        error_code: Optional[str] = None,
        vm_error_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, request=request)
        self.status = status
        self.status_text = status_text
        self.data = data
        self.url = url
        self.error_code = error_code
        self.vm_error_code = vm_error_code

    def __str__(self) -> str:
        return f"{self.status} {self.status_text}: {self.message}"


class ParseError(AptosClientError):
    """Raised when a success response carries a body that cannot be used."""

    kind = ErrorKind.PARSE

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        raw: Optional[str] = None,
        request: Optional["AptosRequest"] = None,
    ) -> None:
        super().__init__(message, request=request)
        self.status = status
        self.raw = raw


class FormatError(AptosClientError, ValueError):
    """Raised for malformed hex / address input."""

    kind = ErrorKind.FORMAT

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class PaginationExhaustedError(AptosClientError):
    """Raised when a cursor walk hits the page bound without finishing."""

    kind = ErrorKind.PAGINATION_EXHAUSTED

    def __init__(
        self,
        message: str,
        *,
        partial: List[Any],
        pages: int,
        last_cursor: Optional[str] = None,
        request: Optional["AptosRequest"] = None,
    ) -> None:
        super().__init__(message, request=request)
        self.partial = partial
        self.pages = pages
        self.last_cursor = last_cursor


__all__ = [
    "ErrorKind",
    "AptosClientError",
    "TransportError",
    "ApiError",
    "ParseError",
    "FormatError",
    "PaginationExhaustedError",
]
