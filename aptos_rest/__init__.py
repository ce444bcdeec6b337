"""
Async client core for the Aptos node REST API.

Provides canonical hex addresses, request building, error translation, cursor
pagination and per-instance memoization shared by the account and ledger APIs.
See DESIGN.md for full details.
"""

__version__ = "0.1.0"

from aptos_rest.api import Account, Aptos, General  # noqa: E402
from aptos_rest.config import AptosConfig, ClientConfig, Network  # noqa: E402
from aptos_rest.errors import (  # noqa: E402
    ApiError,
    AptosClientError,
    ErrorKind,
    FormatError,
    PaginationExhaustedError,
    ParseError,
    TransportError,
)
from aptos_rest.hex_string import HexString  # noqa: E402

__all__ = [
    "Account",
    "Aptos",
    "General",
    "AptosConfig",
    "ClientConfig",
    "Network",
    "HexString",
    "ErrorKind",
    "AptosClientError",
    "ApiError",
    "FormatError",
    "PaginationExhaustedError",
    "ParseError",
    "TransportError",
]
