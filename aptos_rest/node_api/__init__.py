"""HTTP plumbing shared by the Aptos domain APIs."""

from .client import NodeApiClient
from .memoize import CacheEntry
from .pagination import CURSOR_HEADER, PaginationState, paginate_with_cursor
from .request import AptosRequest, AptosResponse

__all__ = [
    "NodeApiClient",
    "AptosRequest",
    "AptosResponse",
    "CacheEntry",
    "CURSOR_HEADER",
    "PaginationState",
    "paginate_with_cursor",
]
