"""Cursor-driven pagination over list endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from aptos_rest.errors import PaginationExhaustedError, ParseError
from aptos_rest.node_api.client import NodeApiClient
from aptos_rest.node_api.request import AptosRequest

logger = logging.getLogger(__name__)

CURSOR_HEADER = "X-Aptos-Cursor"
START_PARAM = "start"


@dataclass
class PaginationState:
    items: List[Any] = field(default_factory=list)
    cursor: Optional[str] = None
    pages: int = 0


async def paginate_with_cursor(
    client: NodeApiClient,
    request: AptosRequest,
    *,
    item_shape: Any = None,
    max_pages: Optional[int] = None,
) -> List[Any]:
    """
    Follow the node's cursor header until the result set is exhausted.

    Pages are fetched strictly one after another and their items concatenated in
    order. The walk ends when the cursor header is missing or empty, or when the
    node hands back the cursor it was just given. Hitting ``max_pages`` (default
    ``config.max_pagination_pages``) raises PaginationExhaustedError carrying the
    items gathered so far. Any ApiError / TransportError propagates as-is.
    """
    limit = max_pages if max_pages is not None else client.config.max_pagination_pages
    state = PaginationState(cursor=_as_cursor(request.params.get(START_PARAM)))
    page_request = request

    while True:
        response = client.check_response(await client.invoke(page_request))
        if not isinstance(response.data, list):
            raise ParseError(
                "Expected a list page from node.",
                status=response.status,
                raw=response.text,
                request=page_request,
            )
        page = client.decode(response, list[item_shape]) if item_shape is not None else response.data
        state.items.extend(page)
        state.pages += 1

        next_cursor = response.headers.get(CURSOR_HEADER)
        logger.debug(
            "Page %d from %s: %d items, cursor=%s",
            state.pages,
            request.endpoint,
            len(page),
            next_cursor,
        )
        if not next_cursor:
            return state.items
        if next_cursor == state.cursor:
            logger.debug("Cursor did not advance for %s; stopping", request.endpoint)
            return state.items
        if state.pages >= limit:
            raise PaginationExhaustedError(
                f"Pagination did not finish after {state.pages} pages.",
                partial=state.items,
                pages=state.pages,
                last_cursor=next_cursor,
                request=request,
            )

        state.cursor = next_cursor
        page_request = request.with_params(**{START_PARAM: next_cursor})


def _as_cursor(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


__all__ = ["paginate_with_cursor", "PaginationState", "CURSOR_HEADER", "START_PARAM"]
