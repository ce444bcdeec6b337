import httpx
import pytest

from aptos_rest.errors import ApiError, ErrorKind, PaginationExhaustedError, ParseError, TransportError
from aptos_rest.node_api import CURSOR_HEADER, paginate_with_cursor


def _page(start, size, cursor=None):
    headers = {CURSOR_HEADER: cursor} if cursor is not None else {}
    return httpx.Response(200, json=list(range(start, start + size)), headers=headers)


class CursorServer:
    """Serves pages keyed by the ``start`` query parameter."""

    def __init__(self, pages):
        self.pages = pages
        self.starts = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        start = request.url.params.get("start")
        self.starts.append(start)
        return self.pages[start]()


@pytest.mark.asyncio
async def test_concatenates_pages_in_order(make_client):
    server = CursorServer(
        {
            None: lambda: _page(0, 40, "c1"),
            "c1": lambda: _page(40, 40, "c2"),
            "c2": lambda: _page(80, 20),
        }
    )
    client = make_client(server)
    request = client.build_request(endpoint="accounts/0x1/resources", params={"limit": 40})
    items = await paginate_with_cursor(client, request)
    assert items == list(range(100))
    assert server.starts == [None, "c1", "c2"]


@pytest.mark.asyncio
async def test_caller_params_kept_on_every_page(make_client):
    seen = []

    def handler(request):
        seen.append(dict(request.url.params))
        if "start" not in request.url.params:
            return _page(0, 2, "next")
        return _page(2, 2)

    client = make_client(handler)
    request = client.build_request(endpoint="e", params={"limit": 2, "ledger_version": 7})
    await paginate_with_cursor(client, request)
    assert seen == [
        {"limit": "2", "ledger_version": "7"},
        {"limit": "2", "ledger_version": "7", "start": "next"},
    ]


@pytest.mark.asyncio
async def test_repeated_cursor_stops_walk(make_client):
    server = CursorServer(
        {
            None: lambda: _page(0, 3, "c1"),
            "c1": lambda: _page(3, 3, "c1"),
        }
    )
    client = make_client(server)
    items = await paginate_with_cursor(client, client.build_request(endpoint="e"))
    assert items == [0, 1, 2, 3, 4, 5]
    assert server.starts == [None, "c1"]


@pytest.mark.asyncio
async def test_empty_cursor_header_ends_walk(make_client):
    server = CursorServer({None: lambda: _page(0, 2, "")})
    client = make_client(server)
    assert await paginate_with_cursor(client, client.build_request(endpoint="e")) == [0, 1]
    assert server.starts == [None]


@pytest.mark.asyncio
async def test_non_monotonic_cursor_counts_as_progress(make_client):
    server = CursorServer(
        {
            None: lambda: _page(0, 1, "c5"),
            "c5": lambda: _page(1, 1, "c2"),
            "c2": lambda: _page(2, 1),
        }
    )
    client = make_client(server)
    assert await paginate_with_cursor(client, client.build_request(endpoint="e")) == [0, 1, 2]


@pytest.mark.asyncio
async def test_safety_bound_raises_with_partial_results(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        n = len(calls)
        return _page(n * 10, 2, f"c{n}")

    client = make_client(handler, max_pagination_pages=3)
    with pytest.raises(PaginationExhaustedError) as excinfo:
        await paginate_with_cursor(client, client.build_request(endpoint="e"))
    err = excinfo.value
    assert err.kind is ErrorKind.PAGINATION_EXHAUSTED
    assert err.partial == [10, 11, 20, 21, 30, 31]
    assert err.pages == 3
    assert err.last_cursor == "c3"
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_explicit_max_pages_wins_over_config(make_client):
    def handler(request):
        return _page(0, 1, "again-" + str(request.url.params.get("start")))

    client = make_client(handler)
    with pytest.raises(PaginationExhaustedError) as excinfo:
        await paginate_with_cursor(client, client.build_request(endpoint="e"), max_pages=2)
    assert excinfo.value.pages == 2


@pytest.mark.asyncio
async def test_api_error_mid_walk_propagates(make_client):
    server = CursorServer(
        {
            None: lambda: _page(0, 5, "c1"),
            "c1": lambda: httpx.Response(500, json={"message": "internal"}),
        }
    )
    client = make_client(server)
    with pytest.raises(ApiError) as excinfo:
        await paginate_with_cursor(client, client.build_request(endpoint="e"))
    assert excinfo.value.request.params["start"] == "c1"


@pytest.mark.asyncio
async def test_transport_error_mid_walk_propagates(make_client):
    def handler(request):
        if "start" in request.url.params:
            raise httpx.ConnectError("down", request=request)
        return _page(0, 1, "c1")

    client = make_client(handler)
    with pytest.raises(TransportError):
        await paginate_with_cursor(client, client.build_request(endpoint="e"))


@pytest.mark.asyncio
async def test_non_list_page_is_parse_error(make_client):
    client = make_client(CursorServer({None: lambda: httpx.Response(200, json={"not": "a list"})}))
    with pytest.raises(ParseError):
        await paginate_with_cursor(client, client.build_request(endpoint="e"))


@pytest.mark.asyncio
async def test_item_shape_validation(make_client):
    client = make_client(CursorServer({None: lambda: httpx.Response(200, json=["a", "b"])}))
    with pytest.raises(ParseError):
        await paginate_with_cursor(client, client.build_request(endpoint="e"), item_shape=int)
