import os
import sys

import httpx
import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from aptos_rest.config import AptosConfig  # noqa: E402
from aptos_rest.node_api import NodeApiClient  # noqa: E402

TEST_NODE_URL = "http://node.test/v1"


class RecordingHandler:
    """MockTransport handler that replays responses and records requests."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise RuntimeError("No mock responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_client():
    def _make(handler, **config_kwargs):
        config = AptosConfig(network=TEST_NODE_URL, **config_kwargs)
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return NodeApiClient(config, async_client=http)

    return _make


LEDGER_INFO = {
    "chain_id": 4,
    "epoch": "10",
    "ledger_version": "1000",
    "oldest_ledger_version": "0",
    "ledger_timestamp": "1654580922321826",
    "node_role": "full_node",
    "oldest_block_height": "0",
    "block_height": "400",
}
