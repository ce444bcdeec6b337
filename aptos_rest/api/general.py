"""Ledger-wide queries: ledger info, chain id, view functions and blocks."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from aptos_rest.config import AptosConfig, ClientConfig
from aptos_rest.models import Block, IndexResponse, ViewRequest
from aptos_rest.node_api import CacheEntry, NodeApiClient


class General:
    """Queries that are not scoped to an account."""

    def __init__(self, config: AptosConfig | None = None, *, client: Optional[NodeApiClient] = None) -> None:
        self.client = client or NodeApiClient(config)
        self._owns_client = client is None
        self.config = self.client.config
        self._chain_id = CacheEntry[int]("chain_id")

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "General":
        return self

    async def __aexit__(self, *_exc_info) -> None:
        await self.aclose()

    async def get_ledger_info(self, *, overrides: Optional[ClientConfig] = None) -> IndexResponse:
        """Fetch the latest ledger information (chain id, epoch, versions, timestamp)."""
        return await self.client.get(
            origin_method="get_ledger_info",
            overrides=overrides,
            shape=IndexResponse,
        )

    async def get_chain_id(self) -> int:
        """
        Return the chain id, fetched once per instance.

        The chain id never changes for a connected network, so the first
        successful answer is kept for the lifetime of this object. A failed
        fetch is not remembered.
        """
        return await self._chain_id.get_or_fetch(self._fetch_chain_id)

    async def _fetch_chain_id(self) -> int:
        info = await self.client.get(origin_method="get_chain_id", shape=IndexResponse)
        return info.chain_id

    async def view(
        self,
        payload: Union[ViewRequest, dict],
        *,
        ledger_version: Optional[int] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> List[Any]:
        """Call a Move view function and return its decoded return values."""
        body = payload.model_dump() if isinstance(payload, ViewRequest) else payload
        return await self.client.post(
            endpoint="view",
            body=body,
            params={"ledger_version": ledger_version},
            origin_method="view",
            overrides=overrides,
            shape=List[Any],
        )

    async def get_block_by_height(
        self,
        block_height: int,
        *,
        with_transactions: Optional[bool] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> Block:
        return await self.client.get(
            endpoint=f"blocks/by_height/{block_height}",
            params={"with_transactions": with_transactions},
            origin_method="get_block_by_height",
            overrides=overrides,
            shape=Block,
        )

    async def get_block_by_version(
        self,
        version: int,
        *,
        with_transactions: Optional[bool] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> Block:
        """Fetch the block containing ledger ``version``."""
        return await self.client.get(
            endpoint=f"blocks/by_version/{version}",
            params={"with_transactions": with_transactions},
            origin_method="get_block_by_version",
            overrides=overrides,
            shape=Block,
        )
