"""Entry point bundling the domain APIs over one shared connection."""

from __future__ import annotations

from typing import Optional

import httpx

from aptos_rest.api.account import Account
from aptos_rest.api.general import General
from aptos_rest.config import AptosConfig
from aptos_rest.node_api import NodeApiClient


class Aptos:
    """
    Client for one Aptos node.

    Usage::

        async with Aptos(AptosConfig(network=Network.TESTNET)) as aptos:
            info = await aptos.general.get_ledger_info()
            resources = await aptos.account.get_resources("0x1")
    """

    def __init__(
        self,
        config: AptosConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or AptosConfig()
        self.client = NodeApiClient(self.config, async_client=async_client)
        self.account = Account(client=self.client)
        self.general = General(client=self.client)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Aptos":
        return self

    async def __aexit__(self, *_exc_info) -> None:
        await self.aclose()
