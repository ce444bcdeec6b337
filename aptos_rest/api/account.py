"""Account queries: account data, modules, resources and sent transactions."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from aptos_rest.config import MODULES_PAGE_LIMIT, RESOURCES_PAGE_LIMIT, AptosConfig, ClientConfig
from aptos_rest.hex_string import HexString, MaybeHexString
from aptos_rest.models import AccountData, MoveModuleBytecode, MoveResource, Transaction
from aptos_rest.node_api import NodeApiClient, paginate_with_cursor


def _account_endpoint(address: MaybeHexString, suffix: str = "") -> str:
    return f"accounts/{HexString.ensure(address).hex()}{suffix}"


class Account:
    """Account-scoped queries against one node."""

    def __init__(self, config: AptosConfig | None = None, *, client: Optional[NodeApiClient] = None) -> None:
        self.client = client or NodeApiClient(config)
        self._owns_client = client is None
        self.config = self.client.config

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "Account":
        return self

    async def __aexit__(self, *_exc_info) -> None:
        await self.aclose()

    async def get_data(self, address: MaybeHexString, *, overrides: Optional[ClientConfig] = None) -> AccountData:
        """
        Fetch the core account resource (sequence number and authentication key).

        Raises ApiError (e.g. 404 when the account does not exist), TransportError,
        ParseError, or FormatError for a malformed address.
        """
        return await self.client.get(
            endpoint=_account_endpoint(address),
            origin_method="get_data",
            overrides=overrides,
            shape=AccountData,
        )

    async def get_modules(
        self,
        address: MaybeHexString,
        *,
        ledger_version: Optional[int] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> List[MoveModuleBytecode]:
        """
        Fetch every module published under ``address``.

        This may call the node several times, following the pagination cursor.
        No ``limit`` is exposed: it would be ambiguous whether it bounds a page or
        the whole result.
        """
        request = self.client.build_request(
            endpoint=_account_endpoint(address, "/modules"),
            params={"ledger_version": ledger_version, "limit": MODULES_PAGE_LIMIT},
            origin_method="get_modules",
            overrides=overrides,
        )
        return await paginate_with_cursor(self.client, request, item_shape=MoveModuleBytecode)

    async def get_module(
        self,
        address: MaybeHexString,
        module_name: str,
        *,
        ledger_version: Optional[int] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> MoveModuleBytecode:
        return await self.client.get(
            endpoint=_account_endpoint(address, f"/module/{quote(module_name, safe='')}"),
            params={"ledger_version": ledger_version},
            origin_method="get_module",
            overrides=overrides,
            shape=MoveModuleBytecode,
        )

    async def get_transactions(
        self,
        address: MaybeHexString,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> List[Transaction]:
        """Fetch one page of transactions sent by ``address``, starting at sequence number ``start``."""
        return await self.client.get(
            endpoint=_account_endpoint(address, "/transactions"),
            params={"start": start, "limit": limit},
            origin_method="get_transactions",
            overrides=overrides,
            shape=List[Transaction],
        )

    async def get_resources(
        self,
        address: MaybeHexString,
        *,
        ledger_version: Optional[int] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> List[MoveResource]:
        """Fetch every resource held by ``address``, following the pagination cursor."""
        request = self.client.build_request(
            endpoint=_account_endpoint(address, "/resources"),
            params={"ledger_version": ledger_version, "limit": RESOURCES_PAGE_LIMIT},
            origin_method="get_resources",
            overrides=overrides,
        )
        return await paginate_with_cursor(self.client, request, item_shape=MoveResource)

    async def get_resource(
        self,
        address: MaybeHexString,
        resource_type: str,
        *,
        ledger_version: Optional[int] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> MoveResource:
        """Fetch a single resource by its Move struct tag, e.g. ``0x1::account::Account``."""
        return await self.client.get(
            endpoint=_account_endpoint(address, f"/resource/{quote(resource_type, safe='')}"),
            params={"ledger_version": ledger_version},
            origin_method="get_resource",
            overrides=overrides,
            shape=MoveResource,
        )
