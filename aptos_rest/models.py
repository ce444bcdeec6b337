"""Response shapes for the node endpoints used by the domain APIs (Pydantic v2).

Only the fields the client relies on are declared; anything else the node sends
is kept as an extra attribute so newer node versions do not break decoding.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _NodeModel(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)


class AccountData(_NodeModel):
    """Core account resource, used for identifying account and transaction execution."""

    sequence_number: str
    authentication_key: str


class MoveResource(_NodeModel):
    type: str = Field(..., description="Fully qualified Move struct tag, e.g. 0x1::coin::CoinStore<...>.")
    data: dict[str, Any] = Field(default_factory=dict)


class MoveModuleBytecode(_NodeModel):
    bytecode: str
    abi: Optional[dict[str, Any]] = None


class Transaction(_NodeModel):
    type: str
    hash: Optional[str] = None
    version: Optional[str] = None


class IndexResponse(_NodeModel):
    """Ledger information returned by the node's index route."""

    chain_id: int
    epoch: str
    ledger_version: str
    oldest_ledger_version: str
    ledger_timestamp: str
    node_role: str
    oldest_block_height: str
    block_height: str
    git_hash: Optional[str] = None


class Block(_NodeModel):
    block_height: str
    block_hash: str
    block_timestamp: str
    first_version: str
    last_version: str
    transactions: Optional[list[Transaction]] = None


class ViewRequest(BaseModel):
    """Payload for a Move view function call."""

    function: str
    type_arguments: list[str] = Field(default_factory=list)
    arguments: list[Any] = Field(default_factory=list)


__all__ = [
    "AccountData",
    "MoveResource",
    "MoveModuleBytecode",
    "Transaction",
    "IndexResponse",
    "Block",
    "ViewRequest",
]
