"""Request descriptors and response envelopes exchanged with the node."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional, Union

import httpx

from aptos_rest.config import ClientConfig
from aptos_rest.hex_string import HexString

Method = Literal["GET", "POST"]
ParamValue = Union[str, int, bool, HexString, None]

JSON_CONTENT_TYPE = "application/json"
BCS_CONTENT_TYPE = "application/x.aptos.signed_transaction+bcs"


def stringify_param(value: Any) -> str:
    """Canonical text for a query parameter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, HexString):
        return value.hex()
    return str(value)


def join_url(url: str, endpoint: Optional[str]) -> str:
    if not endpoint:
        return url
    return f"{url.rstrip('/')}/{endpoint.lstrip('/')}"


@dataclass(frozen=True)
class AptosRequest:
    """
    Fully-specified outbound call, built once and never mutated.

    ``params`` entries whose value is ``None`` are omitted from the query string
    rather than sent empty. ``origin_method`` names the domain method that built
    the request and is only used for diagnostics.
    """

    url: str
    method: Method = "GET"
    endpoint: Optional[str] = None
    body: Any = None
    content_type: Optional[str] = None
    params: Mapping[str, ParamValue] = field(default_factory=dict)
    origin_method: Optional[str] = None
    overrides: ClientConfig = field(default_factory=ClientConfig)

    def __post_init__(self) -> None:
        if self.method not in ("GET", "POST"):
            raise ValueError(f"Unsupported method: {self.method}")
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def query_params(self) -> Dict[str, str]:
        return {key: stringify_param(value) for key, value in self.params.items() if value is not None}

    def full_url(self) -> str:
        url = httpx.URL(join_url(self.url, self.endpoint))
        query = self.query_params()
        if query:
            url = url.copy_merge_params(query)
        return str(url)

    def with_params(self, **changes: ParamValue) -> "AptosRequest":
        """Return a copy with ``changes`` layered over the current params."""
        return replace(self, params={**self.params, **changes})

    def effective_content_type(self) -> Optional[str]:
        if self.body is None:
            return None
        if self.content_type:
            return self.content_type
        if isinstance(self.body, (bytes, bytearray)):
            return BCS_CONTENT_TYPE
        return JSON_CONTENT_TYPE


@dataclass(frozen=True)
class AptosResponse:
    """Normalized envelope around a node response."""

    status: int
    status_text: str
    data: Any
    text: str
    json_ok: bool
    url: str
    headers: Mapping[str, str]
    request: AptosRequest

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


__all__ = [
    "AptosRequest",
    "AptosResponse",
    "JSON_CONTENT_TYPE",
    "BCS_CONTENT_TYPE",
    "join_url",
    "stringify_param",
]
