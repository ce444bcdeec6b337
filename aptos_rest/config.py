"""
Configuration helpers for the Aptos REST client.

This module centralizes node URL selection, auth token loading, default
timeouts, and safety limits. Nothing here is read implicitly: callers build an
``AptosConfig`` (or call ``AptosConfig.from_env()``) and hand it to the client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional, Union

HeaderValue = Union[str, int, float, bool]


class Network:
    """Well-known fullnode REST endpoints."""

    MAINNET = "https://fullnode.mainnet.aptoslabs.com/v1"
    TESTNET = "https://fullnode.testnet.aptoslabs.com/v1"
    DEVNET = "https://fullnode.devnet.aptoslabs.com/v1"
    LOCAL = "http://127.0.0.1:8080/v1"


DEFAULT_NETWORK = Network.DEVNET
DEFAULT_TIMEOUT = 10.0

# Safety limits
MAX_PAGINATION_PAGES = 1000
MODULES_PAGE_LIMIT = 1000
RESOURCES_PAGE_LIMIT = 9999

# Env var names used by AptosConfig.from_env()
NODE_URL_ENV_VAR = "APTOS_NODE_URL"
TIMEOUT_ENV_VAR = "APTOS_HTTP_TIMEOUT"
API_TOKEN_ENV_VAR = "APTOS_API_TOKEN"
API_TOKEN_FILE_ENV_VAR = "APTOS_API_TOKEN_FILE"
LOG_LEVEL_ENV_VAR = "APTOS_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "APTOS_LOG_FORMAT"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """
    Per-request overrides applied on top of the transport defaults.

    ``token`` is sent as a bearer token, ``headers`` are added verbatim (values
    stringified), and ``with_credentials`` controls whether the client's cookie
    jar is forwarded. ``None`` means "not set here": the layer below decides,
    and an unset ``with_credentials`` at the bottom forwards cookies.
    """

    token: Optional[str] = None
    headers: Mapping[str, HeaderValue] = field(default_factory=dict)
    with_credentials: Optional[bool] = None

    @property
    def forwards_credentials(self) -> bool:
        return self.with_credentials is not False

    def merged(self, other: Optional["ClientConfig"]) -> "ClientConfig":
        """Layer ``other`` on top of this config; set fields in ``other`` win."""
        if other is None:
            return self
        return ClientConfig(
            token=other.token if other.token is not None else self.token,
            headers={**self.headers, **other.headers},
            with_credentials=(
                other.with_credentials if other.with_credentials is not None else self.with_credentials
            ),
        )


@dataclass(frozen=True, slots=True)
class AptosConfig:
    """Runtime configuration for a single client instance."""

    network: str = DEFAULT_NETWORK
    client_config: ClientConfig = field(default_factory=ClientConfig)
    timeout: float = DEFAULT_TIMEOUT
    max_pagination_pages: int = MAX_PAGINATION_PAGES
    log_level: str = "INFO"
    log_format: str = "json"  # json or plain

    @classmethod
    def from_env(cls, **overrides) -> "AptosConfig":
        """
        Build a config from ``APTOS_*`` environment variables.

        ``APTOS_API_TOKEN`` takes precedence over the file named by
        ``APTOS_API_TOKEN_FILE``; the token is never logged. An unparseable
        ``APTOS_HTTP_TIMEOUT`` falls back to the default timeout. Keyword
        arguments replace the matching fields afterwards.
        """
        env = os.environ
        token = (env.get(API_TOKEN_ENV_VAR) or "").strip() or None
        token_file = env.get(API_TOKEN_FILE_ENV_VAR)
        if token is None and token_file and Path(token_file).is_file():
            token = Path(token_file).read_text(encoding="utf-8").strip() or None

        timeout = DEFAULT_TIMEOUT
        if env.get(TIMEOUT_ENV_VAR):
            try:
                timeout = float(env[TIMEOUT_ENV_VAR])
            except ValueError:
                timeout = DEFAULT_TIMEOUT

        config = cls(
            network=env.get(NODE_URL_ENV_VAR, DEFAULT_NETWORK),
            client_config=ClientConfig(token=token),
            timeout=timeout,
            log_level=env.get(LOG_LEVEL_ENV_VAR, "INFO"),
            log_format=env.get(LOG_FORMAT_ENV_VAR, "json"),
        )
        return replace(config, **overrides) if overrides else config
