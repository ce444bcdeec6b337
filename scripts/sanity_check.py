"""Minimal sanity checks against a live Aptos node."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from aptos_rest import Aptos, AptosConfig  # noqa: E402
from aptos_rest.logging_setup import configure_logging  # noqa: E402

# Framework account; override via env to inspect another address.
SAMPLE_ADDRESS = os.getenv("APTOS_SAMPLE_ADDRESS", "0x1")
# Opt-in to full module listing (several pages on the framework account).
RUN_MODULES = os.getenv("RUN_MODULES_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    config = AptosConfig.from_env()
    configure_logging(config)
    async with Aptos(config) as aptos:
        info = await aptos.general.get_ledger_info()
        print("Ledger info:", info.model_dump())
        print("Chain id:", await aptos.general.get_chain_id())

        print("Account:", (await aptos.account.get_data(SAMPLE_ADDRESS)).model_dump())
        resources = await aptos.account.get_resources(SAMPLE_ADDRESS)
        print("Resources:", len(resources))

        block = await aptos.general.get_block_by_height(int(info.block_height))
        print("Latest block:", block.block_hash)

        if RUN_MODULES:
            modules = await aptos.account.get_modules(SAMPLE_ADDRESS)
            print("Modules:", len(modules))


if __name__ == "__main__":
    asyncio.run(main())
