"""Domain APIs built on the node client."""

from .account import Account
from .aptos import Aptos
from .general import General

__all__ = ["Account", "Aptos", "General"]
