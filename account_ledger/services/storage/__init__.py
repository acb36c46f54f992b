"""Balance storage package."""

from account_ledger.services.storage.interface import BalanceStoreInterface
from account_ledger.services.storage.memory import InMemoryBalanceStore

__all__ = [
    "BalanceStoreInterface",
    "InMemoryBalanceStore",
]
