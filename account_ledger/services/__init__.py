"""Services package."""

from account_ledger.services.storage import (
    BalanceStoreInterface,
    InMemoryBalanceStore,
)

__all__ = [
    # Storage services
    "BalanceStoreInterface",
    "InMemoryBalanceStore",
]
