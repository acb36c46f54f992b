"""
In-Memory Balance Store

The balance lives for the lifetime of the process and nowhere else.
"""

from decimal import Decimal
from typing import Any, Optional

from account_ledger.config import get_settings
from account_ledger.observability import get_logger
from account_ledger.services.storage.interface import BalanceStoreInterface
from account_ledger.validation import coerce_amount


logger = get_logger(__name__)


class InMemoryBalanceStore(BalanceStoreInterface):
    """A single mutable balance cell."""
    
    def __init__(self, initial_balance: Optional[Decimal] = None):
        """
        Initialize the store.
        
        Args:
            initial_balance: Starting balance. If None, taken from
                            settings (1000.00 by default).
        """
        if initial_balance is None:
            initial_balance = get_settings().initial_balance
        balance = coerce_amount(initial_balance)
        if balance is None:
            raise ValueError(f"Invalid initial balance: {initial_balance!r}")
        self._balance = balance
    
    def __repr__(self) -> str:
        return f"InMemoryBalanceStore(balance={self._balance})"
    
    def read(self) -> Decimal:
        return self._balance
    
    def write(self, amount: Any) -> bool:
        balance = coerce_amount(amount)
        if balance is None:
            logger.warning("balance_write_ignored", value=repr(amount))
            return False
        
        previous = self._balance
        self._balance = balance
        logger.debug("balance_written", previous=str(previous), balance=str(balance))
        return True
