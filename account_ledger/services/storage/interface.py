"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for the balance store.
This allows us to:
1. Run several independent stores side by side (tests, embedding)
2. Swap the in-memory cell for another backend later
3. Keep the business rules out of storage entirely

The store performs NO business validation. It only refuses values
that are not amounts at all.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Optional

from account_ledger.models.operation import StoreCommand


class BalanceStoreInterface(ABC):
    """
    Abstract interface for balance storage.
    
    Any storage implementation must implement read and write;
    dispatch is shared.
    """
    
    @abstractmethod
    def read(self) -> Decimal:
        """
        Return the current balance.
        
        Has no side effects and always reflects the latest
        successful write.
        """
        pass
    
    @abstractmethod
    def write(self, amount: Any) -> bool:
        """
        Replace the stored balance.
        
        Args:
            amount: The new balance
            
        Returns:
            True if the balance was replaced, False if amount was not
            a valid number and the write was ignored
        """
        pass
    
    def dispatch(self, kind: Any, amount: Optional[Any] = None) -> Decimal:
        """
        Run a store command by name and return the resulting balance.
        
        READ and WRITE are matched case-insensitively, ignoring
        surrounding whitespace. Any other name behaves as READ.
        """
        if StoreCommand.parse(kind) is StoreCommand.WRITE:
            self.write(amount)
        return self.read()
