"""
Core Data Models for Account Ledger

These models describe the transient values that flow through one
dispatch call: what was asked for, and what happened.

DESIGN DECISION: Operation names are a closed Enum with an explicit
normalization step. Free-form strings are resolved exactly once, at the
edge, and everything past that point works with enum members. An
unresolvable name yields None, which callers treat as the no-op arm.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

def _normalize(name: Any) -> Optional[str]:
    """Trim and case-fold an operation name. Non-strings never match."""
    if not isinstance(name, str):
        return None
    return name.strip().upper()


class OperationKind(str, Enum):
    """
    Operations the router understands.
    
    TOTAL is the menu's name for "view balance".
    """
    TOTAL = "TOTAL"
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    
    @classmethod
    def parse(cls, name: Any) -> Optional["OperationKind"]:
        """Resolve a raw operation name, or None if it is not one of ours."""
        normalized = _normalize(name)
        try:
            return cls(normalized)
        except ValueError:
            return None


class StoreCommand(str, Enum):
    """Commands accepted by the balance store's dispatch entry point."""
    READ = "READ"
    WRITE = "WRITE"
    
    @classmethod
    def parse(cls, name: Any) -> Optional["StoreCommand"]:
        normalized = _normalize(name)
        try:
            return cls(normalized)
        except ValueError:
            return None


class OperationStatus(str, Enum):
    """Outcome of a single operation."""
    APPLIED = "applied"      # Balance read, or new balance written
    REJECTED = "rejected"    # Business rule refused the change


# =============================================================================
# REQUEST / RESULT MODELS
# =============================================================================

class OperationRequest(BaseModel):
    """
    One resolved operation, ready to execute.
    
    amount is only meaningful for CREDIT and DEBIT and has already been
    through parse-or-zero by the time a request exists.
    """
    model_config = ConfigDict(frozen=True)
    
    kind: OperationKind
    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount parsed from user input"
    )


class OperationResult(BaseModel):
    """
    What an operation did.
    
    The message is exactly the line emitted to the message sink.
    """
    model_config = ConfigDict(frozen=True)
    
    kind: OperationKind
    status: OperationStatus
    amount: Optional[Decimal] = None
    balance_before: Decimal
    balance_after: Decimal
    message: str
    
    @property
    def applied(self) -> bool:
        return self.status == OperationStatus.APPLIED
    
    @property
    def balance_changed(self) -> bool:
        return self.balance_after != self.balance_before
