"""
Data Models Package

This package contains all Pydantic models used in the Account Ledger.
"""

from account_ledger.models.operation import (
    OperationKind,
    OperationRequest,
    OperationResult,
    OperationStatus,
    StoreCommand,
)

__all__ = [
    "OperationKind",
    "OperationRequest",
    "OperationResult",
    "OperationStatus",
    "StoreCommand",
]
