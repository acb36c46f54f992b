"""Operation routing package."""

from account_ledger.operations.router import (
    CREDIT_PROMPT,
    DEBIT_PROMPT,
    INSUFFICIENT_FUNDS_MESSAGE,
    InputSource,
    MessageSink,
    OperationRouter,
)

__all__ = [
    "CREDIT_PROMPT",
    "DEBIT_PROMPT",
    "INSUFFICIENT_FUNDS_MESSAGE",
    "InputSource",
    "MessageSink",
    "OperationRouter",
]
