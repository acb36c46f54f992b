"""
Operation Router

The business layer of the ledger. It owns:
- The overdraft-protection rule (a debit may not exceed the balance)
- Every user-facing result message
- Resolution of operation names to behavior

It never holds the balance itself. Every operation reads the store fresh
and writes back explicitly.

Amounts arrive through an injected input source (one line of text per
call) and messages leave through an injected output sink (one line per
call). By default these are input() and print().
"""

from decimal import Decimal
from threading import RLock
from typing import Callable, Optional

from account_ledger.config import get_settings
from account_ledger.models.operation import (
    OperationKind,
    OperationRequest,
    OperationResult,
    OperationStatus,
)
from account_ledger.observability import get_logger
from account_ledger.services.storage import BalanceStoreInterface, InMemoryBalanceStore
from account_ledger.validation import ZERO, exceeds, format_amount, parse_amount


InputSource = Callable[[], str]
MessageSink = Callable[[str], None]

CREDIT_PROMPT = "Enter credit amount: "
DEBIT_PROMPT = "Enter debit amount: "
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."

logger = get_logger(__name__)


class OperationRouter:
    """
    Executes ledger operations against a balance store.
    
    GUARANTEES:
    - A rejected debit never touches the store
    - Exactly one result line is emitted per operation
    - Unknown operation names are ignored without output
    - Nothing raises on bad user input
    """
    
    def __init__(
        self,
        store: Optional[BalanceStoreInterface] = None,
        input_source: Optional[InputSource] = None,
        output: Optional[MessageSink] = None,
        epsilon: Optional[Decimal] = None,
    ):
        self._store = store if store is not None else InMemoryBalanceStore()
        self._input = input_source or input
        self._output = output or print
        self._epsilon = epsilon if epsilon is not None else get_settings().balance_epsilon
        # Guards each read-decide-write step.
        self._lock = RLock()
        
        self._handlers = {
            OperationKind.TOTAL: self.view_balance,
            OperationKind.CREDIT: self.credit_account,
            OperationKind.DEBIT: self.debit_account,
        }
    
    @property
    def store(self) -> BalanceStoreInterface:
        return self._store
    
    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------
    
    def process_operation(self, kind: str) -> Optional[OperationResult]:
        """
        Run the operation named by kind.
        
        TOTAL, CREDIT and DEBIT are matched case-insensitively, ignoring
        surrounding whitespace. Anything else does nothing and returns None.
        """
        operation = OperationKind.parse(kind)
        if operation is None:
            logger.debug("operation_ignored", kind=repr(kind))
            return None
        return self._handlers[operation]()
    
    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    
    def view_balance(self) -> OperationResult:
        """Emit the current balance. Never mutates."""
        balance = self._store.read()
        message = f"Current balance: {format_amount(balance)}"
        self._emit(message)
        logger.info("balance_viewed", balance=str(balance))
        return OperationResult(
            kind=OperationKind.TOTAL,
            status=OperationStatus.APPLIED,
            balance_before=balance,
            balance_after=balance,
            message=message,
        )
    
    def credit_account(self) -> OperationResult:
        """
        Ask for an amount and add it to the balance.
        
        Negative amounts are accepted and lower the balance; credits are
        not validated beyond parse-or-zero.
        """
        request = OperationRequest(
            kind=OperationKind.CREDIT,
            amount=self._read_amount(CREDIT_PROMPT),
        )
        with self._lock:
            current = self._store.read()
            new_balance = current + request.amount
            self._store.write(new_balance)
        
        message = f"Amount credited. New balance: {format_amount(new_balance)}"
        self._emit(message)
        logger.info(
            "account_credited",
            amount=str(request.amount),
            previous=str(current),
            balance=str(new_balance),
        )
        return OperationResult(
            kind=request.kind,
            status=OperationStatus.APPLIED,
            amount=request.amount,
            balance_before=current,
            balance_after=new_balance,
            message=message,
        )
    
    def debit_account(self) -> OperationResult:
        """
        Ask for an amount and subtract it from the balance.
        
        Rejected, with the store untouched, if the amount exceeds the
        balance. An amount equal to the balance, or above it by no more
        than epsilon, empties the account to exactly zero.
        """
        request = OperationRequest(
            kind=OperationKind.DEBIT,
            amount=self._read_amount(DEBIT_PROMPT),
        )
        with self._lock:
            current = self._store.read()
            if exceeds(request.amount, current, self._epsilon):
                new_balance = current
                status = OperationStatus.REJECTED
            else:
                new_balance = current - request.amount
                if request.amount > current:
                    # Over the balance but inside epsilon: settle at exactly zero.
                    new_balance = ZERO
                status = OperationStatus.APPLIED
                self._store.write(new_balance)
        
        if status == OperationStatus.REJECTED:
            message = INSUFFICIENT_FUNDS_MESSAGE
            logger.info(
                "debit_rejected",
                amount=str(request.amount),
                balance=str(current),
            )
        else:
            message = f"Amount debited. New balance: {format_amount(new_balance)}"
            logger.info(
                "account_debited",
                amount=str(request.amount),
                previous=str(current),
                balance=str(new_balance),
            )
        self._emit(message)
        return OperationResult(
            kind=request.kind,
            status=status,
            amount=request.amount,
            balance_before=current,
            balance_after=new_balance,
            message=message,
        )
    
    # -------------------------------------------------------------------------
    # I/O helpers
    # -------------------------------------------------------------------------
    
    def _emit(self, message: str) -> None:
        self._output(message)
    
    def _read_amount(self, prompt: str) -> Decimal:
        """Prompt, read one line, parse-or-zero. EOF counts as empty input."""
        self._emit(prompt)
        try:
            raw = self._input()
        except EOFError:
            raw = ""
        return parse_amount(raw)
