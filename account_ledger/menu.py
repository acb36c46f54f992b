"""
Interactive Menu for Account Ledger

This is the text interface the user drives. It only translates menu
choices into operation names; all decisions happen in the router.

    1 -> TOTAL    2 -> CREDIT    3 -> DEBIT    4 -> exit
"""

from typing import Optional

from account_ledger.config import get_settings
from account_ledger.models.operation import OperationKind
from account_ledger.observability import configure_logging, get_logger
from account_ledger.operations import InputSource, MessageSink, OperationRouter
from account_ledger.services.storage import InMemoryBalanceStore


SEPARATOR = "--------------------------------"
MENU_LINES = (
    SEPARATOR,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    SEPARATOR,
    "Enter your choice (1-4): ",
)
INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."
GOODBYE_MESSAGE = "Exiting the program. Goodbye!"

EXIT_CHOICE = 4
CHOICES = {
    1: OperationKind.TOTAL,
    2: OperationKind.CREDIT,
    3: OperationKind.DEBIT,
}


class MenuProgram:
    """
    The menu loop.
    
    continue_flag is "YES" while the loop runs and "NO" once the user
    has chosen to exit.
    """
    
    def __init__(
        self,
        router: OperationRouter,
        input_source: Optional[InputSource] = None,
        output: Optional[MessageSink] = None,
    ):
        self._router = router
        self._input = input_source or input
        self._output = output or print
        self.continue_flag = "YES"
        self._logger = get_logger(__name__)
    
    def run(self) -> int:
        """Loop until the user exits. Returns the process exit code."""
        while self.continue_flag == "YES":
            for line in MENU_LINES:
                self._output(line)
            
            try:
                raw = self._input()
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            
            choice = self._parse_choice(raw)
            if choice == EXIT_CHOICE:
                self._exit()
            elif choice in CHOICES:
                self._router.process_operation(CHOICES[choice].value)
            else:
                self._logger.info("menu_choice_invalid", raw=repr(raw))
                self._output(INVALID_CHOICE_MESSAGE)
        
        return 0
    
    def _exit(self) -> None:
        self.continue_flag = "NO"
        self._output(GOODBYE_MESSAGE)
        self._logger.info("menu_exit")
    
    @staticmethod
    def _parse_choice(raw: str) -> Optional[int]:
        try:
            return int(raw.strip())
        except (AttributeError, ValueError):
            return None


def main() -> int:
    """Console entry point: wire settings, logging, store, router and menu."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    
    store = InMemoryBalanceStore(settings.initial_balance)
    router = OperationRouter(store, epsilon=settings.balance_epsilon)
    return MenuProgram(router).run()
