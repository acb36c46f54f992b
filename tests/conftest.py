"""
Shared fixtures for Account Ledger tests.

Console I/O is replaced everywhere: messages go to a list and user input
comes from a scripted queue of lines.
"""

from collections import deque
from decimal import Decimal

import pytest

from account_ledger.config import get_settings
from account_ledger.operations import OperationRouter
from account_ledger.services.storage import InMemoryBalanceStore


class ScriptedInput:
    """Input source that replays lines, then behaves like a closed stdin."""
    
    def __init__(self, lines=()):
        self._lines = deque(lines)
        self.calls = 0
    
    def feed(self, *lines: str) -> None:
        self._lines.extend(lines)
    
    def __call__(self) -> str:
        self.calls += 1
        if not self._lines:
            raise EOFError
        return self._lines.popleft()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test sees default settings, unaffected by the developer's environment."""
    for name in ("INITIAL_BALANCE", "BALANCE_EPSILON", "LOG_LEVEL", "LOG_FORMAT", "APP_ENVIRONMENT"):
        monkeypatch.delenv(f"LEDGER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def output():
    return []


@pytest.fixture
def scripted_input():
    return ScriptedInput()


@pytest.fixture
def store():
    return InMemoryBalanceStore()


@pytest.fixture
def router(store, scripted_input, output):
    return OperationRouter(store, input_source=scripted_input, output=output.append)


@pytest.fixture
def make_router(output):
    """Build a router over a fresh store with a given balance and scripted input."""
    def _make(balance="1000.00", inputs=()):
        store = InMemoryBalanceStore(Decimal(balance))
        source = ScriptedInput(inputs)
        return OperationRouter(store, input_source=source, output=output.append), store, source
    return _make
