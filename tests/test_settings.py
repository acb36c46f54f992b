"""
Tests for configuration loading.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from account_ledger.config import LedgerSettings, get_settings


class TestLedgerSettings:
    """Tests for LedgerSettings."""
    
    def test_defaults(self):
        """Test defaults when no environment is set."""
        settings = LedgerSettings(_env_file=None)
        assert settings.initial_balance == Decimal("1000.00")
        assert settings.balance_epsilon == Decimal("1e-9")
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
    
    def test_environment_overrides(self, monkeypatch):
        """Test LEDGER_* variables are read."""
        monkeypatch.setenv("LEDGER_INITIAL_BALANCE", "10.5")
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "debug")
        monkeypatch.setenv("LEDGER_LOG_FORMAT", "JSON")
        settings = LedgerSettings(_env_file=None)
        assert settings.initial_balance == Decimal("10.5")
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
    
    def test_negative_initial_balance_rejected(self, monkeypatch):
        """Test the opening balance cannot be negative."""
        monkeypatch.setenv("LEDGER_INITIAL_BALANCE", "-1")
        with pytest.raises(ValidationError):
            LedgerSettings(_env_file=None)
    
    @pytest.mark.parametrize("name, value", [
        ("LEDGER_LOG_LEVEL", "LOUD"),
        ("LEDGER_LOG_FORMAT", "xml"),
    ])
    def test_invalid_logging_options(self, monkeypatch, name, value):
        """Test unknown log levels and formats fail at load time."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            LedgerSettings(_env_file=None)
    
    def test_get_settings_is_cached(self):
        """Test get_settings returns the same object until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings() is not first
