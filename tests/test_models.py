"""
Tests for Account Ledger models.

Test strategy:
1. Unit tests for models, store, parsing and router
2. Integration tests for full sessions (scripted input, captured output)
3. No console I/O in tests
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from account_ledger.models import (
    OperationKind,
    OperationRequest,
    OperationResult,
    OperationStatus,
    StoreCommand,
)


class TestOperationKind:
    """Tests for operation name resolution."""
    
    @pytest.mark.parametrize("name, expected", [
        ("TOTAL", OperationKind.TOTAL),
        ("credit", OperationKind.CREDIT),
        ("  Debit  ", OperationKind.DEBIT),
    ])
    def test_parse_known_names(self, name, expected):
        """Test names are trimmed and case-folded before matching."""
        assert OperationKind.parse(name) is expected
    
    @pytest.mark.parametrize("name", ["FOO", "", "CRED IT", None, 1, b"TOTAL"])
    def test_parse_unknown_names(self, name):
        """Test anything else resolves to None."""
        assert OperationKind.parse(name) is None
    
    def test_values(self):
        """Test the wire names used by the menu."""
        assert [k.value for k in OperationKind] == ["TOTAL", "CREDIT", "DEBIT"]


class TestStoreCommand:
    """Tests for store command resolution."""
    
    def test_parse(self):
        """Test READ/WRITE resolution."""
        assert StoreCommand.parse(" write ") is StoreCommand.WRITE
        assert StoreCommand.parse("Read") is StoreCommand.READ
        assert StoreCommand.parse("erase") is None


class TestOperationModels:
    """Tests for request and result models."""
    
    def test_request_is_frozen(self):
        """Test a request cannot be altered once built."""
        request = OperationRequest(kind=OperationKind.CREDIT, amount=Decimal("5"))
        with pytest.raises(ValidationError):
            request.amount = Decimal("6")
    
    def test_request_accepts_kind_by_value(self):
        """Test the kind can be given as its string value."""
        request = OperationRequest(kind="DEBIT", amount=Decimal("1"))
        assert request.kind is OperationKind.DEBIT
    
    def test_result_flags(self):
        """Test applied and balance_changed properties."""
        result = OperationResult(
            kind=OperationKind.DEBIT,
            status=OperationStatus.REJECTED,
            amount=Decimal("600"),
            balance_before=Decimal("500"),
            balance_after=Decimal("500"),
            message="Insufficient funds for this debit.",
        )
        assert result.applied is False
        assert result.balance_changed is False
    
    def test_status_values(self):
        """Test status string values."""
        assert OperationStatus.APPLIED.value == "applied"
        assert OperationStatus.REJECTED.value == "rejected"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
