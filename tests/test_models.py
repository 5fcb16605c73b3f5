"""Tests for request model constraints."""

import pytest
from pydantic import ValidationError

from app.models import Counterparty, ValidationRequest


def _request(amount):
    return ValidationRequest(
        transaction_id="txn-1",
        type="PAYMENT",
        amount=amount,
        currency="USD",
        counterparty=Counterparty(id="cp-1", name="Test Corp", type="BUSINESS"),
    )


class TestValidationRequestAmount:
    @pytest.mark.parametrize("amount", [True, False, "100", float("inf"), float("nan"), 0, -1.5])
    def test_rejected(self, amount):
        with pytest.raises(ValidationError):
            _request(amount)

    @pytest.mark.parametrize("amount", [1, 0.01, 2_000_000.0])
    def test_accepted(self, amount):
        assert _request(amount).amount == amount
