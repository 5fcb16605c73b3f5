"""Shared fixtures for the test suite."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.models import Counterparty, RuleResult, ValidationRequest, ValidationRule
from app.storage.memory import ResultStore
from app.validation.catalog import RuleCatalog, default_rules
from app.validation.engine import ValidationService
from app.validation.evaluator import RuleEvaluator


class RecordingObserver:
    """Collects (rule, result) pairs instead of logging them."""

    def __init__(self):
        self.events: list[tuple[ValidationRule, RuleResult]] = []

    def rule_evaluated(self, rule, result):
        self.events.append((rule, result))


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_level="DEBUG", log_json=True)


@pytest.fixture
def catalog():
    return RuleCatalog(default_rules())


@pytest.fixture
def store():
    return ResultStore()


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def evaluator(observer):
    return RuleEvaluator(observer=observer)


@pytest.fixture
def service(catalog, store, evaluator):
    return ValidationService(catalog=catalog, store=store, evaluator=evaluator)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


def make_request(
    transaction_id="test-txn-123",
    amount=1000.0,
    currency="USD",
    counterparty_id="cp-123",
    counterparty_name="Test Corp",
    counterparty_type="BUSINESS",
    tx_type="PAYMENT",
) -> ValidationRequest:
    return ValidationRequest(
        transaction_id=transaction_id,
        type=tx_type,
        amount=amount,
        currency=currency,
        counterparty=Counterparty(
            id=counterparty_id,
            name=counterparty_name,
            type=counterparty_type,
        ),
        timestamp=datetime(2026, 2, 22, 10, 0, tzinfo=timezone.utc),
    )


def make_rule(
    rule_id="rule-1",
    rule_type="AMOUNT_LIMIT",
    enabled=True,
    priority=1,
    config=None,
    name=None,
) -> ValidationRule:
    return ValidationRule(
        id=rule_id,
        name=name or f"Rule {rule_id}",
        type=rule_type,
        enabled=enabled,
        priority=priority,
        config=config or {},
    )
