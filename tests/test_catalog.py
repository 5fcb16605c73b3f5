"""Tests for the rule catalog and rules file loading."""

import json

import pytest
from pydantic import ValidationError

from app.validation.catalog import RuleCatalog, default_rules, load_rules_file
from app.validation.rules.amount_limit import AmountLimitConfig
from app.validation.rules.currency_check import CurrencyCheckConfig
from tests.conftest import make_rule


class TestDefaultRules:
    def test_three_rules_in_order(self):
        assert [r.id for r in default_rules()] == [
            "amount-limit",
            "currency-check",
            "counterparty-check",
        ]

    def test_all_enabled(self):
        assert all(r.enabled for r in default_rules())

    def test_priorities(self):
        assert [r.priority for r in default_rules()] == [1, 2, 3]


class TestRuleCatalog:
    def test_preserves_insertion_order(self):
        rules = [make_rule("c", priority=1), make_rule("a", priority=3), make_rule("b", priority=2)]
        catalog = RuleCatalog(rules)
        assert [r.id for r in catalog.rules] == ["c", "a", "b"]
        # Repeated reads return the same order
        assert [r.id for r in catalog.rules] == ["c", "a", "b"]

    def test_enabled_filters_disabled_rules(self):
        catalog = RuleCatalog([
            make_rule("on-1"),
            make_rule("off", enabled=False),
            make_rule("on-2"),
        ])
        assert [e.rule.id for e in catalog.enabled()] == ["on-1", "on-2"]
        assert len(catalog) == 3

    def test_config_parsed_at_construction(self):
        catalog = RuleCatalog([
            make_rule("amount", "AMOUNT_LIMIT", config={"max_amount": 10}),
            make_rule("currency", "CURRENCY_CHECK", config={"allowed_currencies": ["CHF"]}),
        ])
        amount, currency = list(catalog)
        assert amount.config == AmountLimitConfig(max_amount=10.0)
        assert currency.config == CurrencyCheckConfig(allowed_currencies=("CHF",))

    def test_malformed_config_falls_back_to_defaults(self):
        catalog = RuleCatalog([make_rule("amount", "AMOUNT_LIMIT", config={"max_amount": "lots"})])
        assert list(catalog)[0].config == AmountLimitConfig()

    def test_unknown_type_kept_without_config(self):
        catalog = RuleCatalog([make_rule("mystery", "VELOCITY_CHECK")])
        entry = list(catalog)[0]
        assert entry.rule.type == "VELOCITY_CHECK"
        assert entry.config is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate rule id"):
            RuleCatalog([make_rule("same"), make_rule("same")])

    def test_rules_is_immutable_sequence(self):
        catalog = RuleCatalog(default_rules())
        assert isinstance(catalog.rules, tuple)


class TestLoadRulesFile:
    def _write(self, tmp_path, payload):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(payload))
        return path

    def test_loads_and_orders_by_priority(self, tmp_path):
        path = self._write(tmp_path, [
            {"id": "second", "name": "Second", "type": "CURRENCY_CHECK", "priority": 2},
            {"id": "first", "name": "First", "type": "AMOUNT_LIMIT", "priority": 1,
             "config": {"max_amount": 50}},
        ])
        rules = load_rules_file(path)
        assert [r.id for r in rules] == ["first", "second"]
        assert rules[0].config == {"max_amount": 50}

    def test_equal_priorities_keep_file_order(self, tmp_path):
        path = self._write(tmp_path, [
            {"id": "x", "name": "X", "type": "AMOUNT_LIMIT", "priority": 1},
            {"id": "y", "name": "Y", "type": "AMOUNT_LIMIT", "priority": 1},
        ])
        assert [r.id for r in load_rules_file(path)] == ["x", "y"]

    def test_defaults_for_optional_fields(self, tmp_path):
        path = self._write(tmp_path, [{"id": "x", "name": "X", "type": "AMOUNT_LIMIT"}])
        rule = load_rules_file(path)[0]
        assert rule.enabled is True
        assert rule.config == {}

    def test_non_list_rejected(self, tmp_path):
        path = self._write(tmp_path, {"id": "x"})
        with pytest.raises(ValueError, match="must contain a JSON list"):
            load_rules_file(path)

    def test_rule_missing_required_field_rejected(self, tmp_path):
        path = self._write(tmp_path, [{"name": "No id", "type": "AMOUNT_LIMIT"}])
        with pytest.raises(ValidationError):
            load_rules_file(path)

    def test_nan_max_amount_in_file_falls_back_to_default(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(
            '[{"id": "amount", "name": "Amount", "type": "AMOUNT_LIMIT", '
            '"config": {"max_amount": NaN}}]'
        )
        catalog = RuleCatalog(load_rules_file(path))
        assert list(catalog)[0].config == AmountLimitConfig()
