"""Rule catalog: the ordered, read-only set of rules the service applies.

The catalog is built once at startup, either from the built-in defaults or
from a JSON rules file. Each rule's free-form `config` is parsed into its
kind's typed config here, so evaluation never re-reads raw mappings.
Unknown rule types are kept (they evaluate to SKIPPED) with no parsed config.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from app.models import ValidationRule
from app.validation.rules.registry import RuleConfig, get_rule_kind


class CatalogEntry(NamedTuple):
    rule: ValidationRule
    config: Optional[RuleConfig]


def _parse_config(rule: ValidationRule) -> Optional[RuleConfig]:
    kind = get_rule_kind(rule.type)
    if kind is None:
        return None
    return kind.parse_config(rule.config)


class RuleCatalog:
    """Ordered rule definitions, fixed at construction."""

    def __init__(self, rules: Iterable[ValidationRule]) -> None:
        entries: List[CatalogEntry] = []
        seen_ids = set()
        for rule in rules:
            if rule.id in seen_ids:
                raise ValueError(f"Duplicate rule id '{rule.id}' in catalog")
            seen_ids.add(rule.id)
            entries.append(CatalogEntry(rule=rule, config=_parse_config(rule)))
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)

    @property
    def rules(self) -> Tuple[ValidationRule, ...]:
        """All rules, enabled or not, in catalog order."""
        return tuple(entry.rule for entry in self._entries)

    def enabled(self) -> List[CatalogEntry]:
        """Enabled rules with their parsed configs, in catalog order."""
        return [entry for entry in self._entries if entry.rule.enabled]

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def default_rules() -> List[ValidationRule]:
    """The rule set the service runs when no rules file is configured."""
    now = datetime.now(timezone.utc)
    return [
        ValidationRule(
            id="amount-limit",
            name="Amount Limit Check",
            description="Validates transaction amount against maximum limits",
            type="AMOUNT_LIMIT",
            enabled=True,
            priority=1,
            config={"max_amount": 1_000_000.0},
            created_at=now,
            updated_at=now,
        ),
        ValidationRule(
            id="currency-check",
            name="Currency Validation",
            description="Validates transaction currency against allowed currencies",
            type="CURRENCY_CHECK",
            enabled=True,
            priority=2,
            config={"allowed_currencies": ["USD", "EUR", "GBP", "JPY"]},
            created_at=now,
            updated_at=now,
        ),
        ValidationRule(
            id="counterparty-check",
            name="Counterparty Validation",
            description="Validates counterparty information completeness",
            type="COUNTERPARTY_CHECK",
            enabled=True,
            priority=3,
            config={},
            created_at=now,
            updated_at=now,
        ),
    ]


def load_rules_file(path: Union[str, Path]) -> List[ValidationRule]:
    """Load rule definitions from a JSON file.

    The file holds a list of rule objects. Rules are ordered by `priority`
    here, once; ties keep their file order.
    """
    with open(path, "r") as f:
        raw_rules = json.load(f)

    if not isinstance(raw_rules, list):
        raise ValueError(f"Rules file {path} must contain a JSON list")

    rules = [ValidationRule.model_validate(item) for item in raw_rules]
    return sorted(rules, key=lambda rule: rule.priority)
