"""Rule evaluator: applies one rule to one transaction.

Dispatch goes through the rule registry. A rule whose type has no registered
kind is SKIPPED rather than treated as an error, so it can never change the
overall verdict. Every outcome is reported to a `RuleObserver`.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Protocol

from app.models import RuleResult, ValidationRequest, ValidationRule
from app.validation.rules.registry import RuleConfig, RuleOutcome, get_rule_kind


class RuleObserver(Protocol):
    def rule_evaluated(self, rule: ValidationRule, result: RuleResult) -> None:
        ...


class LoggingRuleObserver:
    """Writes each rule evaluation to the log at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("app.validation.rules")

    def rule_evaluated(self, rule: ValidationRule, result: RuleResult) -> None:
        self.logger.debug(
            "Rule applied",
            extra={
                "rule_id": rule.id,
                "rule_name": rule.name,
                "status": result.status,
                "rule_message": result.message,
            },
        )


class RuleEvaluator:
    """Evaluates rules against transactions and reports each outcome."""

    def __init__(self, observer: Optional[RuleObserver] = None) -> None:
        self.observer = observer if observer is not None else LoggingRuleObserver()

    def evaluate(
        self,
        rule: ValidationRule,
        request: ValidationRequest,
        config: Optional[RuleConfig] = None,
    ) -> RuleResult:
        """Apply `rule` to `request`.

        `config` is the rule's pre-parsed typed config, as held by the
        catalog. When omitted it is parsed from `rule.config` on the spot.
        """
        processed_at = datetime.now(timezone.utc)

        kind = get_rule_kind(rule.type)
        if kind is None:
            outcome = RuleOutcome("SKIPPED", f"Unknown rule type: {rule.type}")
        else:
            if config is None:
                config = kind.parse_config(rule.config)
            outcome = kind.check(request, config)

        result = RuleResult(
            rule_id=rule.id,
            rule_name=rule.name,
            status=outcome.status,
            message=outcome.message,
            processed_at=processed_at,
        )
        self.observer.rule_evaluated(rule, result)
        return result
