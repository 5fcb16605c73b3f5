"""Counterparty completeness rule."""

from app.models import ValidationRequest
from app.validation.rules.registry import RuleConfig, RuleOutcome, register_rule


class CounterpartyCheckConfig(RuleConfig):
    pass


@register_rule("COUNTERPARTY_CHECK", CounterpartyCheckConfig)
def check_counterparty(
    request: ValidationRequest,
    config: CounterpartyCheckConfig,
) -> RuleOutcome:
    """Require a counterparty id and name.

    The id is checked first, so a counterparty missing both is reported as
    missing its id.
    """
    if not request.counterparty.id:
        return RuleOutcome("FAILED", "Counterparty ID is required")
    if not request.counterparty.name:
        return RuleOutcome("FAILED", "Counterparty name is required")

    return RuleOutcome("PASSED", "Counterparty information is valid")
