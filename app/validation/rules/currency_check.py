"""Currency allow-list rule.

Only transactions in one of the allowed ISO 4217 codes pass. Matching is
exact and case-sensitive: "usd" is not "USD".
"""

from typing import Any, Mapping, Tuple

from app.models import ValidationRequest
from app.validation.rules.registry import RuleConfig, RuleOutcome, register_rule

DEFAULT_ALLOWED_CURRENCIES: Tuple[str, ...] = ("USD", "EUR", "GBP", "JPY")


class CurrencyCheckConfig(RuleConfig):
    allowed_currencies: Tuple[str, ...] = DEFAULT_ALLOWED_CURRENCIES

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "CurrencyCheckConfig":
        value = raw.get("allowed_currencies")
        if isinstance(value, (list, tuple)) and all(
            isinstance(code, str) for code in value
        ):
            return cls(allowed_currencies=tuple(value))
        return cls()


@register_rule("CURRENCY_CHECK", CurrencyCheckConfig)
def check_currency(
    request: ValidationRequest,
    config: CurrencyCheckConfig,
) -> RuleOutcome:
    """Check the transaction currency against the allow-list."""
    if request.currency not in config.allowed_currencies:
        return RuleOutcome("FAILED", f"Currency {request.currency} is not allowed")

    return RuleOutcome("PASSED", f"Currency {request.currency} is allowed")
