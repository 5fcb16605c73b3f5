"""Transaction amount limit rule.

Fails transactions whose amount is strictly greater than a configured
maximum. A transaction for exactly the maximum passes.
"""

import math
from typing import Any, Mapping

from app.models import ValidationRequest
from app.validation.rules.registry import RuleConfig, RuleOutcome, register_rule

DEFAULT_MAX_AMOUNT = 1_000_000.0


class AmountLimitConfig(RuleConfig):
    max_amount: float = DEFAULT_MAX_AMOUNT

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "AmountLimitConfig":
        value = raw.get("max_amount")
        # bool is an int subclass, but `true` is not a limit
        if (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and math.isfinite(value)
        ):
            return cls(max_amount=float(value))
        return cls()


@register_rule("AMOUNT_LIMIT", AmountLimitConfig)
def check_amount_limit(
    request: ValidationRequest,
    config: AmountLimitConfig,
) -> RuleOutcome:
    """Check the transaction amount against `config.max_amount`."""
    if request.amount > config.max_amount:
        return RuleOutcome(
            "FAILED",
            f"Amount {request.amount:.2f} exceeds maximum limit of "
            f"{config.max_amount:.2f}",
        )

    return RuleOutcome(
        "PASSED",
        f"Amount {request.amount:.2f} is within limit of {config.max_amount:.2f}",
    )
