"""Registry of rule kinds keyed by rule type.

Each rule module declares a typed config model and a check function, and
registers them under its rule type with `@register_rule`. The evaluator
dispatches through this registry, so a new kind of rule is a new module
rather than another branch in a switch.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Type

from pydantic import BaseModel, ConfigDict

from app.models import RuleStatus, ValidationRequest


class RuleOutcome(NamedTuple):
    """Verdict and human-readable message produced by a check function."""
    status: RuleStatus
    message: str


class RuleConfig(BaseModel):
    """Base for typed per-kind rule configuration."""
    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "RuleConfig":
        """Build a config from a free-form mapping.

        Subclasses read the keys they understand and keep their defaults for
        anything missing or of the wrong type; this never raises.
        """
        return cls()


CheckFn = Callable[[ValidationRequest, Any], RuleOutcome]


@dataclass(frozen=True)
class RuleKind:
    rule_type: str
    config_model: Type[RuleConfig]
    check: CheckFn

    def parse_config(self, raw: Optional[Mapping[str, Any]]) -> RuleConfig:
        return self.config_model.from_raw(raw or {})


RULE_REGISTRY: Dict[str, RuleKind] = {}


def register_rule(rule_type: str, config_model: Type[RuleConfig]):
    """Decorator registering a check function as the handler for `rule_type`."""

    def decorator(check: CheckFn) -> CheckFn:
        if rule_type in RULE_REGISTRY:
            raise ValueError(f"Rule type '{rule_type}' is already registered")
        RULE_REGISTRY[rule_type] = RuleKind(
            rule_type=rule_type,
            config_model=config_model,
            check=check,
        )
        return check

    return decorator


def get_rule_kind(rule_type: str) -> Optional[RuleKind]:
    """Return the registered kind for `rule_type`, or None if unrecognized."""
    return RULE_REGISTRY.get(rule_type)
