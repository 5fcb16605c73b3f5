"""Pydantic models for the transaction validation API."""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

RuleStatus = Literal["PASSED", "FAILED", "SKIPPED"]
ValidationStatus = Literal["PENDING", "PASSED", "FAILED", "ERROR"]


class Counterparty(BaseModel):
    """The other party to a transaction."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str


class ValidationRequest(BaseModel):
    """Incoming transaction to be validated."""
    model_config = ConfigDict(frozen=True)

    transaction_id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    # Strict: JSON booleans and numeric strings are not amounts
    amount: float = Field(gt=0, strict=True, allow_inf_nan=False)
    currency: str = Field(min_length=3, max_length=3)
    counterparty: Counterparty
    metadata: Dict[str, Any] = Field(default_factory=dict)
    timestamp: Optional[datetime] = None


class ValidationRule(BaseModel):
    """A named, typed check applied to every transaction.

    `config` is free-form on the wire; each rule kind parses it into its own
    typed config model when the catalog is built.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    type: str  # AMOUNT_LIMIT, CURRENCY_CHECK, COUNTERPARTY_CHECK
    enabled: bool = True
    priority: int = 0
    config: Dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RuleResult(BaseModel):
    """Outcome of a single rule against a single transaction."""
    model_config = ConfigDict(frozen=True)

    rule_id: str
    rule_name: str
    status: RuleStatus
    message: str = ""
    processed_at: datetime


class ValidationResult(BaseModel):
    """Aggregate verdict for one transaction across all enabled rules."""
    id: str
    transaction_id: str
    status: ValidationStatus = "PENDING"
    rules: List[RuleResult] = Field(default_factory=list)
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    processed_at: datetime
    processing_time: timedelta = timedelta(0)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_serializer("processing_time")
    def serialize_processing_time(self, value: timedelta) -> int:
        # Emitted as integer nanoseconds
        whole_seconds = value.days * 86400 + value.seconds
        return whole_seconds * 1_000_000_000 + value.microseconds * 1_000


class HealthResponse(BaseModel):
    """Static status payload for health probes."""
    status: str
    service: str
    timestamp: datetime
    version: Optional[str] = None
