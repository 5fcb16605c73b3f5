"""Core validation orchestrator.

Runs every enabled rule in catalog order against a transaction and folds
the outcomes into one verdict:
  - any FAILED rule -> FAILED, with error code VALIDATION_FAILED
  - otherwise      -> PASSED (SKIPPED rules never change the verdict)

Results are kept in the result store so they can be fetched by id later.
The catalog is read-only and each call builds its own result, so concurrent
calls share no mutable state beyond the store and the id generator.
"""

import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from app.models import ValidationRequest, ValidationResult, ValidationStatus
from app.storage.memory import ResultStore
from app.validation.catalog import RuleCatalog
from app.validation.errors import ValidationResultNotFoundError
from app.validation.evaluator import RuleEvaluator
from app.validation.ids import ResultIdGenerator

logger = logging.getLogger(__name__)

VALIDATION_FAILED_CODE = "VALIDATION_FAILED"
VALIDATION_FAILED_MESSAGE = "One or more validation rules failed"


class ValidationService:
    """Validates transactions against the rule catalog."""

    def __init__(
        self,
        catalog: RuleCatalog,
        store: ResultStore,
        evaluator: Optional[RuleEvaluator] = None,
        id_generator: Optional[Callable[[], str]] = None,
    ) -> None:
        self.catalog = catalog
        self.store = store
        self.evaluator = evaluator if evaluator is not None else RuleEvaluator()
        self.id_generator = id_generator if id_generator is not None else ResultIdGenerator()
        logger.info(
            "Validation service initialized",
            extra={"rules_count": len(catalog)},
        )

    def validate(self, request: ValidationRequest) -> ValidationResult:
        """Validate a single transaction against all enabled rules."""
        started = time.perf_counter()

        result = ValidationResult(
            id=self.id_generator(),
            transaction_id=request.transaction_id,
            status="PENDING",
            processed_at=datetime.now(timezone.utc),
        )

        logger.info(
            "Starting transaction validation",
            extra={
                "transaction_id": request.transaction_id,
                "validation_id": result.id,
                "amount": request.amount,
                "currency": request.currency,
            },
        )

        overall: ValidationStatus = "PASSED"
        for entry in self.catalog.enabled():
            rule_result = self.evaluator.evaluate(entry.rule, request, entry.config)
            result.rules.append(rule_result)

            # Once failed, later passing rules do not restore PASSED
            if rule_result.status == "FAILED":
                overall = "FAILED"

        result.status = overall
        result.processing_time = timedelta(seconds=time.perf_counter() - started)

        if overall == "FAILED":
            result.error_code = VALIDATION_FAILED_CODE
            result.error_message = VALIDATION_FAILED_MESSAGE

        self.store.save(result)

        logger.info(
            "Transaction validation completed",
            extra={
                "transaction_id": request.transaction_id,
                "validation_id": result.id,
                "status": result.status,
                "processing_time_ms": round(
                    result.processing_time.total_seconds() * 1000, 3
                ),
                "rules_processed": len(result.rules),
            },
        )

        return result

    def get_result(self, validation_id: str) -> ValidationResult:
        """Return the stored result for `validation_id`.

        Raises ValidationResultNotFoundError for a blank id or an id this
        process has not produced (or has since evicted).
        """
        if not validation_id or not validation_id.strip():
            raise ValidationResultNotFoundError(validation_id or "")

        result = self.store.get(validation_id)
        if result is None:
            raise ValidationResultNotFoundError(validation_id)
        return result
