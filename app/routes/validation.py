"""Validation endpoints: validate a transaction, fetch a result by id."""

import logging

from fastapi import APIRouter, HTTPException, Request, status

from app.models import ValidationRequest, ValidationResult
from app.validation.engine import ValidationService
from app.validation.errors import ValidationResultNotFoundError

router = APIRouter(prefix="/api")

logger = logging.getLogger(__name__)


def _get_service(request: Request) -> ValidationService:
    """Retrieve the validation service from application state."""
    return request.app.state.validation_service


@router.post("/validate", response_model=ValidationResult)
async def validate_transaction(
    transaction: ValidationRequest,
    request: Request,
) -> ValidationResult:
    """Validate a transaction against all enabled rules.

    A transaction that fails rules still returns 200; the verdict is in the
    body's `status` and `error_code`.
    """
    service = _get_service(request)
    return service.validate(transaction)


@router.get("/validate/{validation_id}", response_model=ValidationResult)
async def get_validation_result(
    validation_id: str,
    request: Request,
) -> ValidationResult:
    """Look up a previously produced validation result."""
    service = _get_service(request)
    try:
        return service.get_result(validation_id)
    except ValidationResultNotFoundError as exc:
        logger.info(
            "Validation result not found",
            extra={"validation_id": validation_id},
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
