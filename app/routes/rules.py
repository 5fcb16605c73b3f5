"""Read-only view of the rule catalog."""

from typing import List

from fastapi import APIRouter, Request

from app.models import ValidationRule

router = APIRouter(prefix="/api")


@router.get("/rules", response_model=List[ValidationRule])
async def get_rules(request: Request) -> List[ValidationRule]:
    """Return every configured rule, enabled or not, in evaluation order."""
    return list(request.app.state.catalog.rules)
