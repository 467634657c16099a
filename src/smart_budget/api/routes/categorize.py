from typing import Annotated

from fastapi import APIRouter, Depends

from smart_budget.api.dependencies import get_service
from smart_budget.api.schemas import CategorizeRequest
from smart_budget.manager import CategorizerService
from smart_budget.models import CategorizationResult

router = APIRouter()


@router.post("/api/categorize", response_model=CategorizationResult)
async def categorize_text(
    req: CategorizeRequest,
    service: Annotated[CategorizerService, Depends(get_service)],
) -> CategorizationResult:
    if req.text is not None:
        return service.classify(req.text)
    return service.categorize_fields(req.merchant, req.description)
