import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from smart_budget.api.dependencies import get_extractor, get_store
from smart_budget.api.schemas import ExtractEmailRequest, ExtractRequest, ExtractResponse
from smart_budget.logger import get_logger
from smart_budget.models import TransactionDraft
from smart_budget.services.extraction import TransactionExtractor
from smart_budget.storage.base import Store

logger = get_logger(__name__)

router = APIRouter()

EXTRACTION_FAILED = "Could not extract transaction"


async def _respond(draft: TransactionDraft | None, save: bool, store: Store) -> ExtractResponse:
    if draft is None:
        raise HTTPException(status_code=422, detail=EXTRACTION_FAILED)
    if not save:
        return ExtractResponse(transaction=draft)

    record = await asyncio.to_thread(store.add_transaction, draft)
    logger.info(
        "[EXTRACT] Saved %s transaction %s: %s %s (%s)",
        record.source,
        record.id,
        record.direction,
        record.amount,
        record.category,
    )
    return ExtractResponse(transaction=record, saved=True, id=record.id)


@router.post("/api/extract", response_model=ExtractResponse)
async def extract_transaction(
    req: ExtractRequest,
    extractor: Annotated[TransactionExtractor, Depends(get_extractor)],
    store: Annotated[Store, Depends(get_store)],
) -> ExtractResponse:
    draft = extractor.extract(req.text, kind=req.kind)
    return await _respond(draft, req.save, store)


@router.post("/api/extract/email", response_model=ExtractResponse)
async def extract_email(
    req: ExtractEmailRequest,
    extractor: Annotated[TransactionExtractor, Depends(get_extractor)],
    store: Annotated[Store, Depends(get_store)],
) -> ExtractResponse:
    draft = extractor.extract_email(req.subject, req.body)
    return await _respond(draft, req.save, store)
