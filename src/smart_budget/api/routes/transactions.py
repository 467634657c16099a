import asyncio
import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from smart_budget.api.dependencies import get_extractor, get_service, get_store
from smart_budget.api.schemas import SmartAddRequest, TransactionCreate
from smart_budget.core import settings
from smart_budget.logger import get_logger
from smart_budget.manager import CategorizerService
from smart_budget.models import Transaction, TransactionDraft
from smart_budget.services.extraction import TransactionExtractor
from smart_budget.storage.base import Store

logger = get_logger(__name__)

router = APIRouter()


@router.post("/api/transactions", response_model=Transaction, status_code=201)
async def create_transaction(
    req: TransactionCreate,
    service: Annotated[CategorizerService, Depends(get_service)],
    store: Annotated[Store, Depends(get_store)],
) -> Transaction:
    category = req.category
    subcategory = req.subcategory
    confidence = 1.0
    if not category:
        detected = service.categorize_fields(req.merchant, req.description)
        category = detected.category
        subcategory = detected.subcategory
        confidence = detected.confidence

    draft = TransactionDraft(
        amount=req.amount,
        direction=req.direction,
        merchant=req.merchant or "",
        description=req.description or "",
        category=category,
        subcategory=subcategory,
        confidence=confidence,
        date=req.date or dt.date.today(),
        source="manual",
        bank_account_id=req.bank_account_id,
        payment_method=req.payment_method,
    )
    record = await asyncio.to_thread(store.add_transaction, draft)
    logger.info(
        "[TRANSACTIONS] Created %s: %s %s -> '%s'",
        record.id,
        record.direction,
        record.amount,
        record.category,
    )
    return record


@router.get("/api/transactions", response_model=list[Transaction])
async def list_transactions(
    store: Annotated[Store, Depends(get_store)],
) -> list[Transaction]:
    limit = settings.get_env_int(
        "TRANSACTION_LIST_LIMIT",
        settings.DEFAULT_TRANSACTION_LIST_LIMIT,
        min_value=1,
    )
    return await asyncio.to_thread(store.list_transactions, limit)


@router.post("/api/transactions/smart-add", response_model=Transaction)
async def smart_add(
    req: SmartAddRequest,
    extractor: Annotated[TransactionExtractor, Depends(get_extractor)],
    store: Annotated[Store, Depends(get_store)],
) -> Transaction:
    draft = extractor.smart_add(req.text, direction=req.direction)
    if draft is None:
        raise HTTPException(status_code=422, detail="Could not find an amount in the text")
    record = await asyncio.to_thread(store.add_transaction, draft)
    logger.info(
        "[TRANSACTIONS] Smart add %s: %s -> '%s' (confidence: %.2f)",
        record.id,
        record.amount,
        record.category,
        record.confidence,
    )
    return record
