import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends

from smart_budget.api.dependencies import get_store
from smart_budget.api.schemas import AnomaliesResponse, CategoryTotal, SummaryResponse
from smart_budget.core import settings
from smart_budget.services.reporting import category_breakdown, detect_anomalies, generate_insights
from smart_budget.services.savings import summarize_cashflow
from smart_budget.storage.base import Store

router = APIRouter()


@router.get("/api/insights")
async def get_insights(
    store: Annotated[Store, Depends(get_store)],
) -> dict[str, list[str]]:
    transactions = await asyncio.to_thread(store.list_transactions)
    return {"insights": generate_insights(transactions)}


@router.get("/api/anomalies", response_model=AnomaliesResponse)
async def get_anomalies(
    store: Annotated[Store, Depends(get_store)],
) -> AnomaliesResponse:
    multiplier = settings.get_env_float(
        "ANOMALY_MULTIPLIER",
        settings.DEFAULT_ANOMALY_MULTIPLIER,
        min_value=0.0,
    )
    transactions = await asyncio.to_thread(store.list_transactions)
    return AnomaliesResponse(anomalies=detect_anomalies(transactions, multiplier=multiplier))


@router.get("/api/summary", response_model=SummaryResponse)
async def get_summary(
    store: Annotated[Store, Depends(get_store)],
) -> SummaryResponse:
    transactions = await asyncio.to_thread(store.list_transactions)
    return SummaryResponse(
        cashflow=summarize_cashflow(transactions),
        breakdown=[
            CategoryTotal(category=category, total=total)
            for category, total in category_breakdown(transactions)
        ],
    )
