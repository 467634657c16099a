from fastapi import HTTPException, Request

from smart_budget.manager import CategorizerService
from smart_budget.services.extraction import TransactionExtractor
from smart_budget.storage.base import Store


def get_service(request: Request) -> CategorizerService:
    service = getattr(request.app.state, "service", None)
    if not service:
        raise HTTPException(status_code=500, detail="Service not initialized")
    return service


def get_extractor(request: Request) -> TransactionExtractor:
    extractor = getattr(request.app.state, "extractor", None)
    if not extractor:
        raise HTTPException(status_code=500, detail="Service not initialized")
    return extractor


def get_store(request: Request) -> Store:
    store = getattr(request.app.state, "store", None)
    if not store:
        raise HTTPException(status_code=500, detail="Storage not configured")
    return store
