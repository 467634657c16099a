from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from smart_budget.api.routes import categorize, extraction, goals, insights, transactions
from smart_budget.core import settings
from smart_budget.logger import get_logger, setup_logging
from smart_budget.manager import CategorizerService
from smart_budget.services.extraction import TransactionExtractor
from smart_budget.storage.base import Store
from smart_budget.storage.json_file import JsonFileStore
from smart_budget.storage.memory import InMemoryStore

logger = get_logger(__name__)


def build_store() -> Store:
    backend = settings.get_storage_backend()
    if backend == "json":
        logger.info("[STORE] Using JSON file storage at %s", settings.STORE_PATH)
        return JsonFileStore(data_path=settings.STORE_PATH)
    logger.info("[STORE] Using in-memory storage. Data will not survive a restart.")
    return InMemoryStore()


def create_app(store: Store | None = None) -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        service = CategorizerService(rules_path=settings.RULES_PATH)
        extractor = TransactionExtractor(service=service)

        app.state.service = service
        app.state.extractor = extractor
        app.state.store = store if store is not None else build_store()

        logger.info("Services initialized.")
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Smart Budget", lifespan=lifespan)

    app.include_router(categorize.router)
    app.include_router(extraction.router)
    app.include_router(transactions.router)
    app.include_router(insights.router)
    app.include_router(goals.router)

    return app


app = create_app()
