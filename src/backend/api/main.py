"""Entry point for the FastAPI application.

`create_app` wires the receipts router to a `ReceiptService` and registers the
error handlers. Run with ``uvicorn --factory api.main:create_app`` from
``src/backend`` or via ``python -m api.main``. Importing this module does not
build an app.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.error_handlers import register_exception_handlers
from api.receipts import router as receipts_router
from common.settings import AppConfig, configure_logging, get_app_config
from receipts.service import ReceiptService

logger = logging.getLogger(__name__)


def create_app(
    service: Optional[ReceiptService] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    config = config or get_app_config()
    configure_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Receipt points API starting (parse failure policy %s)",
            config.parse_failure_policy.value,
        )
        yield
        logger.info("Receipt points API shutting down")

    app = FastAPI(title="Receipt Points API", version="1.0.0", lifespan=lifespan)
    app.state.config = config
    app.state.receipt_service = service or ReceiptService(scoring_config=config.scoring_config())

    register_exception_handlers(app)
    app.include_router(receipts_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def main() -> None:
    config = get_app_config()
    app = create_app(config=config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
