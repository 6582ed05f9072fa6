"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_ledger.api.catalog import router as catalog_router
from nutrition_ledger.api.diary import router as diary_router
from nutrition_ledger.app_logging import configure_logging
from nutrition_ledger.containers import AppContainer
from nutrition_ledger.domain.errors import (
    DuplicateIdError,
    IndexOutOfRangeError,
    InvalidAmountError,
    InvalidPortionError,
    LedgerError,
    NotFoundError,
)

_UNPROCESSABLE = 422

_STATUS_BY_ERROR: dict[type[LedgerError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateIdError: status.HTTP_409_CONFLICT,
    IndexOutOfRangeError: status.HTTP_404_NOT_FOUND,
    InvalidAmountError: _UNPROCESSABLE,
    InvalidPortionError: _UNPROCESSABLE,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app serving one ledger."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Ledger")
    app.state.container = container

    app.include_router(catalog_router)
    app.include_router(diary_router)

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
