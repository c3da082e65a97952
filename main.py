"""
FastAPI app for the promo code factory.
In-memory store seeded from fixtures; state is lost when the process exits.
"""
from __future__ import annotations

from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from promocode_api.core.config import Settings, get_settings
from promocode_api.core.logger import configure_logging, get_logger
from promocode_api.db.store import DataStore
from promocode_api.routers import customers, employees, preferences, promo_codes

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[DataStore] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if store is None:
        store = DataStore.seeded() if settings.seed_fixtures else DataStore()
    logger.info("In-memory store ready: %s", store.counts())

    app = FastAPI(
        title=settings.app_title,
        description="Administration of customers, preferences, employees and promo codes (in-memory).",
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(customers.router, prefix=settings.api_prefix)
    app.include_router(preferences.router, prefix=settings.api_prefix)
    app.include_router(employees.router, prefix=settings.api_prefix)
    app.include_router(promo_codes.router, prefix=settings.api_prefix)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(app, host=_settings.host, port=_settings.port)
