"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routes
from .core import ALLOWED_CORS_ORIGINS, RELOAD, configure_logging
from .storage import RecordStore, open_store

log = logging.getLogger(__name__)


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Build the app around ``store``, or the configured backend when omitted.

    The store is opened on startup and closed on shutdown by the lifespan.
    """

    configure_logging()
    record_store = store if store is not None else open_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        record_store.open()
        log.info("Opened %s record store", record_store.name)
        app.state.store = record_store
        try:
            yield
        finally:
            record_store.close()
            log.info("Closed %s record store", record_store.name)

    app = FastAPI(title="Orders Leaderboard", version="2.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("leaderboard.app:app", host="127.0.0.1", port=8000, reload=RELOAD)
