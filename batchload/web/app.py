"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from batchload.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="batchload", version="0.1.0")
    app.include_router(router)
    return app
