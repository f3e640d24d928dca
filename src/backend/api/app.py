from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from api.analyze import router as analyze_router


def _setup_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app() -> FastAPI:
    _setup_logging()
    app = FastAPI(title="Suitability Report Checker", version="0.1.0")
    app.include_router(analyze_router)
    return app


app = create_app()
