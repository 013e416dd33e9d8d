# ideascore_project/ideascore/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI

from ideascore.config import setup_json_logging, settings
from ideascore.api.routes.scoring import router as scoring_router


def create_app() -> FastAPI:
    setup_json_logging(log_level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(
        title="IDEASCORE - Prioritization & Validation API",
        version="0.1.0",
    )

    app.include_router(scoring_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
