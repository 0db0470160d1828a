from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from loguru import logger

from tungsten.config import settings
from tungsten.db import get_session
from tungsten.engine.router import router as engine_router
from tungsten.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_file)
    logger.info(f"Starting Tungsten engine (store={settings.store_backend})")
    get_session()
    yield


app = FastAPI(title="Tungsten Standard", version="0.1.0", lifespan=lifespan)
app.include_router(engine_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "engine": {
            "domains": "/engine/domains",
            "profile": "/engine/profile",
            "profile_edit": "/engine/profile/{field}",
            "answers": "/engine/answers",
            "answers_edit": "/engine/answers/{domain}",
            "metrics": "/engine/metrics",
            "content": "/engine/content",
            "guidance": "/engine/guidance",
            "vo2_series": "/engine/vo2/series",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    """Serve the engine locally for the presentation layer."""
    uvicorn.run("tungsten.main:app", host=settings.host, port=settings.port)
