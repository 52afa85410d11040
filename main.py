"""FastAPI entry point for the deed transcription trainer."""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.attempts import router as attempts_router
from api.dashboard import router as dashboard_router
from api.documents import router as documents_router
from api.health import router as health_router
from config.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Deed Trainer",
    description="Grades deed transcriptions against ground truth and assigns the next document",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Register routers ────────────────────────────────────────
app.include_router(health_router)
app.include_router(attempts_router)
app.include_router(documents_router)
app.include_router(dashboard_router)

# Scans on local disk are served directly; with S3 the browser opens the
# object URL instead.
if settings.content_backend != "s3":
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.upload_path, check_dir=False),
        name="uploads",
    )


if __name__ == "__main__":
    logger.info("Starting deed trainer on port %d", settings.service_port)
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.service_port,
        reload=settings.debug,
    )
