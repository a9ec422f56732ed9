"""
FastAPI Application Entry Point
SynergyAI — Brand Partnership Evaluator
"""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router
from config.settings import settings

# ─── Logging ─────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# ─── App ─────────────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Scores a proposed brand collaboration across a weighted ten-parameter rubric. "
        "Pulls Tracxn company profiles when a key is configured and asks Gemini, "
        "grounded with Google Search, for the scorecard, concepts and risks."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# ─── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ─── Startup ─────────────────────────────────────────────────────────────────

def credential_warnings() -> list:
    """Server-side credentials that are missing. Requests may still supply a Tracxn key."""
    missing = []
    if not settings.GEMINI_API_KEY:
        missing.append("GEMINI_API_KEY is not set; /evaluate will answer 503")
    if not settings.TRACXN_API_KEY:
        missing.append("TRACXN_API_KEY is not set; profiles are looked up only when a request carries a key")
    return missing


@app.on_event("startup")
async def startup_event():
    log = logging.getLogger(__name__)
    log.info(f"🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION} (model {settings.GEMINI_MODEL})")
    for warning in credential_warnings():
        log.warning(warning)


# ─── Routes ──────────────────────────────────────────────────────────────────

app.include_router(router, prefix="/api/v1")


@app.get("/", tags=["System"])
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "status": "running",
    }


# ─── Run ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
