"""
FastAPI app entrypoint.

Serves the normalized availability grid for every configured tenant.
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from grid_gateway.api.routes import availability
from grid_gateway.config import settings
from grid_gateway.core.constants import GRID_SCHEMA_VERSION
from grid_gateway.services.adapters import list_adapters
from grid_gateway.services.tenants import list_tenants

logger = logging.getLogger(__name__)

app = FastAPI(title="Availability Grid Gateway", version="0.1.0")

# CORS: dev origins + optional CORS_ORIGINS env (comma-separated) for the calendar front-end
_cors_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_cors_origins.extend(settings.cors_origin_list())
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(availability.router, prefix="/api/v1", tags=["availability"])

logger.info(
    "Grid gateway ready (schema %s): %d adapter(s), %d tenant(s)",
    GRID_SCHEMA_VERSION,
    len(list_adapters()),
    len(list_tenants()),
)


@app.get("/", include_in_schema=False)
def root():
    """Root: point to API docs and health."""
    return {"message": "Availability Grid Gateway", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
