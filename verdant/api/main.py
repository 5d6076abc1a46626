import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI

from verdant.api.deps import get_memory_backend, get_settings
from verdant.app_shell.seed import apply_seed, load_seed
from verdant.components.layout import SITE_DESCRIPTION, SITE_TITLE
from verdant.rules.loader import load_rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules on startup (fail-fast)
    try:
        load_rules(settings.rules_path)
        logger.info("Rules loaded from %s", settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    logger.info("Backend: %s", settings.backend)
    if settings.backend == "memory" and settings.seed_path:
        counts = apply_seed(get_memory_backend(), load_seed(Path(settings.seed_path)))
        logger.info("Seeded in-memory backend: %s", counts)
    yield


app = FastAPI(
    title=SITE_TITLE,
    description=SITE_DESCRIPTION,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from verdant.api.routes import admin_products, storefront  # noqa: E402

app.include_router(admin_products.router, prefix="/admin/products", tags=["Admin Products"])
app.include_router(storefront.router, prefix="", tags=["Storefront"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "verdant-market"}
