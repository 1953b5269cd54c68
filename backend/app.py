from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

# Third-party
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env before reading any configuration
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# Local application imports
from api.contact import router as contact_router  # noqa: E402
from api.newsletter import router as newsletter_router  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_app_version,
    get_email_backend,
    get_host,
    get_port,
)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Log configuration snapshot on startup and shutdown."""
    logger.info(
        "Application starting",
        extra={"version": APP_VERSION, "email_backend": get_email_backend()},
    )
    yield
    logger.info("Application shutdown")


app = FastAPI(
    title="Contact & Body Metrics Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS - all origins allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contact_router)
app.include_router(newsletter_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def main() -> None:
    port = get_port()
    logger.info("Server running on port %s", port)
    uvicorn.run(app, host=get_host(), port=port)


# Explicit export per mypy/tests
__all__: list[str] = ["app", "lifespan", "main"]


if __name__ == "__main__":  # pragma: no cover
    main()
