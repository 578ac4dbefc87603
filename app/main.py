import logging
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.api.router import api_router
from app.config import settings
from app.core.database import init_db
from app.services.github import close_github_client, get_github_cache_stats

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "uvicorn.access")


def setup_logging(level: int | None = None) -> None:
    """Configure root logging: one line per record, to stdout."""
    logging.basicConfig(
        level=level if level is not None else (logging.DEBUG if settings.debug else logging.INFO),
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # uvicorn.access included: failed requests are logged by log_requests below
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    setup_logging()
    logger.info("Pulse API starting up")
    if not settings.webhook_secret_configured:
        logger.warning("GITHUB_WEBHOOK_SECRET is not set; webhook deliveries will be refused")
    if not settings.enrichment_enabled:
        logger.info("GITHUB_TOKEN is not set; commits are stored without GitHub stats")
    if settings.debug:
        await init_db()
    yield
    logger.info(f"GitHub cache at shutdown: {get_github_cache_stats()}")
    await close_github_client()
    logger.info("Pulse API shutting down")


app = FastAPI(
    title="Pulse API",
    description="GitHub push ingestion and commit analytics",
    version="0.1.0",
    lifespan=lifespan,
)

# Trust X-Forwarded-Proto from a TLS-terminating reverse proxy
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log failed requests and every webhook delivery with its duration."""
    if request.method == "OPTIONS" or request.url.path == "/health":
        return await call_next(request)

    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    path = request.url.path
    if response.status_code >= 400 or path.startswith("/api/v1/webhooks"):
        logger.info(f"{request.method} {path} -> {response.status_code} ({elapsed_ms:.0f}ms)")

    return response


app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
