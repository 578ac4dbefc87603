from dataclasses import dataclass
from datetime import datetime
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.database import get_db
from app.core.dates import start_of_month_utc, to_utc
from app.core.exceptions import ConfigurationError, QueryValidationError
from app.core.security import SignatureVerifier
from app.services.ingestion import IngestionPipeline
from app.services.stats_enricher import StatsEnricher

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_signature_verifier() -> SignatureVerifier:
    """Verifier for the configured webhook secret.

    Raises:
        ConfigurationError: If GITHUB_WEBHOOK_SECRET is not set
    """
    if not settings.webhook_secret_configured:
        raise ConfigurationError("GITHUB_WEBHOOK_SECRET")
    return SignatureVerifier(settings.github_webhook_secret)


def get_stats_enricher() -> StatsEnricher:
    return StatsEnricher(settings.github_token, timeout=settings.github_api_timeout)


def get_ingestion_pipeline(
    enricher: StatsEnricher = Depends(get_stats_enricher),
) -> IngestionPipeline:
    return IngestionPipeline(enricher)


@dataclass
class ReportingWindow:
    """Inclusive committed_at range shared by the reporting endpoints."""

    start: datetime
    end: datetime | None = None


def get_reporting_window(
    from_: datetime | None = Query(
        None, alias="from", description="Window start (ISO 8601); defaults to start of month"
    ),
    to: datetime | None = Query(None, description="Window end (ISO 8601); open-ended if omitted"),
) -> ReportingWindow:
    """Resolve the reporting window from query parameters.

    Raises:
        QueryValidationError: If `from` is later than `to`
    """
    start = to_utc(from_) if from_ is not None else start_of_month_utc()
    end = to_utc(to) if to is not None else None

    if end is not None and start > end:
        raise QueryValidationError(
            [
                {
                    "type": "value_error",
                    "loc": ["query", "from"],
                    "msg": "'from' must not be later than 'to'",
                    "input": start.isoformat(),
                }
            ]
        )
    return ReportingWindow(start=start, end=end)


Verifier = Annotated[SignatureVerifier, Depends(get_signature_verifier)]
Pipeline = Annotated[IngestionPipeline, Depends(get_ingestion_pipeline)]
Window = Annotated[ReportingWindow, Depends(get_reporting_window)]
