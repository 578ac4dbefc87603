# Services package

from app.services.analytics import summarize
from app.services.commit_classifier import classify
from app.services.ingestion import IngestionPipeline, IngestionResult
from app.services.stats_enricher import CommitEnrichment, StatsEnricher

__all__ = [
    # Ingestion
    "IngestionPipeline",
    "IngestionResult",
    "StatsEnricher",
    "CommitEnrichment",
    "classify",
    # Reporting
    "summarize",
]
