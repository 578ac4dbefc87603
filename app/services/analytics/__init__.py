"""Analytics overview: aggregation over stored commits."""

from app.services.analytics.engine import HEATMAP_DAYS, summarize
from app.services.analytics.types import OverviewSummary

__all__ = [
    "HEATMAP_DAYS",
    "OverviewSummary",
    "summarize",
]
