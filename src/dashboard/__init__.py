"""Dashboard aggregation: summary statistics and ranking badges."""

from src.dashboard.ranking import Badge, Tier, classify, format_position
from src.dashboard.snapshot import DashboardSnapshot
from src.dashboard.stats import DashboardSummary, recent_articles, summarize

__all__ = [
    "Badge",
    "Tier",
    "classify",
    "format_position",
    "DashboardSnapshot",
    "DashboardSummary",
    "recent_articles",
    "summarize",
]
