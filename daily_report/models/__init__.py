"""Data models for the daily analytics report."""

from .metrics import CampaignMetrics, CampaignTotals, TrafficMetrics
from .report import ReportDocument

__all__ = [
    "CampaignMetrics",
    "CampaignTotals",
    "TrafficMetrics",
    "ReportDocument",
]
