"""Metric sources feeding the daily report."""

from .campaigns import fetch_campaign_metrics
from .traffic import fetch_traffic_metrics

__all__ = [
    "fetch_campaign_metrics",
    "fetch_traffic_metrics",
]
