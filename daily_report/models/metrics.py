"""Metric records produced by the source aggregators."""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field


class CampaignMetrics(BaseModel):
    """Email campaign summary across recent sent campaigns."""

    campaign_count: int = Field(0, ge=0, description="Campaigns listed")
    emails_sent: int = Field(0, ge=0, description="Emails sent across reported campaigns")
    open_rate: str = Field("0.0", description="Unique open rate percentage, one decimal")
    click_rate: str = Field("0.0", description="Unique click rate percentage, one decimal")
    error: Optional[str] = Field(
        None, description="Set when the whole aggregation failed")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "campaign_count": 3,
                "emails_sent": 300,
                "open_rate": "25.0",
                "click_rate": "5.0"
            }
        }

    @classmethod
    def failed(cls, message: str) -> "CampaignMetrics":
        """Zeroed record carrying the failure description."""
        return cls(error=message)


class TrafficMetrics(BaseModel):
    """Website traffic for the prior UTC day."""

    page_views: int = Field(0, ge=0, description="Page views")
    sessions: int = Field(0, ge=0, description="Session starts")
    new_users: int = Field(
        0, ge=0, description="Estimated new users (placeholder share of sessions)")
    error: Optional[str] = Field(
        None, description="Set when the whole aggregation failed")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "page_views": 1520,
                "sessions": 410,
                "new_users": 123
            }
        }

    @classmethod
    def failed(cls, message: str) -> "TrafficMetrics":
        """Zeroed record carrying the failure description."""
        return cls(error=message)


def _count(value: Any) -> int:
    # Negative counters add nothing.
    return max(int(value or 0), 0)


class CampaignTotals(BaseModel):
    """Running sums folded over campaign reports."""

    sent: int = 0
    opens: int = 0
    clicks: int = 0
    failures: Tuple[str, ...] = ()

    class Config:
        frozen = True

    def add_report(self, report: Dict[str, Any]) -> "CampaignTotals":
        """Totals with one campaign report's counters added."""
        opens = report.get("opens") or {}
        clicks = report.get("clicks") or {}
        return self.model_copy(update={
            "sent": self.sent + _count(report.get("emails_sent")),
            "opens": self.opens + _count(opens.get("unique_opens")),
            "clicks": self.clicks + _count(clicks.get("unique_clicks")),
        })

    def add_failure(self, campaign_id: str) -> "CampaignTotals":
        """Totals with a failed campaign recorded and nothing added."""
        return self.model_copy(update={"failures": self.failures + (campaign_id,)})
