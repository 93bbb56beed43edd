"""Rendered report document."""

from pydantic import BaseModel, Field


class ReportDocument(BaseModel):
    """HTML report for a single run."""

    html: str = Field(..., description="Rendered HTML body")
    iso_date: str = Field(..., description="Report date, YYYY-MM-DD")
    human_date: str = Field(..., description="Report date for display")

    class Config:
        frozen = True

    @property
    def subject(self) -> str:
        """Email subject line."""
        return f"📊 Daily Analytics Report — {self.human_date}"
