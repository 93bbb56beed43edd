"""HTML rendering of the daily report."""

from datetime import datetime
from typing import Optional

from ..models.metrics import CampaignMetrics, TrafficMetrics
from ..models.report import ReportDocument
from ..utils.dates import as_utc, human_date, iso_date, utc_now
from ..utils.validation import safe_int, safe_rate

BLUE = "#3b82f6"
GREEN = "#10b981"
RED = "#ef4444"

SECTION_STYLE = (
    "color:#1f2937;border-bottom:2px solid #3b82f6;"
    "padding-bottom:8px;margin:24px 0 12px"
)


def _tile(label: str, value: str, accent: str) -> str:
    return f"""
      <div style="background:#f9fafb;padding:16px;border-radius:6px;border-left:4px solid {accent}">
        <div style="font-size:12px;color:#6b7280">{label}</div>
        <div style="font-size:24px;font-weight:700;color:#111827">{value}</div>
      </div>"""


def _section(title: str, columns: int, tiles: list[str]) -> str:
    return f"""
    <h2 style="{SECTION_STYLE}">{title}</h2>
    <div style="display:grid;grid-template-columns:repeat({columns},1fr);gap:16px">{''.join(tiles)}
    </div>"""


def compose_report(
    campaign: CampaignMetrics,
    traffic: TrafficMetrics,
    today: Optional[datetime] = None
) -> ReportDocument:
    """Render both metric records into the report document."""
    today = as_utc(today or utc_now())
    human = human_date(today)

    email_block = _section("📧 Email Marketing", 2, [
        _tile("Campaigns", f"{safe_int(campaign.campaign_count):,}", BLUE),
        _tile("Emails Sent", f"{safe_int(campaign.emails_sent):,}", BLUE),
        _tile("Open Rate", f"{safe_rate(campaign.open_rate)}%", GREEN),
        _tile("Click Rate", f"{safe_rate(campaign.click_rate)}%", GREEN),
    ])

    web_block = _section("🌐 Website Analytics", 3, [
        _tile("Page Views", f"{safe_int(traffic.page_views):,}", RED),
        _tile("Sessions", f"{safe_int(traffic.sessions):,}", RED),
        _tile("New Users", f"{safe_int(traffic.new_users):,}", RED),
    ])

    html = f"""
  <div data-report-date="{iso_date(today)}" style="font-family:Arial,Helvetica,sans-serif;max-width:800px;margin:20px auto;background:#fff;padding:30px;border-radius:8px;box-shadow:0 2px 10px rgba(0,0,0,0.08)">
    <h1 style="text-align:center;color:#111;margin-bottom:8px">📊 Daily Analytics Report</h1>
    <div style="text-align:center;color:#555;margin-bottom:24px">{human}</div>
{email_block}
{web_block}
  </div>
"""

    return ReportDocument(html=html, iso_date=iso_date(today), human_date=human)
