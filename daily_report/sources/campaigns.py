"""Email campaign metrics from Mailchimp."""

import asyncio
from typing import Any, List, Optional

import httpx
import structlog

from ..config.settings import Settings
from ..models.metrics import CampaignMetrics, CampaignTotals
from ..utils.api_client import MailchimpClient
from ..utils.validation import format_rate

logger = structlog.get_logger(__name__)


async def fetch_campaign_metrics(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> CampaignMetrics:
    """
    Summarize recent sent campaigns.

    Lists up to ``campaign_list_limit`` sent campaigns and sums the reports of
    the first ``campaign_detail_limit`` of them, one request at a time. A
    campaign whose report cannot be fetched contributes nothing and is only
    logged. Missing configuration or a failed listing yields a zeroed record
    with ``error`` set.

    Args:
        settings: Run configuration
        transport: Optional httpx transport override

    Returns:
        CampaignMetrics, never raises
    """
    logger.info("Fetching campaign metrics")

    try:
        async with MailchimpClient(settings, transport=transport) as client:
            campaigns = await client.list_campaigns(
                limit=settings.campaign_list_limit, status="sent")
            totals = await _collect_reports(
                client,
                campaigns[:settings.campaign_detail_limit],
                settings.campaign_request_delay_ms / 1000
            )
        metrics = CampaignMetrics(
            campaign_count=len(campaigns),
            emails_sent=totals.sent,
            open_rate=format_rate(totals.opens, totals.sent),
            click_rate=format_rate(totals.clicks, totals.sent)
        )
    except Exception as e:
        logger.error("Failed to fetch campaign metrics", error=str(e))
        return CampaignMetrics.failed(str(e) or e.__class__.__name__)

    logger.info(
        "Campaign metrics fetched",
        campaign_count=metrics.campaign_count,
        emails_sent=metrics.emails_sent,
        failed_reports=len(totals.failures)
    )
    return metrics


async def _collect_reports(
    client: MailchimpClient,
    campaigns: List[Any],
    delay: float
) -> CampaignTotals:
    """Fold campaign reports into running totals, pausing between requests."""
    totals = CampaignTotals()

    for index, campaign in enumerate(campaigns):
        if index and delay > 0:
            await asyncio.sleep(delay)
        totals = await _add_campaign_report(client, totals, campaign)

    return totals


async def _add_campaign_report(
    client: MailchimpClient,
    totals: CampaignTotals,
    campaign: Any
) -> CampaignTotals:
    campaign_id = ""

    try:
        if not isinstance(campaign, dict):
            raise ValueError(f"Malformed campaign entry: {campaign!r}")
        campaign_id = str(campaign.get("id") or "").strip()
        if not campaign_id:
            raise ValueError("Campaign has no id")

        report = await client.get_campaign_report(campaign_id)
        return totals.add_report(report)
    except Exception as e:
        status_code = None
        if isinstance(e, httpx.HTTPStatusError):
            status_code = e.response.status_code
        logger.warning(
            "Campaign report fetch failed",
            campaign_id=campaign_id,
            status_code=status_code,
            error=str(e)
        )
        return totals.add_failure(campaign_id)
