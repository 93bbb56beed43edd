"""Run orchestration: fetch both sources, render, send."""

import asyncio
from typing import Optional

import httpx
import structlog

from .config.settings import Settings
from .models.report import ReportDocument
from .report.composer import compose_report
from .report.dispatcher import dispatch_report
from .sources.campaigns import fetch_campaign_metrics
from .sources.traffic import fetch_traffic_metrics

logger = structlog.get_logger(__name__)


async def build_report(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> ReportDocument:
    """Fetch campaign and traffic metrics concurrently and render them."""
    campaign, traffic = await asyncio.gather(
        fetch_campaign_metrics(settings, transport=transport),
        fetch_traffic_metrics(settings, transport=transport)
    )

    if campaign.error:
        logger.warning("Campaign metrics degraded", error=campaign.error)
    if traffic.error:
        logger.warning("Traffic metrics degraded", error=traffic.error)

    return compose_report(campaign, traffic)


async def run(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> ReportDocument:
    """Build the report and email it. Delivery failures propagate."""
    logger.info("Starting daily report")
    document = await build_report(settings, transport=transport)
    await dispatch_report(document, settings)
    logger.info("Daily report sent", report_date=document.iso_date)
    return document
