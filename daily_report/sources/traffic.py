"""Website traffic metrics from PostHog."""

import asyncio
import math
from datetime import datetime
from typing import Optional

import httpx
import structlog

from ..config.settings import Settings
from ..models.metrics import TrafficMetrics
from ..utils.api_client import PostHogClient, sum_trend_series
from ..utils.dates import yesterday

logger = structlog.get_logger(__name__)

PAGEVIEW_EVENT = "$pageview"
SESSION_START_EVENT = "$session_start"


async def fetch_traffic_metrics(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    now: Optional[datetime] = None
) -> TrafficMetrics:
    """
    Sum page views and session starts for the previous UTC day.

    Both trend queries run concurrently. If either fails, the other result is
    discarded and a zeroed record with ``error`` is returned.
    """
    day = yesterday(now)
    logger.info("Fetching traffic metrics", date=day)

    try:
        async with PostHogClient(settings, transport=transport) as client:
            results = await asyncio.gather(
                client.query_trend(PAGEVIEW_EVENT, day, day),
                client.query_trend(SESSION_START_EVENT, day, day),
                return_exceptions=True
            )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        page_views, sessions = (sum_trend_series(trend) for trend in results)
        metrics = TrafficMetrics(
            page_views=page_views,
            sessions=sessions,
            new_users=math.floor(sessions * settings.new_user_ratio)
        )
    except Exception as e:
        logger.error("Failed to fetch traffic metrics", error=str(e))
        return TrafficMetrics.failed(str(e) or e.__class__.__name__)

    logger.info(
        "Traffic metrics fetched",
        date=day,
        page_views=metrics.page_views,
        sessions=metrics.sessions
    )
    return metrics
