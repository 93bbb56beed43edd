"""HTTP API client utilities."""

from typing import Any, Dict, List, Optional

import httpx
import structlog
from httpx import AsyncClient, Response

from ..config.settings import Settings
from .validation import require_config

logger = structlog.get_logger(__name__)

USER_AGENT = "Daily-Analytics-Report/0.1.0"


class BaseAPIClient:
    """Async HTTP client shared by the metric sources."""

    def __init__(
        self,
        base_url: str,
        headers: Dict[str, str],
        timeout: float,
        auth: Optional[httpx.Auth] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.headers = headers
        self.timeout = timeout
        self.auth = auth
        self.transport = transport
        self._client: Optional[AsyncClient] = None

    async def __aenter__(self):
        """Async context manager entry."""
        self._client = AsyncClient(
            timeout=self.timeout,
            auth=self.auth,
            transport=self.transport,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
                **self.headers
            }
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()

    async def _make_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None
    ) -> Response:
        """Make an HTTP request and raise on a non-2xx status."""
        if not self._client:
            raise RuntimeError(
                "Client not initialized. Use async context manager.")

        url = f"{self.base_url}{path}"

        logger.info(
            "Making API request",
            method=method,
            url=url
        )

        if method.upper() == "GET":
            response = await self._client.get(url, params=params)
        elif method.upper() == "POST":
            response = await self._client.post(url, params=params, json=data)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        logger.info(
            "API response received",
            method=method,
            url=url,
            status_code=response.status_code,
            response_size=len(response.content)
        )

        if response.is_error:
            logger.error(
                "API request failed",
                method=method,
                url=url,
                status_code=response.status_code,
                response_text=response.text
            )
        response.raise_for_status()
        return response


class MailchimpClient(BaseAPIClient):
    """Mailchimp Marketing API (v3.0) client."""

    def __init__(self, settings: Settings,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        server = require_config(settings, "mailchimp_server")
        api_key = require_config(settings, "mailchimp_api_key")
        super().__init__(
            base_url=f"https://{server}.api.mailchimp.com/3.0",
            headers={},
            timeout=settings.api_timeout / 1000,  # Convert ms to seconds
            auth=httpx.BasicAuth("anystring", api_key),
            transport=transport
        )

    async def list_campaigns(self, limit: int = 10, status: str = "sent") -> List[Dict[str, Any]]:
        """List the most recent campaigns with the given status."""
        response = await self._make_request(
            "GET", "/campaigns", params={"count": limit, "status": status})
        campaigns = response.json().get("campaigns")
        return campaigns if isinstance(campaigns, list) else []

    async def get_campaign_report(self, campaign_id: str) -> Dict[str, Any]:
        """Get the performance report for one campaign."""
        response = await self._make_request("GET", f"/reports/{campaign_id}")
        return response.json()


class PostHogClient(BaseAPIClient):
    """PostHog insights API client."""

    def __init__(self, settings: Settings,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        api_key = require_config(settings, "posthog_api_key")
        self.project_id = require_config(settings, "posthog_project_id")
        host = (settings.posthog_host or "").strip() or "https://app.posthog.com"
        super().__init__(
            base_url=host,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json"
            },
            timeout=settings.api_timeout / 1000,
            transport=transport
        )

    async def query_trend(self, event: str, date_from: str, date_to: str) -> Dict[str, Any]:
        """Run a trends insight for a single event over a date range."""
        payload = {
            "events": [{"id": event, "type": "events"}],
            "date_from": date_from,
            "date_to": date_to,
            "insight": "TRENDS"
        }
        response = await self._make_request(
            "POST", f"/api/projects/{self.project_id}/insights", data=payload)
        return response.json()


def sum_trend_series(trend: Dict[str, Any]) -> int:
    """Sum the first series of a trends result, treating nulls as 0."""
    result = trend.get("result") or []
    if not result:
        return 0
    series = (result[0] or {}).get("data") or []
    return int(sum(value or 0 for value in series))
