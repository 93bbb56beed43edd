"""Test helpers for mocked HTTP sources."""

import json
from typing import Callable, Dict, List

import httpx


class RecordingHandler:
    """httpx.MockTransport handler that records requests."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def campaign_report(sent: int, opens: int, clicks: int) -> Dict:
    return {
        "emails_sent": sent,
        "opens": {"unique_opens": opens},
        "clicks": {"unique_clicks": clicks},
    }


def trend(*values) -> Dict:
    return {"result": [{"data": list(values)}]}


def event_of(request: httpx.Request) -> str:
    return json.loads(request.content)["events"][0]["id"]
