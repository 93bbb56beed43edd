"""Shared fixtures."""

from typing import Callable

import pytest

from daily_report.config.settings import Settings

ENV_VARS = [
    "MAILCHIMP_API_KEY",
    "MAILCHIMP_SERVER",
    "POSTHOG_API_KEY",
    "POSTHOG_PROJECT_ID",
    "POSTHOG_HOST",
    "GMAIL_USER",
    "GMAIL_PASSWORD",
    "REPORT_RECIPIENT",
    "SMTP_HOST",
    "SMTP_PORT",
    "CAMPAIGN_LIST_LIMIT",
    "CAMPAIGN_DETAIL_LIMIT",
    "CAMPAIGN_REQUEST_DELAY_MS",
    "NEW_USER_RATIO",
    "LOG_LEVEL",
    "API_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the host environment and any .env file out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for fully configured settings with optional overrides."""
    def _make(**overrides) -> Settings:
        values = {
            "mailchimp_api_key": "mc-key",
            "mailchimp_server": "us1",
            "posthog_api_key": "ph-key",
            "posthog_project_id": "42",
            "gmail_user": "reports@example.com",
            "gmail_password": "app-password",
            "campaign_request_delay_ms": 0,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make
