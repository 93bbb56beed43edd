"""Configuration settings for the daily analytics report."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Mailchimp
    mailchimp_api_key: Optional[str] = Field(
        default=None,
        description="Mailchimp API key"
    )
    mailchimp_server: Optional[str] = Field(
        default=None,
        description="Mailchimp server prefix, e.g. us21"
    )
    campaign_list_limit: int = Field(
        default=10,
        description="Number of sent campaigns to list"
    )
    campaign_detail_limit: int = Field(
        default=5,
        description="Number of listed campaigns to fetch reports for"
    )
    campaign_request_delay_ms: int = Field(
        default=200,
        description="Pause between successive campaign report requests in milliseconds"
    )

    # PostHog
    posthog_api_key: Optional[str] = Field(
        default=None,
        description="PostHog personal API key"
    )
    posthog_project_id: Optional[str] = Field(
        default=None,
        description="PostHog project ID"
    )
    posthog_host: str = Field(
        default="https://app.posthog.com",
        description="PostHog API host"
    )
    new_user_ratio: float = Field(
        default=0.3,
        description="Share of sessions reported as new users (placeholder)"
    )

    # Email delivery
    gmail_user: Optional[str] = Field(
        default=None,
        description="Sending account address"
    )
    gmail_password: Optional[str] = Field(
        default=None,
        description="Sending account app password"
    )
    report_recipient: Optional[str] = Field(
        default=None,
        description="Report recipient, defaults to the sending account"
    )
    smtp_host: str = Field(
        default="smtp.gmail.com",
        description="SMTP host"
    )
    smtp_port: int = Field(
        default=465,
        description="SMTP SSL port"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    # HTTP Client Configuration
    api_timeout: int = Field(
        default=10000,
        description="API request timeout in milliseconds"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


def load_settings() -> Settings:
    """Build the settings for one run from the environment."""
    return Settings()
