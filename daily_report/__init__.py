"""Daily analytics report: Mailchimp campaigns and PostHog traffic by email."""

__version__ = "0.1.0"
