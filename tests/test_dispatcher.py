"""Tests for report delivery."""

import smtplib

import pytest

from daily_report.models.report import ReportDocument
from daily_report.report.dispatcher import DeliveryError, dispatch_report
from daily_report.utils.validation import MissingConfigError

DOCUMENT = ReportDocument(
    html="<div>report</div>", iso_date="2026-10-19", human_date="October 19, 2026")


class FakeSMTP:
    """Stand-in for smtplib.SMTP_SSL that records the exchange."""

    instances = []
    fail_login = False

    def __init__(self, host, port):
        self.host = host
        self.port = port
        self.credentials = None
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def login(self, user, password):
        if self.fail_login:
            raise smtplib.SMTPAuthenticationError(535, b"Bad credentials")
        self.credentials = (user, password)

    def send_message(self, message):
        self.messages.append(message)


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.fail_login = False
    monkeypatch.setattr(smtplib, "SMTP_SSL", FakeSMTP)
    return FakeSMTP


class TestDispatchReport:
    """Test sending the report."""

    @pytest.mark.asyncio
    async def test_sends_to_self_by_default(self, make_settings, fake_smtp):
        """Test the account sends the report to itself."""
        await dispatch_report(DOCUMENT, make_settings())

        smtp = fake_smtp.instances[0]
        assert (smtp.host, smtp.port) == ("smtp.gmail.com", 465)
        assert smtp.credentials == ("reports@example.com", "app-password")
        message = smtp.messages[0]
        assert message["From"] == "reports@example.com"
        assert message["To"] == "reports@example.com"
        assert message["Subject"] == "📊 Daily Analytics Report — October 19, 2026"
        assert message.get_content_type() == "text/html"
        assert "<div>report</div>" in message.get_payload(decode=True).decode("utf-8")

    @pytest.mark.asyncio
    async def test_recipient_and_host_override(self, make_settings, fake_smtp):
        """Test the optional recipient and SMTP settings."""
        settings = make_settings(
            report_recipient="team@example.com",
            smtp_host="smtp.example.com",
            smtp_port=2465)

        await dispatch_report(DOCUMENT, settings)

        smtp = fake_smtp.instances[0]
        assert (smtp.host, smtp.port) == ("smtp.example.com", 2465)
        assert smtp.messages[0]["To"] == "team@example.com"

    @pytest.mark.asyncio
    async def test_missing_credentials(self, make_settings, fake_smtp):
        """Test missing delivery config fails before connecting."""
        with pytest.raises(MissingConfigError) as exc_info:
            await dispatch_report(DOCUMENT, make_settings(gmail_password=" "))

        assert exc_info.value.name == "GMAIL_PASSWORD"
        assert fake_smtp.instances == []

    @pytest.mark.asyncio
    async def test_delivery_failure_propagates(self, make_settings, fake_smtp):
        """Test SMTP errors surface as DeliveryError."""
        fake_smtp.fail_login = True

        with pytest.raises(DeliveryError) as exc_info:
            await dispatch_report(DOCUMENT, make_settings())

        assert "Bad credentials" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, smtplib.SMTPAuthenticationError)
