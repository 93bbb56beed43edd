"""Email delivery of the rendered report."""

import asyncio
import smtplib
from email.mime.text import MIMEText
from email.utils import formatdate

import structlog

from ..config.settings import Settings
from ..models.report import ReportDocument
from ..utils.validation import require_config

logger = structlog.get_logger(__name__)


class DeliveryError(Exception):
    """The report could not be handed to the mail server."""
    pass


def _build_message(document: ReportDocument, sender: str, recipient: str) -> MIMEText:
    message = MIMEText(document.html, "html", "utf-8")
    message["Subject"] = document.subject
    message["From"] = sender
    message["To"] = recipient
    message["Date"] = formatdate(localtime=True)
    return message


def _send(host: str, port: int, user: str, password: str, message: MIMEText) -> None:
    try:
        with smtplib.SMTP_SSL(host, port) as smtp:
            smtp.login(user, password)
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError) as exc:
        raise DeliveryError(f"Failed to send email: {exc}") from exc


async def dispatch_report(document: ReportDocument, settings: Settings) -> None:
    """
    Email the report to the configured recipient.

    Raises:
        MissingConfigError: delivery credentials are absent
        DeliveryError: the SMTP exchange failed
    """
    user = require_config(settings, "gmail_user")
    password = require_config(settings, "gmail_password")
    recipient = (settings.report_recipient or "").strip() or user

    message = _build_message(document, sender=user, recipient=recipient)

    logger.info(
        "Sending report",
        recipient=recipient,
        subject=document.subject,
        smtp_host=settings.smtp_host
    )
    await asyncio.to_thread(
        _send, settings.smtp_host, settings.smtp_port, user, password, message)
    logger.info("Report sent", recipient=recipient)
