"""Email the digest to subscribers through SendGrid."""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from select_digest.select_digest import DigestEntry

logger = logging.getLogger(__name__)


@dataclass
class SendResult:
    email: str
    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


def format_digest_html(entries: list[DigestEntry], month: str, year: str) -> str:
    items = "\n".join(
        f'<li><a href="{html.escape(entry.link, quote=True)}">{html.escape(entry.title)}</a>'
        f"<br><small>{html.escape(entry.date)}</small>"
        f"<p>{html.escape(entry.excerpt)}</p></li>"
        for entry in entries
    )
    return (
        f"<h1>Your {html.escape(month)} {html.escape(year)} News Roundup</h1>\n"
        f"<ol>\n{items}\n</ol>"
    )


def send_digest(
    entries: list[DigestEntry],
    recipients: list[str],
    sender: str,
    subject: str,
    api_key: str,
    month: str,
    year: str,
) -> list[SendResult]:
    """Send one message per recipient; a failed recipient does not stop the others."""
    client = SendGridAPIClient(api_key)
    html_content = format_digest_html(entries, month, year)

    results = []
    for recipient in recipients:
        message = Mail(
            from_email=sender,
            to_emails=recipient,
            subject=subject,
            html_content=html_content,
        )
        try:
            response = client.send(message)
        except Exception as e:
            logger.error("Failed to send digest to %s: %s", recipient, e)
            results.append(SendResult(email=recipient, success=False, error=str(e)))
            continue

        logger.info("Sent digest to %s (status %s)", recipient, response.status_code)
        results.append(SendResult(email=recipient, success=True, status_code=response.status_code))

    sent = sum(1 for result in results if result.success)
    logger.info("Digest sent to %d recipients (%d failed)", sent, len(results) - sent)
    return results
