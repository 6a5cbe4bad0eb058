"""WhatsApp notification dispatch (Fonnte gateway).

``send`` never raises: delivery problems are logged and reported through
:class:`NotificationResult`. Callers fire the message after their state change
is committed and ignore the outcome.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol

import httpx

from gatequeue.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationResult:
    delivered: bool
    reason: str | None = None


class Notifier(Protocol):
    async def send(self, destination: str, text: str) -> NotificationResult: ...


def to_whatsapp_number(phone: str, country_code: str | None = None) -> str:
    """Local mobile number → international digits (``0812...`` → ``62812...``)."""
    code = country_code or settings.wa_country_code
    digits = re.sub(r"\D", "", phone or "")
    if digits.startswith("0"):
        digits = code + digits[1:]
    return digits


class WhatsAppNotifier:
    def __init__(
        self,
        token: str | None = None,
        url: str | None = None,
        country_code: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._token = token if token is not None else settings.fonnte_token
        self._url = url or settings.fonnte_url
        self._country_code = country_code or settings.wa_country_code
        self._timeout = timeout or settings.notification_timeout
        self._transport = transport

    async def send(self, destination: str, text: str) -> NotificationResult:
        if not destination or len(destination) < 5:
            return NotificationResult(False, "invalid target")

        if not self._token:
            # Development: nothing is sent, the message is only logged
            logger.info("DEV MODE - WhatsApp to %s:\n%s", destination, text)
            return NotificationResult(False, "gateway not configured")

        payload = {
            "target": destination,
            "message": text,
            "countryCode": self._country_code,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self._url, json=payload, headers={"Authorization": self._token}
                )
                response.raise_for_status()
                result = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("WhatsApp send to %s failed: %s", destination, exc)
            return NotificationResult(False, str(exc))

        if not result.get("status"):
            reason = result.get("reason") or "rejected by gateway"
            logger.warning("WhatsApp gateway warning for %s: %s", destination, reason)
            return NotificationResult(False, reason)

        logger.info("WhatsApp message sent to %s", destination)
        return NotificationResult(True)


def get_notifier() -> Notifier:
    """FastAPI dependency; overridden in tests."""
    return WhatsAppNotifier()
