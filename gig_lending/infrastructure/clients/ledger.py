"""Ledger webhook client with exponential backoff retry logic"""

import logging
import httpx
import asyncio
from typing import Dict, Any
from gig_lending.config import settings
from gig_lending.domain.exceptions import LedgerWebhookError
from gig_lending.infrastructure.observability.metrics import webhook_latency_histogram, webhook_failure_counter


class LedgerClient:
    """Client for publishing committed protocol events to the ledger service"""

    def __init__(
        self,
        webhook_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.webhook_url = webhook_url or settings.ledger_webhook_url
        self.timeout = settings.http_timeout_seconds
        self.max_retries = settings.webhook_max_retries
        self.backoff_base = settings.webhook_backoff_base
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    async def send_event(self, event: str, payload: Dict[str, Any]) -> None:
        """
        Send a protocol event (LOAN_ORIGINATED, LIQUIDITY_PROVIDED) to the ledger.

        Retry strategy:
        - Exponential backoff: 1s, 2s, 4s, 8s (base * 2^(attempt-1))
        - Retries on 5xx/4xx responses and network failures
        - Tracks latency histogram and failure counter

        Raises:
            LedgerWebhookError: After the final failed attempt
        """
        if not self.enabled:
            return

        body = {"event": event, **payload}
        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while attempt < self.max_retries:
                try:
                    with webhook_latency_histogram.time():
                        response = await client.post(self.webhook_url, json=body)
                        response.raise_for_status()
                        return  # Success

                except (httpx.HTTPStatusError, httpx.RequestError) as e:
                    attempt += 1
                    webhook_failure_counter.inc()

                    if attempt >= self.max_retries:
                        raise LedgerWebhookError(
                            f"Ledger webhook failed after {attempt} attempts: {e}"
                        ) from e

                    backoff = self.backoff_base * (2 ** (attempt - 1))
                    await asyncio.sleep(backoff)

    async def publish(self, event: str, payload: Dict[str, Any]) -> None:
        """Background-task entry point: deliver the event, log if delivery gives up"""
        try:
            await self.send_event(event, payload)
        except LedgerWebhookError as e:
            logging.error(str(e), extra={"step": "ledger_webhook", "event": event})
