"""
Webhook Dispatch Service
Delivers event notifications to registered webhook targets.

Delivery happens after the response is sent (FastAPI background tasks).
Outcomes are logged only: callers never observe delivery failures.
"""

import logging
from typing import Optional

import httpx
from fastapi import BackgroundTasks
from fastapi.encoders import jsonable_encoder

from ...config import WEBHOOK_TIMEOUT_SECONDS, WEBHOOK_USER_AGENT
from ...models import Webhook

logger = logging.getLogger(__name__)


async def deliver_webhook(
    target_url: str,
    payload: dict,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bool:
    """
    POST a JSON payload to a single webhook target.

    Returns:
        True if the target answered with a 2xx status
    """
    event = payload.get("event", "unknown")
    try:
        async with httpx.AsyncClient(timeout=WEBHOOK_TIMEOUT_SECONDS, transport=transport) as client:
            response = await client.post(
                target_url,
                json=payload,
                headers={"User-Agent": WEBHOOK_USER_AGENT, "X-Webhook-Event": event},
            )

        if response.is_success:
            logger.info(f"✅ Webhook {event} delivered to {target_url} ({response.status_code})")
            return True

        logger.warning(f"⚠️ Webhook {event} rejected by {target_url}: HTTP {response.status_code}")
        return False
    except httpx.HTTPError as e:
        logger.error(f"❌ Failed to deliver webhook {event} to {target_url}: {e}")
        return False


class WebhookService:
    """Schedules webhook deliveries for a request"""

    def __init__(self, background_tasks: BackgroundTasks):
        self.background_tasks = background_tasks

    def trigger_webhooks(self, webhooks: list[Webhook], payload: dict) -> int:
        """Queue one delivery per active webhook, returns the number queued"""
        body = jsonable_encoder(payload)
        targets = [w for w in webhooks if w.is_active]

        if not targets:
            logger.debug(f"No active webhooks for event {body.get('event')}")
            return 0

        for webhook in targets:
            self.background_tasks.add_task(deliver_webhook, webhook.target_url, body)

        logger.info(f"📡 Queued {len(targets)} webhook(s) for event {body.get('event')}")
        return len(targets)
