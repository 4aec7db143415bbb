"""Webhook handling: extract, translate, publish, acknowledge."""

import json
import logging
from typing import Any

from basta_bridge.adapters.basta import BastaWebhookAdapter
from basta_bridge.adapters.interfaces import EventPublisher
from basta_bridge.domain.models import WebhookAck
from basta_bridge.errors import PublishError
from basta_bridge.services.translation import UNMAPPED, translate

logger = logging.getLogger(__name__)


async def handle_webhook(body: dict[str, Any], publisher: EventPublisher, channel: str) -> WebhookAck:
    """Translate one webhook and publish it; publish failures never reach the caller."""

    logger.info("[WEBHOOK RAW] %s", json.dumps(body, default=str))
    inbound = BastaWebhookAdapter().extract(body)
    logger.info("[WEBHOOK] %s", inbound.action_type)

    event = translate(inbound.action_type, inbound.data)
    if event is UNMAPPED:
        logger.info("Unhandled event type: %s", inbound.action_type)
        return WebhookAck(handled=False)
    if event is None:
        logger.info("Mapped to null (skipped)")
        return WebhookAck(handled=False)

    try:
        await publisher.publish(channel, event.to_json())
        logger.info("Published %s to %s", event.type.value, channel)
    except PublishError as exc:
        logger.error("Redis publish failed: %s", exc.reason)

    return WebhookAck(handled=True, type=event.type)
