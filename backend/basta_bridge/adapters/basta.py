"""BASTA webhook adapter.

BASTA posts webhooks without a Content-Type header, so the body is read raw
and parsed here instead of relying on the framework's JSON handling. The
envelope layout changed across webhook revisions; extraction tries every
known name for the discriminator and the payload.
"""

import json
from typing import Any

from basta_bridge.domain.models import InboundEvent
from basta_bridge.utils.fields import first_string

RAW_BODY_FIELD = "_raw"
ACTION_TYPE_FIELDS = ["actionType", "type", "eventType", "action", "event"]
PAYLOAD_FIELDS = ["data", "payload"]


def parse_body(raw: bytes) -> dict[str, Any]:
    """Decode a webhook body; anything that is not a JSON object is kept under `_raw`."""

    if not raw:
        return {}
    text = raw.decode("utf-8", errors="replace")
    try:
        body = json.loads(text)
    except ValueError:
        return {RAW_BODY_FIELD: text}
    if not isinstance(body, dict):
        return {RAW_BODY_FIELD: text}
    return body


class BastaWebhookAdapter:
    def extract(self, body: dict[str, Any]) -> InboundEvent:
        action_type = first_string(body, ACTION_TYPE_FIELDS)
        data = body
        for field in PAYLOAD_FIELDS:
            candidate = body.get(field)
            if isinstance(candidate, dict):
                data = candidate
                break
        return InboundEvent(action_type=action_type, data=data)
