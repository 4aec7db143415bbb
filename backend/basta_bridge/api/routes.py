"""FastAPI routes."""

from fastapi import APIRouter, Depends, Request

from basta_bridge.adapters.basta import parse_body
from basta_bridge.adapters.interfaces import EventPublisher
from basta_bridge.config import Settings, get_settings
from basta_bridge.domain.models import HealthResponse, WebhookAck
from basta_bridge.services.webhooks import handle_webhook

router = APIRouter()


def get_publisher(request: Request) -> EventPublisher:
    return request.app.state.publisher


@router.post("/webhook", response_model=WebhookAck, response_model_exclude_none=True)
async def post_webhook(
    request: Request,
    publisher: EventPublisher = Depends(get_publisher),
    settings: Settings = Depends(get_settings),
):
    body = parse_body(await request.body())
    return await handle_webhook(body, publisher, settings.publish_channel)


@router.get("/health", response_model=HealthResponse)
async def health(publisher: EventPublisher = Depends(get_publisher)):
    connected = await publisher.check()
    return HealthResponse(redis="connected" if connected else "disconnected")
