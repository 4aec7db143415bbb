"""FastAPI app entrypoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from basta_bridge.adapters.interfaces import EventPublisher
from basta_bridge.adapters.redis_publisher import RedisEventPublisher
from basta_bridge.api.routes import router
from basta_bridge.config import get_settings
from basta_bridge.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    publisher: EventPublisher = app.state.publisher
    settings = get_settings()
    # A bus that cannot be reached at startup aborts the process.
    await publisher.connect()
    logger.info("POST /webhook  - receives BASTA events")
    logger.info("GET  /health   - health check")
    logger.info("Publishing to: %s", settings.publish_channel)
    try:
        yield
    finally:
        await publisher.close()


def create_app(publisher: EventPublisher | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    if publisher is None:
        publisher = RedisEventPublisher(
            settings.redis_url,
            socket_timeout=settings.redis_socket_timeout_seconds,
            health_timeout=settings.redis_health_timeout_seconds,
        )

    app = FastAPI(title="BASTA Webhook Bridge", lifespan=lifespan)
    app.state.publisher = publisher
    app.include_router(router)
    return app
