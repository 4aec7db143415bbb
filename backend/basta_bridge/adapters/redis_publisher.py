"""Redis pub/sub publisher."""

import asyncio
import logging

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from basta_bridge.adapters.interfaces import EventPublisher
from basta_bridge.errors import PublishError

logger = logging.getLogger(__name__)


class RedisEventPublisher(EventPublisher):
    def __init__(
        self,
        redis_url: str,
        socket_timeout: float = 5.0,
        health_timeout: float = 1.0,
        client: Redis | None = None,
    ) -> None:
        self.redis_url = redis_url
        self.health_timeout = health_timeout
        self._client = client or Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        self._started = False
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        """Ping the server; connection errors propagate to the caller."""

        await self._client.ping()
        self._started = True
        self._connected = True
        logger.info("Redis connected: %s", self.redis_url)

    async def check(self) -> bool:
        # Not started means startup has not connected yet; never ping early.
        if not self._started:
            return False
        try:
            await asyncio.wait_for(self._client.ping(), timeout=self.health_timeout)
        except (RedisError, OSError, asyncio.TimeoutError) as exc:
            if self._connected:
                logger.error("Redis error: %s", exc)
            self._connected = False
        else:
            self._connected = True
        return self._connected

    async def publish(self, channel: str, message: str) -> int:
        try:
            receivers = await self._client.publish(channel, message)
        except (RedisConnectionError, RedisTimeoutError) as exc:
            self._connected = False
            logger.error("Redis error: %s", exc)
            raise PublishError(channel, str(exc)) from exc
        except RedisError as exc:
            raise PublishError(channel, str(exc)) from exc
        self._connected = True
        return receivers

    async def close(self) -> None:
        self._started = False
        self._connected = False
        await self._client.aclose()
