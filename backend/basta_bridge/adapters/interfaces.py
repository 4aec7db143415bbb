"""Adapter interface contracts."""

from abc import ABC, abstractmethod


class EventPublisher(ABC):
    """Write serialized events to a pub/sub channel."""

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def connect(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def publish(self, channel: str, message: str) -> int:
        """Publish `message`; returns the subscriber count reported by the bus."""

        raise NotImplementedError

    @abstractmethod
    async def check(self) -> bool:
        """Probe the live connection and return the refreshed `is_connected`."""

        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        raise NotImplementedError
