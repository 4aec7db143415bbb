"""Bridge error types."""


class BridgeError(Exception):
    """Base error for the webhook bridge."""


class PublishError(BridgeError):
    """Raised when a normalized event could not be written to the message bus."""

    def __init__(self, channel: str, reason: str) -> None:
        super().__init__(f"publish to {channel} failed: {reason}")
        self.channel = channel
        self.reason = reason
