"""Event handler domain types: handler configuration, retry settings and errors."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RetryConfig:
    """Retry settings for failed event handling; delays are duration strings such as "1s"."""

    max_retries: int = 0
    initial_delay: str = ""
    backoff_factor: float = 0.0
    max_delay: str = ""

    def is_valid(self) -> bool:
        """Return True when retries are non-negative, a delay is set and backoff is positive."""
        return self.max_retries >= 0 and self.initial_delay != "" and self.backoff_factor > 0


@dataclass
class EventHandlerConfig:
    """Configuration for a single event handler."""

    handler_id: str = ""
    event_types: list[str] = field(default_factory=list)
    enabled: bool = False
    retry_config: RetryConfig = field(default_factory=RetryConfig)
    timeout: str = ""
    batch_size: int = 0
    concurrency: int = 0
    metadata: dict[str, str] = field(default_factory=dict)

    def is_valid(self) -> bool:
        """Return True when the handler has an id and at least one event type."""
        return self.handler_id != "" and bool(self.event_types)

    def is_enabled(self) -> bool:
        """Return whether the handler is enabled."""
        return self.enabled

    def handles_event_type(self, event_type: str) -> bool:
        """Return True when ``event_type`` is one of the configured event types."""
        return event_type in (self.event_types or ())


class EventHandlerError(Exception):
    """An event handler failure carrying a machine-readable code."""

    def __init__(self, code: str, message: str, handler: str = "", event: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.handler = handler
        self.event = event

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"EventHandlerError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventHandlerError):
            return NotImplemented
        return (self.code, self.message, self.handler, self.event) == (
            other.code,
            other.message,
            other.handler,
            other.event,
        )

    def __hash__(self) -> int:
        return hash((self.code, self.message, self.handler, self.event))


ERR_HANDLER_NOT_FOUND = EventHandlerError("HANDLER_NOT_FOUND", "Event handler not found")
ERR_HANDLING_FAILED = EventHandlerError("HANDLING_FAILED", "Event handling failed")
ERR_INVALID_EVENT_TYPE = EventHandlerError("INVALID_EVENT_TYPE", "Invalid event type for handler")
ERR_HANDLER_DISABLED = EventHandlerError("HANDLER_DISABLED", "Event handler is disabled")
ERR_HANDLER_TIMEOUT = EventHandlerError("HANDLER_TIMEOUT", "Event handler timed out")


def default_event_handler_config() -> EventHandlerConfig:
    """Return the default handler configuration."""
    return EventHandlerConfig(
        enabled=True,
        batch_size=1,
        concurrency=1,
        timeout="30s",
        retry_config=RetryConfig(
            max_retries=3,
            initial_delay="1s",
            backoff_factor=2.0,
            max_delay="5m",
        ),
    )