"""Notification domain types: e-mail, push and SMS messages, history and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional


class NotificationType(str, Enum):
    """Channel a notification is delivered through."""

    EMAIL = "email"
    PUSH = "push"
    SMS = "sms"
    IN_APP = "in_app"


class NotificationStatus(str, Enum):
    """Delivery state of a notification."""

    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"
    READ = "read"


class Priority(str, Enum):
    """Urgency of a notification."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


@dataclass
class Attachment:
    """A file attached to an e-mail."""

    filename: str = ""
    content_type: str = ""
    content: bytes = b""
    size: int = 0


@dataclass
class EmailNotification:
    """An e-mail message, either plain text, HTML or both."""

    id: str = ""
    to: str = ""
    from_: str = ""
    subject: str = ""
    body: str = ""
    body_html: str = ""
    template: str = ""
    variables: dict[str, Any] = field(default_factory=dict)
    priority: Optional[Priority] = None
    scheduled_at: Optional[datetime] = None
    attachments: list[Attachment] = field(default_factory=list)

    def is_valid(self) -> bool:
        """Return True when recipient, subject and some body are present."""
        return bool(self.to) and bool(self.subject) and bool(self.body or self.body_html)

    def has_attachments(self) -> bool:
        """Return True when at least one attachment is present."""
        return bool(self.attachments)

    def is_scheduled(self) -> bool:
        """Return True when the message is scheduled for a time in the future."""
        if self.scheduled_at is None:
            return False
        return self.scheduled_at > datetime.now(self.scheduled_at.tzinfo)


@dataclass
class PushNotification:
    """A push notification for a user's devices."""

    id: str = ""
    user_id: str = ""
    title: str = ""
    body: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    badge: int = 0
    sound: str = ""
    category: str = ""
    priority: Optional[Priority] = None

    def is_valid(self) -> bool:
        """Return True when a user and a title are present."""
        return bool(self.user_id) and bool(self.title)

    def has_data(self) -> bool:
        """Return True when the notification carries a data payload."""
        return bool(self.data)


@dataclass
class SMSNotification:
    """A text message to a phone number."""

    id: str = ""
    phone_number: str = ""
    message: str = ""
    priority: Optional[Priority] = None
    scheduled_at: Optional[datetime] = None


@dataclass
class NotificationHistory:
    """A notification as recorded in a user's history."""

    id: str = ""
    user_id: str = ""
    type: Optional[NotificationType] = None
    title: str = ""
    body: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    status: Optional[NotificationStatus] = None
    priority: Optional[Priority] = None
    created_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    read_at: Optional[datetime] = None
    failure_count: int = 0
    last_error: str = ""

    def is_read(self) -> bool:
        """Return True when the notification has been read."""
        return self.read_at is not None

    def is_sent(self) -> bool:
        """Return True when the notification has been sent."""
        return self.sent_at is not None

    def has_failed(self) -> bool:
        """Return True when delivery failed."""
        return self.status == NotificationStatus.FAILED


@dataclass
class RateLimit:
    """Per-channel sending limits."""

    max_per_minute: int = 0
    max_per_hour: int = 0
    max_per_day: int = 0


@dataclass
class RetryConfig:
    """Retry settings for failed deliveries."""

    max_retries: int = 0
    initial_delay: timedelta = field(default_factory=timedelta)
    backoff_factor: float = 0.0
    max_delay: timedelta = field(default_factory=timedelta)


@dataclass
class NotificationConfig:
    """Configuration for the notification service."""

    email_provider: str = ""  # smtp, sendgrid, ses, ...
    push_provider: str = ""  # firebase, apns, ...
    sms_provider: str = ""  # twilio, sns, ...
    default_from_email: str = ""
    templates: dict[str, str] = field(default_factory=dict)
    rate_limits: dict[str, RateLimit] = field(default_factory=dict)
    retry_config: RetryConfig = field(default_factory=RetryConfig)

    def is_valid(self) -> bool:
        """Return True when a default sender address is set."""
        return bool(self.default_from_email)


def default_notification_config() -> NotificationConfig:
    """Return the default notification configuration."""
    return NotificationConfig(
        email_provider="smtp",
        push_provider="firebase",
        sms_provider="twilio",
        default_from_email="noreply@example.com",
        templates={},
        rate_limits={
            "email": RateLimit(max_per_minute=60, max_per_hour=1000, max_per_day=10000),
            "push": RateLimit(max_per_minute=100, max_per_hour=5000, max_per_day=50000),
            "sms": RateLimit(max_per_minute=10, max_per_hour=100, max_per_day=500),
        },
        retry_config=RetryConfig(
            max_retries=3,
            initial_delay=timedelta(seconds=1),
            backoff_factor=2.0,
            max_delay=timedelta(minutes=5),
        ),
    )