"""Configuration and fluent builder for the event handler service."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class FeatureFlags:
    """Switches that control event handler service behaviour."""

    enable_sync_processing: bool = False
    enable_async_processing: bool = False
    enable_batch_processing: bool = False
    enable_stream_processing: bool = False
    enable_retry_logic: bool = False
    enable_dead_letter_queue: bool = False
    enable_event_filtering: bool = False
    enable_event_transformation: bool = False
    enable_event_validation: bool = False
    enable_event_sourcing: bool = False
    enable_metrics: bool = False
    enable_tracing: bool = False
    enable_circuit_breaker: bool = False
    enable_rate_limiting: bool = False
    enable_ordering: bool = False
    enable_deduplication: bool = False


def default_feature_flags() -> FeatureFlags:
    """Return the default feature flags."""
    return FeatureFlags(
        enable_sync_processing=True,
        enable_retry_logic=True,
        enable_event_filtering=True,
        enable_event_validation=True,
    )


@dataclass
class Config:
    """All settings needed to build an event handler service."""

    handler_type: str = ""  # "sync", "async", "batch" or "stream"
    concurrency: int = 0
    buffer_size: int = 0
    batch_size: int = 0
    batch_timeout: timedelta = field(default_factory=timedelta)
    process_timeout: timedelta = field(default_factory=timedelta)
    max_retries: int = 0
    initial_delay: timedelta = field(default_factory=timedelta)
    backoff_factor: float = 0.0
    max_delay: timedelta = field(default_factory=timedelta)
    event_types: list[str] = field(default_factory=list)
    event_patterns: list[str] = field(default_factory=list)
    ignore_patterns: list[str] = field(default_factory=list)
    enable_metrics: bool = False
    enable_tracing: bool = False
    metrics_interval: timedelta = field(default_factory=timedelta)
    storage_provider: str = ""  # "memory", "file" or "database"
    storage_path: str = ""
    features: FeatureFlags = field(default_factory=FeatureFlags)


def default_config() -> Config:
    """Return a sensible default configuration."""
    return Config(
        handler_type="sync",
        concurrency=1,
        buffer_size=100,
        batch_size=10,
        batch_timeout=timedelta(seconds=5),
        process_timeout=timedelta(seconds=30),
        max_retries=3,
        initial_delay=timedelta(seconds=1),
        backoff_factor=2.0,
        max_delay=timedelta(minutes=5),
        event_types=[],
        event_patterns=[],
        ignore_patterns=[],
        enable_metrics=False,
        enable_tracing=False,
        metrics_interval=timedelta(minutes=1),
        storage_provider="memory",
        features=default_feature_flags(),
    )


class ConfigBuilder:
    """Fluent builder for :class:`Config`, starting from :func:`default_config`."""

    def __init__(self) -> None:
        self._config = default_config()

    def with_handler_type(self, handler_type: str) -> ConfigBuilder:
        self._config.handler_type = handler_type
        return self

    def with_concurrency(self, concurrency: int) -> ConfigBuilder:
        self._config.concurrency = concurrency
        return self

    def with_buffer_size(self, size: int) -> ConfigBuilder:
        self._config.buffer_size = size
        return self

    def with_batch_config(self, batch_size: int, batch_timeout: timedelta) -> ConfigBuilder:
        self._config.batch_size = batch_size
        self._config.batch_timeout = batch_timeout
        return self

    def with_process_timeout(self, timeout: timedelta) -> ConfigBuilder:
        self._config.process_timeout = timeout
        return self

    def with_retry_config(
        self,
        max_retries: int,
        initial_delay: timedelta,
        backoff_factor: float,
        max_delay: timedelta,
    ) -> ConfigBuilder:
        self._config.max_retries = max_retries
        self._config.initial_delay = initial_delay
        self._config.backoff_factor = backoff_factor
        self._config.max_delay = max_delay
        return self

    def with_event_types(self, event_types: list[str]) -> ConfigBuilder:
        self._config.event_types = list(event_types)
        return self

    def with_event_patterns(self, patterns: list[str]) -> ConfigBuilder:
        self._config.event_patterns = list(patterns)
        return self

    def with_ignore_patterns(self, patterns: list[str]) -> ConfigBuilder:
        self._config.ignore_patterns = list(patterns)
        return self

    def with_metrics(self, enable: bool, interval: timedelta) -> ConfigBuilder:
        self._config.enable_metrics = enable
        self._config.metrics_interval = interval
        self._config.features.enable_metrics = enable
        return self

    def with_tracing(self, enable: bool) -> ConfigBuilder:
        self._config.enable_tracing = enable
        self._config.features.enable_tracing = enable
        return self

    def with_storage_provider(self, provider: str, path: str) -> ConfigBuilder:
        self._config.storage_provider = provider
        self._config.storage_path = path
        return self

    def with_features(self, features: FeatureFlags) -> ConfigBuilder:
        self._config.features = copy.copy(features)
        return self

    def enable_async_processing(self) -> ConfigBuilder:
        self._config.handler_type = "async"
        self._config.features.enable_async_processing = True
        self._config.features.enable_sync_processing = False
        return self

    def enable_batch_processing(self) -> ConfigBuilder:
        self._config.handler_type = "batch"
        self._config.features.enable_batch_processing = True
        self._config.features.enable_sync_processing = False
        return self

    def enable_stream_processing(self) -> ConfigBuilder:
        self._config.handler_type = "stream"
        self._config.features.enable_stream_processing = True
        self._config.features.enable_sync_processing = False
        return self

    def enable_retry_logic(self) -> ConfigBuilder:
        """Enable retries together with a dead letter queue."""
        self._config.features.enable_retry_logic = True
        self._config.features.enable_dead_letter_queue = True
        return self

    def enable_event_filtering(self) -> ConfigBuilder:
        self._config.features.enable_event_filtering = True
        return self

    def enable_event_sourcing(self) -> ConfigBuilder:
        self._config.features.enable_event_sourcing = True
        return self

    def enable_circuit_breaker(self) -> ConfigBuilder:
        self._config.features.enable_circuit_breaker = True
        return self

    def enable_ordering(self) -> ConfigBuilder:
        self._config.features.enable_ordering = True
        return self

    def enable_deduplication(self) -> ConfigBuilder:
        self._config.features.enable_deduplication = True
        return self

    def for_development(self) -> ConfigBuilder:
        """Configure for local development: synchronous, small buffer, no telemetry."""
        self._config.handler_type = "sync"
        self._config.concurrency = 1
        self._config.buffer_size = 10
        self._config.enable_metrics = False
        self._config.enable_tracing = False
        self._config.features.enable_metrics = False
        self._config.features.enable_tracing = False
        return self

    def for_production(self) -> ConfigBuilder:
        """Configure for production: asynchronous, larger buffer, telemetry and resilience on."""
        self._config.handler_type = "async"
        self._config.concurrency = 10
        self._config.buffer_size = 1000
        self._config.enable_metrics = True
        self._config.enable_tracing = True
        self._config.metrics_interval = timedelta(minutes=1)
        self._config.features.enable_metrics = True
        self._config.features.enable_tracing = True
        self._config.features.enable_retry_logic = True
        self._config.features.enable_circuit_breaker = True
        return self

    def build(self) -> Config:
        """Return a copy of the configuration built so far."""
        return copy.deepcopy(self._config)