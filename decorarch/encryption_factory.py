"""Configuration, fluent builder and factory for encryption services."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from typing import Union

from decorarch.aes import PURPOSE_DEFAULT, STANDARD_PURPOSES, AESEncryptionService, EncryptionError
from decorarch.noop import NoOpEncryptionService

EncryptionService = Union[AESEncryptionService, NoOpEncryptionService]


@dataclass
class FeatureFlags:
    """Switches that control encryption service behaviour."""

    enable_aes_encryption: bool = False
    enable_noop_encryption: bool = False
    enable_key_rotation: bool = False
    enable_purpose_keys: bool = False
    enable_batch_operations: bool = False
    enable_key_derivation: bool = False
    enable_compression_first: bool = False


def default_feature_flags() -> FeatureFlags:
    """Return the default feature flags."""
    return FeatureFlags(
        enable_aes_encryption=True,
        enable_noop_encryption=False,
        enable_key_rotation=True,
        enable_purpose_keys=True,
        enable_batch_operations=True,
        enable_key_derivation=False,
        enable_compression_first=False,
    )


@dataclass
class Config:
    """All settings needed to build an encryption service."""

    algorithm: str = ""  # "aes" or "noop"
    default_key: bytes = b""
    purpose_keys: dict[str, bytes] = field(default_factory=dict)
    key_size: int = 0
    auto_generate_keys: bool = False
    key_rotation_days: int = 0
    features: FeatureFlags = field(default_factory=FeatureFlags)


def default_config() -> Config:
    """Return a sensible default configuration (AES-256, generated keys)."""
    return Config(
        algorithm="aes",
        key_size=32,
        auto_generate_keys=True,
        key_rotation_days=90,
        purpose_keys={},
        features=default_feature_flags(),
    )


class EncryptionServiceFactory:
    """Builds an encryption service from a :class:`Config`."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def build(self) -> EncryptionService:
        """Build the configured service; unknown algorithms fall back to AES."""
        if self._config.algorithm == "noop":
            return NoOpEncryptionService()
        return self._build_aes()

    def _build_aes(self) -> AESEncryptionService:
        config = self._config
        default_key = bytes(config.default_key or b"")
        if not default_key and config.auto_generate_keys:
            default_key = self._generate_key()

        if len(default_key) != config.key_size:
            raise EncryptionError(
                f"default key size must be {config.key_size} bytes, got {len(default_key)}"
            )

        purpose_keys = dict(config.purpose_keys or {})
        if config.auto_generate_keys and config.features.enable_purpose_keys:
            for purpose in STANDARD_PURPOSES:
                if purpose not in purpose_keys:
                    purpose_keys[purpose] = self._generate_key()

        if config.features.enable_purpose_keys and purpose_keys:
            return AESEncryptionService(purpose_keys, default_key)
        return AESEncryptionService({PURPOSE_DEFAULT: default_key}, default_key)

    def _generate_key(self) -> bytes:
        return os.urandom(self._config.key_size)


class ConfigBuilder:
    """Fluent builder for :class:`Config`, starting from :func:`default_config`."""

    def __init__(self) -> None:
        self._config = default_config()

    def with_algorithm(self, algorithm: str) -> ConfigBuilder:
        self._config.algorithm = algorithm
        return self

    def with_default_key(self, key: bytes) -> ConfigBuilder:
        self._config.default_key = bytes(key)
        return self

    def with_purpose_key(self, purpose: str, key: bytes) -> ConfigBuilder:
        self._config.purpose_keys[purpose] = bytes(key)
        return self

    def with_key_size(self, size: int) -> ConfigBuilder:
        self._config.key_size = size
        return self

    def with_auto_generate_keys(self, enable: bool) -> ConfigBuilder:
        self._config.auto_generate_keys = enable
        return self

    def with_key_rotation_days(self, days: int) -> ConfigBuilder:
        self._config.key_rotation_days = days
        return self

    def with_features(self, features: FeatureFlags) -> ConfigBuilder:
        self._config.features = copy.copy(features)
        return self

    def enable_noop_mode(self) -> ConfigBuilder:
        """Switch to pass-through encryption."""
        self._config.algorithm = "noop"
        self._config.features.enable_noop_encryption = True
        self._config.features.enable_aes_encryption = False
        return self

    def enable_production_mode(self) -> ConfigBuilder:
        """Switch to AES-256 with generated purpose keys and rotation."""
        self._config.algorithm = "aes"
        self._config.key_size = 32
        self._config.auto_generate_keys = True
        self._config.features.enable_aes_encryption = True
        self._config.features.enable_noop_encryption = False
        self._config.features.enable_key_rotation = True
        self._config.features.enable_purpose_keys = True
        return self

    def build(self) -> Config:
        """Return a copy of the configuration built so far."""
        return copy.deepcopy(self._config)