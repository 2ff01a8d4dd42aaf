"""Pass-through encryption service for development and testing."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field

_DEFAULT_ROTATION = ""


def _as_text(value: str) -> str:
    """Check that ``value`` is text and hand it back unchanged."""
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


@dataclass
class NoOpEncryptionService:
    """Returns data unchanged; key rotations are only counted."""

    rotations: Counter = field(default_factory=Counter)

    def encrypt(self, plaintext: str) -> str:
        return _as_text(plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return _as_text(ciphertext)

    def encrypt_with_purpose(self, plaintext: str, purpose: str) -> str:
        return _as_text(plaintext)

    def decrypt_with_purpose(self, ciphertext: str, purpose: str) -> str:
        return _as_text(ciphertext)

    def encrypt_batch(self, data: Mapping[str, str], purpose: str) -> dict[str, str]:
        """Return a copy of ``data``."""
        return dict(data)

    def decrypt_batch(self, data: Mapping[str, str], purpose: str) -> dict[str, str]:
        """Return a copy of ``data``."""
        return dict(data)

    def generate_key(self) -> bytes:
        """Return a fresh random 32-byte key."""
        return os.urandom(32)

    def generate_key_for_purpose(self, purpose: str) -> bytes:
        """Return a fresh random key; nothing is stored."""
        return self.generate_key()

    def rotate_keys(self) -> None:
        """Record a rotation of all keys; no key material changes."""
        self.rotations[_DEFAULT_ROTATION] += 1

    def rotate_key_for_purpose(self, purpose: str) -> None:
        """Record a rotation for ``purpose``; no key material changes."""
        self.rotations[purpose] += 1