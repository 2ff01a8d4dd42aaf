"""AES-256-GCM encryption service with purpose-specific keys."""

from __future__ import annotations

import base64
import binascii
import os
from collections.abc import Mapping

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

KEY_SIZE = 32
NONCE_SIZE = 12

PURPOSE_DEFAULT = "default"
PURPOSE_USER_EMAIL = "user_email"
PURPOSE_USER_NAME = "user_name"
PURPOSE_USER_PHONE = "user_phone"
PURPOSE_PAYMENT_CARD = "payment_card"
PURPOSE_DOCUMENT_CONTENT = "document_content"
PURPOSE_SECRET_API_KEY = "secret"

STANDARD_PURPOSES = (
    PURPOSE_USER_EMAIL,
    PURPOSE_USER_NAME,
    PURPOSE_USER_PHONE,
    PURPOSE_PAYMENT_CARD,
    PURPOSE_DOCUMENT_CONTENT,
    PURPOSE_SECRET_API_KEY,
)


class EncryptionError(Exception):
    """Raised when a key is unusable or data cannot be encrypted or decrypted."""


class AESEncryptionService:
    """Encrypts strings with AES-256-GCM and encodes the result as base64.

    Each purpose may have its own key; purposes without one use the default key.
    """

    def __init__(self, purpose_keys: Mapping[str, bytes], default_key: bytes) -> None:
        if len(default_key) != KEY_SIZE:
            raise EncryptionError("default encryption key must be 32 bytes for AES-256")
        for purpose, key in purpose_keys.items():
            if len(key) != KEY_SIZE:
                raise EncryptionError(
                    f"encryption key for purpose '{purpose}' must be 32 bytes for AES-256"
                )
        self._purpose_keys: dict[str, bytes] = {p: bytes(k) for p, k in purpose_keys.items()}
        self._default_key = bytes(default_key)

    @classmethod
    def with_defaults(cls) -> AESEncryptionService:
        """Create a service with random keys for every standard purpose."""
        purpose_keys = {purpose: os.urandom(KEY_SIZE) for purpose in STANDARD_PURPOSES}
        return cls(purpose_keys, os.urandom(KEY_SIZE))

    def encrypt(self, plaintext: str) -> str:
        """Encrypt with the default key."""
        return self._encrypt(plaintext, self._default_key)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt with the default key."""
        return self._decrypt(ciphertext, self._default_key)

    def encrypt_with_purpose(self, plaintext: str, purpose: str) -> str:
        """Encrypt with the key for ``purpose``."""
        return self._encrypt(plaintext, self._key_for(purpose))

    def decrypt_with_purpose(self, ciphertext: str, purpose: str) -> str:
        """Decrypt with the key for ``purpose``."""
        return self._decrypt(ciphertext, self._key_for(purpose))

    def encrypt_batch(self, data: Mapping[str, str], purpose: str) -> dict[str, str]:
        """Encrypt every value of ``data`` with the key for ``purpose``."""
        key = self._key_for(purpose)
        result = {}
        for name, plaintext in data.items():
            try:
                result[name] = self._encrypt(plaintext, key)
            except EncryptionError as exc:
                raise EncryptionError(f"failed to encrypt field '{name}': {exc}") from exc
        return result

    def decrypt_batch(self, data: Mapping[str, str], purpose: str) -> dict[str, str]:
        """Decrypt every value of ``data`` with the key for ``purpose``."""
        key = self._key_for(purpose)
        result = {}
        for name, ciphertext in data.items():
            try:
                result[name] = self._decrypt(ciphertext, key)
            except EncryptionError as exc:
                raise EncryptionError(f"failed to decrypt field '{name}': {exc}") from exc
        return result

    def generate_key(self) -> bytes:
        """Return a fresh random 32-byte key."""
        return os.urandom(KEY_SIZE)

    def generate_key_for_purpose(self, purpose: str) -> bytes:
        """Generate, store and return a new key for ``purpose``."""
        key = os.urandom(KEY_SIZE)
        self._purpose_keys[purpose] = key
        return key

    def rotate_keys(self) -> None:
        """Replace the default key and every purpose key."""
        self._default_key = self.generate_key()
        for purpose in list(self._purpose_keys):
            self.generate_key_for_purpose(purpose)

    def rotate_key_for_purpose(self, purpose: str) -> None:
        """Replace the key for ``purpose``."""
        self.generate_key_for_purpose(purpose)

    def _key_for(self, purpose: str) -> bytes:
        return self._purpose_keys.get(purpose, self._default_key)

    @staticmethod
    def _encrypt(plaintext: str, key: bytes) -> str:
        nonce = os.urandom(NONCE_SIZE)
        sealed = AESGCM(key).encrypt(nonce, plaintext.encode("utf-8"), None)
        return base64.b64encode(nonce + sealed).decode("ascii")

    @staticmethod
    def _decrypt(ciphertext: str, key: bytes) -> str:
        try:
            data = base64.b64decode(ciphertext, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise EncryptionError(f"invalid base64 ciphertext: {exc}") from exc
        if len(data) < NONCE_SIZE:
            raise EncryptionError("ciphertext too short")
        nonce, sealed = data[:NONCE_SIZE], data[NONCE_SIZE:]
        try:
            plaintext = AESGCM(key).decrypt(nonce, sealed, None)
        except InvalidTag as exc:
            raise EncryptionError("message authentication failed") from exc
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncryptionError("decrypted data is not valid UTF-8") from exc