# decorarch

Building blocks for services organised around small domain interfaces:

- `decorarch.eventhandler`: event handler configuration, retry settings and
  handler errors (`EventHandlerConfig`, `RetryConfig`, `EventHandlerError`,
  `default_event_handler_config()`), plus ready-made errors such as
  `ERR_HANDLER_NOT_FOUND` and `ERR_HANDLER_TIMEOUT`.
- `decorarch.eventhandler_factory`: configuration for event handler services
  (`Config`, `FeatureFlags`, `default_config()`, `default_feature_flags()`),
  built with a fluent `ConfigBuilder`.
- `decorarch.notification`: email, push and SMS notification models, history
  records, the `NotificationType`, `NotificationStatus` and `Priority` enums,
  and `default_notification_config()`.
- `decorarch.aes`: `AESEncryptionService`, AES-256-GCM encryption with a
  separate key for each purpose and a default key for anything else.
- `decorarch.noop`: `NoOpEncryptionService`, which returns data unchanged and
  is meant for development and tests.
- `decorarch.encryption_factory`: `EncryptionServiceFactory` and
  `ConfigBuilder`, which assemble an encryption service from configuration.

## Installation

```
pip install decorarch
```

## Encryption

```python
from decorarch.encryption_factory import ConfigBuilder, EncryptionServiceFactory

config = ConfigBuilder().enable_production_mode().build()
service = EncryptionServiceFactory(config).build()

ciphertext = service.encrypt("hello")
assert service.decrypt(ciphertext) == "hello"

sealed = service.encrypt_with_purpose("someone@example.com", "user_email")
assert service.decrypt_with_purpose(sealed, "user_email") == "someone@example.com"
```

Ciphertexts are base64 text holding a random 12-byte nonce followed by the
GCM output. A purpose without a key of its own uses the default key.
`encrypt_batch()` and `decrypt_batch()` work on a mapping of field names to
values. `rotate_keys()` replaces every key, so anything encrypted earlier can
no longer be decrypted. Bad keys, bad key sizes and undecryptable data raise
`decorarch.aes.EncryptionError`.

An unknown algorithm name falls back to AES. For development,
`ConfigBuilder().enable_noop_mode().build()` produces a configuration whose
service passes data through unchanged; its key rotations are only counted in
its `rotations` counter.

## Notifications and event handlers

```python
from decorarch.notification import EmailNotification, default_notification_config
from decorarch.eventhandler import EventHandlerConfig

email = EmailNotification(to="someone@example.com", subject="Hi", body="Welcome")
assert email.is_valid()

handler = EventHandlerConfig(handler_id="user-handler", event_types=["user.created"])
assert handler.handles_event_type("user.created")

assert default_notification_config().rate_limits["email"].max_per_minute == 60
```

## What the package does not do

The notification and event handler modules hold data models and
configuration only. Nothing here sends e-mail, push or SMS messages, keeps a
notification history, or publishes and dispatches events, and the event
handler `ConfigBuilder` produces a `Config` but no running handler.

## Running the tests

```
pip install -e ".[test]"
pytest
```