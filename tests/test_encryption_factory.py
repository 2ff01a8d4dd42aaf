import pytest

from decorarch.aes import PURPOSE_USER_EMAIL, AESEncryptionService, EncryptionError
from decorarch.encryption_factory import (
    Config,
    ConfigBuilder,
    EncryptionServiceFactory,
    FeatureFlags,
    default_config,
    default_feature_flags,
)
from decorarch.noop import NoOpEncryptionService


def test_default_feature_flags():
    flags = default_feature_flags()
    assert flags.enable_aes_encryption is True
    assert flags.enable_noop_encryption is False
    assert flags.enable_key_rotation is True
    assert flags.enable_purpose_keys is True
    assert flags.enable_batch_operations is True
    assert flags.enable_key_derivation is False
    assert flags.enable_compression_first is False


@pytest.mark.parametrize(
    "key_size, auto_gen, expect_error",
    [
        (32, True, False),
        (32, False, False),
        (16, False, True),
    ],
)
def test_build_aes(key_size, auto_gen, expect_error):
    config = Config(
        algorithm="aes",
        key_size=key_size,
        auto_generate_keys=auto_gen,
        features=default_feature_flags(),
    )
    if not auto_gen:
        config.default_key = bytes(key_size)
    factory = EncryptionServiceFactory(config)
    if expect_error:
        with pytest.raises(EncryptionError):
            factory.build()
    else:
        service = factory.build()
        encrypted = service.encrypt("test data")
        assert service.decrypt(encrypted) == "test data"


def test_build_noop():
    service = EncryptionServiceFactory(
        Config(algorithm="noop", features=default_feature_flags())
    ).build()
    assert isinstance(service, NoOpEncryptionService)
    encrypted = service.encrypt("test data")
    assert encrypted == "test data"
    assert service.decrypt(encrypted) == "test data"


def test_unknown_algorithm_defaults_to_aes():
    service = EncryptionServiceFactory(
        Config(
            algorithm="unknown",
            key_size=32,
            auto_generate_keys=True,
            features=default_feature_flags(),
        )
    ).build()
    assert isinstance(service, AESEncryptionService)
    encrypted = service.encrypt("test data")
    assert encrypted != "test data"
    assert service.decrypt(encrypted) == "test data"


def test_purpose_keys_enabled_supports_purpose_encryption():
    config = Config(
        algorithm="aes",
        key_size=32,
        auto_generate_keys=True,
        features=FeatureFlags(enable_aes_encryption=True, enable_purpose_keys=True),
    )
    service = EncryptionServiceFactory(config).build()
    encrypted = service.encrypt_with_purpose("test data", PURPOSE_USER_EMAIL)
    assert encrypted != "test data"
    assert service.decrypt_with_purpose(encrypted, PURPOSE_USER_EMAIL) == "test data"
    with pytest.raises(EncryptionError):
        service.decrypt(encrypted)


def test_default_config():
    config = default_config()
    assert config.algorithm == "aes"
    assert config.key_size == 32
    assert config.auto_generate_keys is True
    assert config.key_rotation_days == 90
    assert config.purpose_keys == {}
    assert config.features == default_feature_flags()


def test_config_builder_fluent_interface():
    custom_key = bytes(range(32))
    config = (
        ConfigBuilder()
        .with_algorithm("aes")
        .with_key_size(32)
        .with_default_key(custom_key)
        .with_purpose_key(PURPOSE_USER_EMAIL, custom_key)
        .with_auto_generate_keys(False)
        .with_key_rotation_days(30)
        .build()
    )
    assert config.algorithm == "aes"
    assert config.key_size == 32
    assert config.default_key == custom_key
    assert config.purpose_keys[PURPOSE_USER_EMAIL] == custom_key
    assert config.auto_generate_keys is False
    assert config.key_rotation_days == 30


def test_config_builder_noop_mode():
    config = ConfigBuilder().enable_noop_mode().build()
    assert config.algorithm == "noop"
    assert config.features.enable_noop_encryption is True
    assert config.features.enable_aes_encryption is False


def test_config_builder_production_mode():
    config = ConfigBuilder().enable_noop_mode().enable_production_mode().build()
    assert config.algorithm == "aes"
    assert config.key_size == 32
    assert config.auto_generate_keys is True
    assert config.features.enable_aes_encryption is True
    assert config.features.enable_noop_encryption is False
    assert config.features.enable_key_rotation is True
    assert config.features.enable_purpose_keys is True


def test_config_builder_custom_features():
    custom = FeatureFlags(
        enable_aes_encryption=False,
        enable_noop_encryption=True,
        enable_key_rotation=False,
        enable_purpose_keys=False,
        enable_batch_operations=False,
    )
    config = ConfigBuilder().with_features(custom).build()
    assert config.features == custom


def test_batch_operations_flag_is_informational():
    service = EncryptionServiceFactory(
        Config(algorithm="noop", features=FeatureFlags(enable_batch_operations=False))
    ).build()
    data = {"field1": "value1", "field2": "value2"}
    encrypted = service.encrypt_batch(data, "test")
    assert encrypted == data
    assert service.decrypt_batch(encrypted, "test") == data


def test_manual_key_configuration_uses_provided_keys():
    default_key = bytes(range(32))
    purpose_key = bytes(range(100, 132))
    config = Config(
        algorithm="aes",
        key_size=32,
        default_key=default_key,
        auto_generate_keys=False,
        purpose_keys={PURPOSE_USER_EMAIL: purpose_key},
        features=default_feature_flags(),
    )
    service = EncryptionServiceFactory(config).build()

    encrypted = service.encrypt("test data")
    assert encrypted != "test data"
    assert service.decrypt(encrypted) == "test data"

    purpose_encrypted = service.encrypt_with_purpose("test data", PURPOSE_USER_EMAIL)
    assert purpose_encrypted != "test data"
    assert purpose_encrypted != encrypted
    assert service.decrypt_with_purpose(purpose_encrypted, PURPOSE_USER_EMAIL) == "test data"

    reference = AESEncryptionService({PURPOSE_USER_EMAIL: purpose_key}, default_key)
    assert reference.decrypt(encrypted) == "test data"
    assert reference.decrypt_with_purpose(purpose_encrypted, PURPOSE_USER_EMAIL) == "test data"


def test_build_does_not_mutate_config_purpose_keys():
    config = default_config()
    EncryptionServiceFactory(config).build()
    assert config.purpose_keys == {}


def test_zero_key_size_fails():
    config = Config(
        algorithm="aes",
        key_size=0,
        auto_generate_keys=True,
        features=default_feature_flags(),
    )
    with pytest.raises(EncryptionError):
        EncryptionServiceFactory(config).build()


def test_missing_default_key_without_auto_generation_fails():
    config = Config(algorithm="aes", key_size=32, features=default_feature_flags())
    with pytest.raises(EncryptionError, match="got 0"):
        EncryptionServiceFactory(config).build()