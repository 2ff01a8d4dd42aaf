from decorarch.noop import NoOpEncryptionService


def test_encrypt_and_decrypt_return_input():
    service = NoOpEncryptionService()
    assert service.encrypt("test data") == "test data"
    assert service.decrypt("test data") == "test data"


def test_purpose_operations_return_input():
    service = NoOpEncryptionService()
    assert service.encrypt_with_purpose("abc", "any") == "abc"
    assert service.decrypt_with_purpose("abc", "any") == "abc"


def test_batch_returns_equal_copy():
    service = NoOpEncryptionService()
    data = {"field1": "value1", "field2": "value2"}
    encrypted = service.encrypt_batch(data, "test")
    assert encrypted == data
    assert encrypted is not data
    decrypted = service.decrypt_batch(encrypted, "test")
    assert decrypted == data
    assert decrypted is not encrypted


def test_generate_key_is_32_bytes_and_random():
    service = NoOpEncryptionService()
    first, second = service.generate_key(), service.generate_key_for_purpose("p")
    assert len(first) == 32
    assert len(second) == 32
    assert first != second


def test_rotation_leaves_behaviour_unchanged():
    service = NoOpEncryptionService()
    service.rotate_keys()
    service.rotate_key_for_purpose("p")
    assert service.encrypt("same") == "same"