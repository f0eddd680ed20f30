import pytest

from user_directory import security


def test_hash_password_is_salted():
    first = security.hash_password("secret123", security.generate_salt(4))
    second = security.hash_password("secret123", security.generate_salt(4))
    assert first != second
    assert first.startswith("$2b$04$")


def test_hash_password_with_stored_hash_reproduces_it():
    hashed = security.hash_password("secret123", security.generate_salt(4))
    assert security.hash_password("secret123", hashed) == hashed
    assert security.hash_password("secret124", hashed) != hashed


def test_hash_password_rejects_malformed_salt():
    with pytest.raises(ValueError):
        security.hash_password("secret123", "not-a-bcrypt-hash")
