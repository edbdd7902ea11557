from app.core.security import hash_password, new_access_token, verify_password


def test_hash_and_verify():
    stored = hash_password("secret123")
    assert stored.startswith("pbkdf2_sha256$")
    assert verify_password("secret123", stored)
    assert not verify_password("wrong", stored)


def test_hashes_are_salted():
    assert hash_password("secret123") != hash_password("secret123")


def test_malformed_or_plaintext_stored_values_never_match():
    assert not verify_password("secret123", "")
    assert not verify_password("secret123", "secret123")
    assert not verify_password("secret123", "pbkdf2_sha256$abc$zz$zz")


def test_access_tokens_are_distinct():
    assert new_access_token() != new_access_token()
