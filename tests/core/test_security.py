import jwt
import pytest

from invoicing.core.errors import InvalidOrExpiredToken
from invoicing.core.security import (
    ALGORITHM,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret-0123456789abcdef"


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("admin123", rounds=4)
        assert verify_password("admin123", hashed)
        assert not verify_password("admin124", hashed)

    def test_same_password_gets_fresh_salt(self):
        assert hash_password("admin123", rounds=4) != hash_password("admin123", rounds=4)

    def test_malformed_hash_is_a_mismatch(self):
        assert not verify_password("admin123", "not-a-bcrypt-hash")


class TestTokens:
    def test_round_trip_claims(self):
        token = create_access_token("user-1", "admin@example.com", SECRET, expires_in=60)

        claims = decode_access_token(token, SECRET)
        assert claims.user_id == "user-1"
        assert claims.email == "admin@example.com"

    def test_token_lifetime(self):
        token = create_access_token("user-1", "admin@example.com", SECRET, expires_in=3600)

        payload = jwt.decode(token, SECRET, algorithms=[ALGORITHM])
        assert payload["exp"] - payload["iat"] == 3600

    def test_expired(self):
        token = create_access_token("user-1", "admin@example.com", SECRET, expires_in=-1)
        with pytest.raises(InvalidOrExpiredToken):
            decode_access_token(token, SECRET)

    def test_wrong_secret(self):
        token = create_access_token(
            "user-1", "admin@example.com", "another-secret-0123456789abcdef", expires_in=60
        )
        with pytest.raises(InvalidOrExpiredToken):
            decode_access_token(token, SECRET)

    def test_missing_subject(self):
        token = jwt.encode({"email": "admin@example.com", "exp": 4102444800}, SECRET, algorithm=ALGORITHM)
        with pytest.raises(InvalidOrExpiredToken):
            decode_access_token(token, SECRET)

    def test_missing_email(self):
        token = jwt.encode({"sub": "user-1", "exp": 4102444800}, SECRET, algorithm=ALGORITHM)
        with pytest.raises(InvalidOrExpiredToken):
            decode_access_token(token, SECRET)
