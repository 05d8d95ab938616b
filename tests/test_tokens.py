import base64
import json
from datetime import timedelta

import pytest
from fastapi import Response
from jose import jwt

from app.exceptions import InvalidOrExpiredTokenError, ValidationError
from app.utils.auth import TokenCodec
from app.utils.cookies import SessionCookie
from app.utils.hashing import hash_password, verify_password
from app.utils.tokens import generate_reset_token, generate_verification_code, hash_token


SECRET = "unit-test-secret"


def test_issue_then_verify_returns_user_id():
    codec = TokenCodec(SECRET)
    for user_id in (1, 42, 10_000_000):
        assert codec.verify(codec.issue(user_id)) == user_id


def test_token_carries_seven_day_expiry():
    codec = TokenCodec(SECRET)
    claims = jwt.decode(codec.issue(7), SECRET, algorithms=["HS256"])
    assert claims["sub"] == "7"
    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())


def test_expired_token_is_rejected():
    codec = TokenCodec(SECRET, expires=timedelta(seconds=-5))
    token = codec.issue(1)
    with pytest.raises(InvalidOrExpiredTokenError):
        codec.verify(token)


def test_token_signed_with_other_secret_is_rejected():
    token = TokenCodec("someone-else").issue(1)
    with pytest.raises(InvalidOrExpiredTokenError):
        TokenCodec(SECRET).verify(token)


def test_token_with_swapped_payload_is_rejected():
    codec = TokenCodec(SECRET)
    header, _, signature = codec.issue(1).split(".")
    forged_claims = json.dumps({"sub": "2", "exp": 9999999999}).encode()
    forged_payload = base64.urlsafe_b64encode(forged_claims).rstrip(b"=").decode()
    with pytest.raises(InvalidOrExpiredTokenError):
        codec.verify(f"{header}.{forged_payload}.{signature}")


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_malformed_tokens_are_rejected(token):
    with pytest.raises(InvalidOrExpiredTokenError):
        TokenCodec(SECRET).verify(token)


def test_codec_refuses_empty_secret():
    with pytest.raises(ValueError):
        TokenCodec("")


def test_token_signed_with_empty_key_is_rejected():
    forged = jwt.encode({"sub": "1", "exp": 9999999999}, "", algorithm="HS256")
    with pytest.raises(InvalidOrExpiredTokenError):
        TokenCodec(SECRET).verify(forged)


def test_token_without_numeric_subject_is_rejected():
    token = jwt.encode({"sub": "abc"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidOrExpiredTokenError):
        TokenCodec(SECRET).verify(token)


def test_session_cookie_attributes():
    response = Response()
    SessionCookie(secure=False).bind(response, "abc.def.ghi")
    header = response.headers["set-cookie"]
    lowered = header.lower()

    assert header.startswith("token=abc.def.ghi")
    assert "httponly" in lowered
    assert "samesite=strict" in lowered
    assert "max-age=604800" in lowered
    assert "; secure" not in lowered


def test_session_cookie_is_secure_in_production():
    response = Response()
    SessionCookie(secure=True).bind(response, "abc.def.ghi")
    assert "; secure" in response.headers["set-cookie"].lower()


def test_clearing_session_cookie_expires_it():
    response = Response()
    SessionCookie(secure=False).clear(response)
    lowered = response.headers["set-cookie"].lower()
    assert lowered.startswith("token=")
    assert "max-age=0" in lowered


def test_password_hash_uses_cost_factor_10():
    hashed = hash_password("correct horse")
    assert hashed.startswith("$2b$10$")
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_overlong_password_is_rejected():
    with pytest.raises(ValidationError):
        hash_password("x" * 73)
    assert not verify_password("x" * 73, hash_password("x" * 72))


def test_verification_code_is_six_digits():
    for _ in range(50):
        code = generate_verification_code()
        assert len(code) == 6 and code.isdigit()
        assert 100000 <= int(code) <= 999999


def test_reset_token_is_hex_with_20_bytes_of_entropy():
    token = generate_reset_token()
    assert len(token) == 40
    int(token, 16)
    assert generate_reset_token() != token


def test_hash_token_is_stable_sha256():
    assert hash_token("abc") == hash_token("abc")
    assert len(hash_token("abc")) == 64
    assert hash_token("abc") != "abc"
