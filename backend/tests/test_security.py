import pytest
from jose import jwt

from todo_scheduler.core.config import settings
from todo_scheduler.core.security import (
    ALGORITHM,
    InvalidSessionToken,
    create_session_token,
    hash_password,
    read_session_token,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_verify_against_corrupt_hash():
    assert not verify_password("anything", "not-a-hash")


def test_session_token_carries_user_id():
    assert read_session_token(create_session_token(42)) == 42


def test_expired_token_rejected():
    token = create_session_token(42, expires_minutes=-1)
    with pytest.raises(InvalidSessionToken):
        read_session_token(token)


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode({"sub": "42"}, "someone-else", algorithm=ALGORITHM)
    with pytest.raises(InvalidSessionToken):
        read_session_token(token)


def test_token_without_subject_rejected():
    token = jwt.encode({"foo": "bar"}, settings.jwt_secret, algorithm=ALGORITHM)
    with pytest.raises(InvalidSessionToken):
        read_session_token(token)
