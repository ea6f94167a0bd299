from __future__ import annotations

from datetime import timedelta

from jose import jwt

from personacart.config import settings
from personacart.web.utils.jwt import create_access_token, decode_access_token, get_token_user_id
from personacart.web.utils.password import hash_password, verify_password


def test_password_hash_roundtrip():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong-password", hashed)
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_access_token_carries_user_claims():
    user_id = "0f3c2a9e5b7d4c1a8e6f2b3d4c5a6e7f"
    token = create_access_token(user_id, "family")
    payload = decode_access_token(token)
    assert payload["sub"] == user_id
    assert payload["username"] == "family"
    assert payload["iss"] == "personacart"
    assert payload["exp"] > payload["iat"]
    assert get_token_user_id(token) == user_id


def test_expired_or_garbage_token_is_rejected():
    expired = create_access_token("user-1", "family", expires_delta=timedelta(minutes=-5))
    assert decode_access_token(expired) is None
    assert get_token_user_id(expired) is None
    assert decode_access_token("not.a.token") is None


def test_token_without_subject_or_foreign_issuer_is_rejected():
    # Cùng secret nhưng thiếu sub / sai iss
    no_subject = jwt.encode({"iss": "personacart"}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    foreign = jwt.encode({"sub": "user-1", "iss": "other-app"}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    assert decode_access_token(no_subject) is None
    assert decode_access_token(foreign) is None


def test_register_login_and_me(client):
    response = client.post("/api/auth/register", json={"username": "  Parent ", "password": "secret123"})
    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["username"] == "parent"

    response = client.post("/api/auth/login", json={"username": "PARENT", "password": "secret123"})
    assert response.status_code == 200
    token = response.json()["access_token"]
    assert response.json()["user"]["last_login"] is not None

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["username"] == "parent"


def test_register_duplicate_username(client, make_user):
    make_user("family")
    response = client.post("/api/auth/register", json={"username": "Family", "password": "another123"})
    assert response.status_code == 409


def test_register_validation(client):
    response = client.post("/api/auth/register", json={"username": "two words", "password": "secret123"})
    assert response.status_code == 422
    response = client.post("/api/auth/register", json={"username": "someone", "password": "123"})
    assert response.status_code == 422


def test_register_password_limit_counts_utf8_bytes(client):
    # 72 ký tự nhưng hơn 72 bytes UTF-8
    multibyte = "mậtkhẩu€" * 9
    assert len(multibyte) == 72
    response = client.post("/api/auth/register", json={"username": "unicode", "password": multibyte})
    assert response.status_code == 422

    # Đúng 72 bytes vẫn hợp lệ
    response = client.post("/api/auth/register", json={"username": "ascii", "password": "a" * 72})
    assert response.status_code == 201


def test_login_wrong_password(client, make_user):
    make_user("family", "secret123")
    response = client.post("/api/auth/login", json={"username": "family", "password": "nope-nope"})
    assert response.status_code == 401
    response = client.post("/api/auth/login", json={"username": "ghost", "password": "secret123"})
    assert response.status_code == 401


def test_protected_endpoints_require_token(client):
    # HTTPBearer trả 401 hoặc 403 tùy phiên bản FastAPI
    assert client.get("/api/profiles").status_code in (401, 403)
    response = client.get("/api/cart", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token("0" * 32, "ghost")
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_root_and_health(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/").json()["name"] == "PersonaCart API"
