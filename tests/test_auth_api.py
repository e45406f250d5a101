"""
Tests de registro, login y ``/users/me``.
"""
from datetime import timedelta

from app.core.auth.security import create_access_token, decode_access_token

AUTH_URL = "/api/v1/auth"


def register_payload(**overrides):
    payload = {"name": "Ana Pérez", "email": "ana@pos.test", "password": "secret123", "role": "manager"}
    payload.update(overrides)
    return payload


def test_first_user_registers_without_token(client):
    response = client.post(f"{AUTH_URL}/register", json=register_payload(email="  Ana@POS.test "))

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "ana@pos.test"
    assert body["role"] == "manager"
    assert "password" not in body and "password_hash" not in body


def test_registration_closes_after_first_user(client, manager):
    response = client.post(f"{AUTH_URL}/register", json=register_payload(email="otro@pos.test"))

    assert response.status_code == 401


def test_only_manager_registers_users(client, manager_headers, cashier_headers):
    payload = register_payload(email="caja2@pos.test", role="cashier")

    assert client.post(f"{AUTH_URL}/register", json=payload, headers=cashier_headers).status_code == 403
    assert client.post(f"{AUTH_URL}/register", json=payload, headers=manager_headers).status_code == 201


def test_duplicate_email_is_rejected(client, manager, manager_headers):
    response = client.post(
        f"{AUTH_URL}/register", json=register_payload(email=manager.email), headers=manager_headers
    )

    assert response.status_code == 400


def test_invalid_registration_is_422(client):
    assert client.post(f"{AUTH_URL}/register", json=register_payload(role="admin")).status_code == 422
    assert client.post(f"{AUTH_URL}/register", json=register_payload(password="123")).status_code == 422
    assert client.post(f"{AUTH_URL}/register", json=register_payload(email="sin-arroba")).status_code == 422


def test_login_returns_bearer_token(client, make_user):
    user = make_user(role="cashier", email="caja@pos.test", password="secret123")

    response = client.post(f"{AUTH_URL}/login", json={"email": "caja@pos.test", "password": "secret123"})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["id"] == user.id

    payload = decode_access_token(body["access_token"])
    assert payload["sub"] == str(user.id)
    assert payload["role"] == "cashier"


def test_login_with_wrong_password_is_401(client, make_user):
    make_user(email="caja@pos.test", password="secret123")

    response = client.post(f"{AUTH_URL}/login", json={"email": "caja@pos.test", "password": "otra"})
    assert response.status_code == 401

    response = client.post(f"{AUTH_URL}/login", json={"email": "nadie@pos.test", "password": "secret123"})
    assert response.status_code == 401


def test_me_returns_authenticated_user(client, cashier, cashier_headers):
    response = client.get("/api/v1/users/me", headers=cashier_headers)

    assert response.status_code == 200
    assert response.json()["email"] == cashier.email


def test_expired_token_is_401(client, cashier):
    token = create_access_token(cashier.id, cashier.role, expires_delta=timedelta(minutes=-1))

    response = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_for_deleted_user_is_401(client):
    token = create_access_token(12345, "manager")

    response = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
