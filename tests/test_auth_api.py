# =============================================================================
# tests/test_auth_api.py - Auth & Profile Endpoint Tests
# =============================================================================

from lib.security import create_access_token

from tests.conftest import TEST_PASSWORD


def register_payload(**overrides):
    payload = {
        "email": "Giulia.Bianchi@Example.com",
        "password": "SuperSegreta1",
        "name": "Giulia",
        "surname": "Bianchi",
        "role": "CLIENT",
    }
    payload.update(overrides)
    return payload


class TestRegister:
    """Tests for POST /api/auth/register."""

    def test_register_client(self, client, fake_db):
        response = client.post("/api/auth/register", json=register_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "giulia.bianchi@example.com"
        assert body["role"] == "CLIENT"
        assert body["oauth_provider"] == "APP"
        assert "password" not in body

        stored = fake_db.rows("users", email="giulia.bianchi@example.com")[0]
        assert stored["password"].startswith("$2")
        assert stored["password"] != "SuperSegreta1"

    def test_register_operator_creates_organization(self, client, fake_db):
        response = client.post(
            "/api/auth/register",
            json=register_payload(
                email="ama@example.com",
                role="OPERATOR",
                operator={"organization_name": "AMA Roma", "vat_number": "IT0123"},
            ),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["operator"]["organization_name"] == "AMA Roma"
        assert fake_db.rows("operators", user_id=body["id"])[0]["vat_number"] == "IT0123"

    def test_operator_without_organization_is_rejected(self, client, fake_db):
        response = client.post("/api/auth/register", json=register_payload(role="OPERATOR"))

        assert response.status_code == 422

    def test_admin_cannot_self_register(self, client, fake_db):
        response = client.post("/api/auth/register", json=register_payload(role="ADMIN"))

        assert response.status_code == 422
        assert fake_db.rows("users") == []

    def test_email_taken(self, client, users):
        response = client.post("/api/auth/register", json=register_payload(email="CLIENT@example.com"))

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_REGISTERED"

    def test_short_password_is_rejected(self, client, fake_db):
        response = client.post("/api/auth/register", json=register_payload(password="corta"))

        assert response.status_code == 422

    def test_password_over_72_bytes_is_rejected(self, client, fake_db):
        # 40 characters, 80 bytes in UTF-8
        response = client.post("/api/auth/register", json=register_payload(password="è" * 40))

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert fake_db.rows("users") == []

    def test_multibyte_password_within_limit(self, client, fake_db):
        password = "è" * 36

        registered = client.post("/api/auth/register", json=register_payload(password=password))
        login = client.post(
            "/api/auth/login",
            json={"email": "giulia.bianchi@example.com", "password": password},
        )

        assert registered.status_code == 201
        assert login.status_code == 200


class TestLogin:
    """Tests for login, logout and token verification."""

    def test_login_returns_token_and_cookie(self, client, users):
        response = client.post(
            "/api/auth/login",
            json={"email": "client@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] > 0
        assert body["user"]["id"] == users["client"]["id"]
        assert response.cookies.get("ecopoint_session") == body["access_token"]

    def test_token_from_login_authenticates(self, client, users):
        token = client.post(
            "/api/auth/login",
            json={"email": "operator@example.com", "password": TEST_PASSWORD},
        ).json()["access_token"]

        response = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})

        assert response.json() == {
            "valid": True,
            "user_id": users["operator"]["id"],
            "email": "operator@example.com",
            "role": "OPERATOR",
        }

    def test_wrong_password(self, client, users):
        response = client.post(
            "/api/auth/login",
            json={"email": "client@example.com", "password": "sbagliata"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_unknown_email(self, client, users):
        response = client.post(
            "/api/auth/login",
            json={"email": "nessuno@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401

    def test_logout_clears_cookie(self, client):
        response = client.post("/api/auth/logout")

        assert response.status_code == 204
        assert "ecopoint_session=" in response.headers["set-cookie"]

    def test_expired_token(self, client, users):
        token = create_access_token(users["client"]["id"], "client@example.com", "CLIENT", expires_minutes=-1)

        response = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_verify_without_token(self, client):
        assert client.get("/api/auth/verify").status_code == 401


class TestProfile:
    """Tests for /api/users/me."""

    def test_get_me(self, client, headers, users):
        response = client.get("/api/users/me", headers=headers["citizen"])

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == users["citizen"]["id"]
        assert body["operator"] is None
        assert "password" not in body

    def test_operator_profile_has_organization(self, client, headers):
        response = client.get("/api/users/me", headers=headers["operator"])

        assert response.json()["operator"]["organization_name"] == "Comune di Test"

    def test_update_me(self, client, fake_db, headers, users):
        response = client.patch(
            "/api/users/me",
            json={"cellphone": "+39 333 1234567", "name": None},
            headers=headers["citizen"],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["cellphone"] == "+39 333 1234567"
        assert body["name"] == "Citizen"

    def test_me_requires_login(self, client, fake_db):
        assert client.get("/api/users/me").status_code == 401
