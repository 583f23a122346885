from __future__ import annotations

from flask.testing import FlaskClient

from authapi.app import create_app
from authapi.application.services.token_issuer import JwtTokenIssuer
from authapi.shared.config.settings import AppConfig, SecurityConfig
from authapi.tests.doubles import TEST_SECRET, InMemoryUserRepository


def test_create_login_flow(client: FlaskClient, users: InMemoryUserRepository) -> None:
    created = client.post("/create", json={"name": "alice", "password": "secret1"})
    assert created.status_code == 201
    data = created.get_json()["data"]
    assert data["name"] == "alice"
    assert data["password"] != "secret1"

    duplicate = client.post("/create", json={"name": "alice", "password": "other"})
    assert duplicate.status_code == 409

    login = client.post("/login", json={"name": "alice", "password": "secret1"})
    assert login.status_code == 200
    token = login.get_json()["token"]
    assert token
    assert JwtTokenIssuer(TEST_SECRET).verify(token).name == "alice"

    wrong = client.post("/login", json={"name": "alice", "password": "wrong"})
    assert wrong.status_code == 400
    assert wrong.get_json()["message"] == "User or password incorrect"

    assert len(users) == 1


def test_unknown_user_and_wrong_password_look_identical(client: FlaskClient) -> None:
    client.post("/create", json={"name": "alice", "password": "secret1"})

    wrong_password = client.post("/login", json={"name": "alice", "password": "nope"})
    unknown_user = client.post("/login", json={"name": "bob", "password": "secret1"})

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.get_json() == unknown_user.get_json()


def test_missing_fields_leave_store_untouched(
    client: FlaskClient, users: InMemoryUserRepository
) -> None:
    response = client.post("/create", json={"name": "alice"})

    assert response.status_code == 400
    assert users.writes == 0


def test_index_and_security_headers(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_json()["success"] is True
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "camera=()" in response.headers["Permissions-Policy"]
    assert "X-Request-ID" in response.headers


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_cors_allows_any_origin_by_default(client: FlaskClient) -> None:
    response = client.get("/", headers={"Origin": "https://example.org"})

    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_health_without_store_is_ok(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True}


def test_cors_echoes_configured_origin_with_credentials(
    app_config: AppConfig, users: InMemoryUserRepository
) -> None:
    config = app_config.model_copy(
        update={"security": SecurityConfig(ALLOWED_ORIGINS="https://app.example")}
    )
    client = create_app(config, user_repository=users).test_client()

    allowed = client.get("/", headers={"Origin": "https://app.example"})
    other = client.get("/", headers={"Origin": "https://evil.example"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "https://app.example"
    assert allowed.headers["Access-Control-Allow-Credentials"] == "true"
    assert "Access-Control-Allow-Origin" not in other.headers


def test_long_credentials_register_and_login(client: FlaskClient) -> None:
    name = "a" * 300
    password = "p" * 2000

    created = client.post("/create", json={"name": name, "password": password})
    logged_in = client.post("/login", json={"name": name, "password": password})

    assert created.status_code == 201
    assert logged_in.status_code == 200
