from taskflow.logger import REQUEST_ID_MAX_LENGTH
from taskflow.models import User
from taskflow.services.tokens import get_subject, issue_token


def test_register_returns_201(register):
    response = register("alice")

    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully."}


def test_register_duplicate_username_is_conflict(register):
    register("alice")

    response = register("alice", email="another@example.com")

    assert response.status_code == 409
    assert response.json()["detail"]


def test_register_duplicate_email_is_conflict(register):
    register("alice")

    response = register("bob", email="alice@example.com")

    assert response.status_code == 409


def test_register_validation_errors_are_400(client):
    bad_payloads = [
        {"username": "al", "email": "al@example.com", "password": "secret123"},
        {"username": "alice", "email": "not-an-email", "password": "secret123"},
        {"username": "alice", "email": "alice@example.com", "password": "123"},
        {"username": "alice", "email": "alice@example.com"},
    ]
    for payload in bad_payloads:
        response = client.post("/api/auth/registrar", json=payload)
        assert response.status_code == 400, payload
        assert response.json()["detail"]


def test_login_returns_token_for_user(client, register):
    register("alice")

    response = client.post("/api/auth/login", json={"username": "alice", "password": "secret123"})

    assert response.status_code == 200
    assert get_subject(response.json()["token"]) == "alice"


def test_login_failures_look_the_same(client, register):
    register("alice")

    wrong_password = client.post("/api/auth/login", json={"username": "alice", "password": "nope-nope"})
    unknown_user = client.post("/api/auth/login", json={"username": "nobody", "password": "secret123"})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_login_missing_fields_is_400(client):
    response = client.post("/api/auth/login", json={"username": "alice"})
    assert response.status_code == 400


def test_task_endpoints_require_token(client):
    assert client.get("/api/tareas").status_code == 401
    assert client.get("/api/tareas", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_token_for_unknown_user_is_rejected(client):
    token = issue_token(User(username="ghost", email="ghost@example.com", password_hash="x"))

    response = client.get("/api/tareas", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_long_request_id_is_truncated(client):
    response = client.get("/health", headers={"X-Request-ID": "x" * 500})
    assert response.headers["X-Request-ID"] == "x" * REQUEST_ID_MAX_LENGTH


def test_blank_request_id_is_replaced(client):
    response = client.get("/health", headers={"X-Request-ID": "   "})
    assert response.headers["X-Request-ID"].strip()
