import pytest

from blog_api.app.core.errors import StorageFailure


@pytest.fixture
def auto_client(make_client):
    return make_client(account_mode="auto_register")


def login(client, email="new@example.com", password="secret"):
    return client.post("/api/login", json={"email": email, "password": password})


def test_register_route_is_not_mounted(auto_client):
    response = auto_client.post("/api/register", json={"email": "a@example.com", "password": "pw"})
    assert response.status_code == 404


def test_first_login_creates_account(auto_client):
    response = login(auto_client)
    assert response.status_code == 201
    body = response.json()
    assert body["user"] == "new@example.com"
    assert "created" in body["message"]
    assert auto_client.app.state.storage.find_user_by_email("new@example.com") is not None


def test_second_login_is_plain_success(auto_client):
    login(auto_client)
    response = login(auto_client)
    assert response.status_code == 200
    assert response.json() == {"message": "Login successful", "user": "new@example.com"}


def test_wrong_password_on_existing_account(auto_client):
    login(auto_client)
    response = login(auto_client, password="wrong")
    assert response.status_code == 400
    assert auto_client.app.state.storage.find_user_by_email("new@example.com")["password"] == "secret"


def test_insert_failure_on_first_login_returns_500(auto_client, monkeypatch):
    def failing_insert(email, password):
        raise StorageFailure("Database error: disk I/O error")

    monkeypatch.setattr(auto_client.app.state.storage, "insert_user", failing_insert)
    response = login(auto_client)
    assert response.status_code == 500
    assert response.json() == {"message": "Registration failed"}


def test_lookup_failure_returns_500(auto_client):
    auto_client.app.state.storage.close()
    response = login(auto_client)
    assert response.status_code == 500
    assert response.json() == {"message": "Database error"}
