def register(client, email="user@example.com", password="secret"):
    return client.post("/api/register", json={"email": email, "password": password})


def test_register_then_duplicate(client):
    first = register(client)
    assert first.status_code == 201
    assert first.json() == {"message": "Registration successful"}

    second = register(client, password="different")
    assert second.status_code == 400
    assert second.json() == {"message": "Email already exists"}


def test_login_with_correct_credentials(client):
    register(client)
    response = client.post("/api/login", json={"email": "user@example.com", "password": "secret"})
    assert response.status_code == 200
    assert response.json() == {"message": "Login successful", "user": "user@example.com"}


def test_login_with_wrong_password_keeps_stored_password(client):
    register(client)
    response = client.post("/api/login", json={"email": "user@example.com", "password": "wrong"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid email or password"}

    storage = client.app.state.storage
    assert storage.find_user_by_email("user@example.com")["password"] == "secret"


def test_login_unknown_email_does_not_create_account(client):
    response = client.post("/api/login", json={"email": "ghost@example.com", "password": "pw"})
    assert response.status_code == 400
    assert client.app.state.storage.find_user_by_email("ghost@example.com") is None


def test_missing_field_is_reported_as_message(client):
    response = client.post("/api/register", json={"email": "user@example.com"})
    assert response.status_code == 400
    assert "password" in response.json()["message"]


def test_register_storage_failure_returns_500(client):
    client.app.state.storage.close()
    response = register(client)
    assert response.status_code == 500
    assert response.json() == {"message": "Database error"}


def test_login_storage_failure_returns_500(client):
    register(client)
    client.app.state.storage.close()
    response = client.post("/api/login", json={"email": "user@example.com", "password": "secret"})
    assert response.status_code == 500
    assert response.json() == {"message": "Database error"}


def test_duplicate_caught_by_unique_constraint_is_a_conflict(client, monkeypatch):
    register(client)
    # Lookup misses, as when another writer inserts between lookup and insert.
    monkeypatch.setattr(client.app.state.storage, "find_user_by_email", lambda email: None)
    response = register(client, password="different")
    assert response.status_code == 400
    assert response.json() == {"message": "Email already exists"}
