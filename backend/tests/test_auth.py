from conftest import register_and_login


def test_register_normalizes_email_and_hashes_password(client, db_session):
    r = client.post(
        "/api/v1/auth/register",
        json={"email": "  Grey@Example.com ", "password": "secret123", "full_name": "Dr. Meredith Grey"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == "grey@example.com"
    assert body["role"] == "DOCTOR"
    assert "password" not in body

    from app.db.models.doctor import Doctor

    stored = db_session.query(Doctor).one()
    assert stored.password.startswith("pbkdf2_sha256$")


def test_duplicate_email_conflicts(client):
    register_and_login(client, email="dup@example.com")
    r = client.post(
        "/api/v1/auth/register",
        json={"email": "DUP@example.com", "password": "another1", "full_name": "Dr. Dup"},
    )
    assert r.status_code == 409


def test_register_rejects_bad_input(client):
    r = client.post("/api/v1/auth/register", json={"email": "nope", "password": "secret123", "full_name": "X"})
    assert r.status_code == 400
    r = client.post("/api/v1/auth/register", json={"email": "a@b.c", "password": "123", "full_name": "X"})
    assert r.status_code == 422


def test_login_with_wrong_password(client):
    register_and_login(client)
    r = client.post("/api/v1/auth/login", json={"email": "house@example.com", "password": "wrong-pass"})
    assert r.status_code == 401


def test_me_and_logout(client, auth_headers):
    r = client.get("/api/v1/auth/me", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["full_name"] == "Dr. Gregory House"

    r = client.post("/api/v1/auth/logout", headers=auth_headers)
    assert r.status_code == 200

    r = client.get("/api/v1/auth/me", headers=auth_headers)
    assert r.status_code == 401


def test_missing_or_malformed_authorization(client):
    assert client.get("/api/v1/auth/me").status_code == 401
    assert client.get("/api/v1/auth/me", headers={"Authorization": "Token abc"}).status_code == 401
    assert client.get("/api/v1/auth/me", headers={"Authorization": "Bearer unknown"}).status_code == 401
