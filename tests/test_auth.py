from haca.core.auth import create_access_token


def test_login_and_me(client, register):
    register()

    response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "secret123"})
    assert response.status_code == 200
    token = response.json()
    assert token["role"] == "student"
    assert token["is_admin"] is False

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "asha@example.com"
    assert me.json()["is_admin"] is False


def test_wrong_password(client, register):
    register()

    response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "nope-nope"})

    assert response.status_code == 401


def test_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert response.status_code == 401


def test_admin_login_reports_admin(client, admin_headers):
    me = client.get("/api/auth/me", headers=admin_headers)

    assert me.status_code == 200
    assert me.json()["role"] == "admin"
    assert me.json()["is_admin"] is True


def test_admin_looking_email_is_not_admin(client, register):
    student = register(email="admin@admin.com")
    headers = {"Authorization": f"Bearer {student['access_token']}"}

    assert client.get("/api/auth/me", headers=headers).json()["is_admin"] is False
    assert client.get("/api/admin/students", headers=headers).status_code == 403


def test_bad_tokens_rejected(client, register):
    student = register()

    garbage = {"Authorization": "Bearer not-a-token"}
    assert client.get("/api/auth/me", headers=garbage).status_code == 401

    unknown_role = create_access_token({"sub": str(student["user_id"]), "role": "superuser"})
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {unknown_role}"}).status_code == 401

    missing_user = create_access_token({"sub": "9999", "role": "student"})
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {missing_user}"}).status_code == 401


def test_admin_without_profile_has_no_dashboard(client, admin_headers):
    assert client.get("/api/students/me", headers=admin_headers).status_code == 403
