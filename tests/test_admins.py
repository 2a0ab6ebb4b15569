"""Admin account API tests."""

ADMIN_PAYLOAD = {
    "name": "Second Admin",
    "email": "second-admin@example.com",
    "password": "adminpass123",
    "phone": "555-0199",
}


def test_create_admin(client, admin_headers):
    """Test an admin can create another admin."""
    response = client.post("/api/v1/admins", headers=admin_headers, json=ADMIN_PAYLOAD)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Admin user created successfully"
    admin = body["data"]["admin"]
    assert admin["role"] == "admin"
    assert admin["profile_type"] is None
    assert admin["profile"] is None


def test_create_admin_ignores_role_field(client, admin_headers):
    """Test unknown fields such as role are not written."""
    payload = {**ADMIN_PAYLOAD, "role": "farmer", "api_token": "x" * 60}
    response = client.post("/api/v1/admins", headers=admin_headers, json=payload)
    assert response.status_code == 201
    assert response.json()["data"]["admin"]["role"] == "admin"


def test_create_admin_duplicate_email(client, admin_headers):
    """Test the admin path names the taken email."""
    client.post("/api/v1/admins", headers=admin_headers, json=ADMIN_PAYLOAD)

    response = client.post("/api/v1/admins", headers=admin_headers, json=ADMIN_PAYLOAD)
    assert response.status_code == 422
    assert response.json()["errors"]["email"] == ["The email has already been taken."]


def test_create_admin_validation(client, admin_headers):
    """Test admin creation reports all invalid fields."""
    response = client.post(
        "/api/v1/admins",
        headers=admin_headers,
        json={"email": "bad", "password": "short"},
    )
    assert response.status_code == 422
    assert {"name", "email", "password", "phone"} <= set(response.json()["errors"])


def test_create_admin_requires_admin(client, auth_headers):
    """Test non-admins cannot create admins."""
    response = client.post("/api/v1/admins", headers=auth_headers, json=ADMIN_PAYLOAD)
    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"


def test_create_admin_requires_token(client):
    response = client.post("/api/v1/admins", json=ADMIN_PAYLOAD)
    assert response.status_code == 401


def test_list_admins(client, admin_headers, auth_headers):
    """Test listing only returns admin accounts."""
    client.post("/api/v1/admins", headers=admin_headers, json=ADMIN_PAYLOAD)

    response = client.get("/api/v1/admins", headers=admin_headers)
    assert response.status_code == 200
    admins = response.json()["data"]["admins"]
    assert [a["email"] for a in admins] == ["admin@example.com", "second-admin@example.com"]
    assert all(a["role"] == "admin" for a in admins)
