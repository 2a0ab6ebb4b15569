"""Authentication API tests."""

from src.models.access_token import AccessToken
from src.models.farmer import Farmer
from src.models.investor import Investor
from src.models.user import User

TEST_PASSWORD = "testpass123"  # matches the conftest fixtures


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, **overrides):
    payload = {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "password": "secret123",
        "phone": "555-0100",
        "role": "farmer",
    }
    payload.update(overrides)
    return client.post("/api/v1/auth/register", json=payload)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_farmer(client, db):
    """Test farmer registration creates the user, the profile and a token."""
    response = register(client)
    assert response.status_code == 201

    body = response.json()
    assert body["status"] == "success"
    assert body["message"] == "Registration successful"
    data = body["data"]
    assert data["token"]
    assert data["token_type"] == "Bearer"
    assert data["expires_in"] == 60 * 24 * 7
    assert data["user"]["role"] == "farmer"
    assert data["user"]["profile_type"] == "farmer"
    assert "password_hash" not in data["user"]
    assert "api_token" not in data["user"]

    farmer = db.query(Farmer).one()
    assert farmer.farmer_contact == ""
    assert farmer.farmer_fname == "Jane"
    assert farmer.farmer_lname == "Doe"
    assert data["user"]["profile_id"] == farmer.id
    assert data["user"]["profile"]["farmer_contact"] == ""


def test_register_investor_applies_defaults(client, db):
    """Test investor registration fills in the documented defaults."""
    response = register(client, email="ivy@example.com", name="Ivy Invest", role="investor")
    assert response.status_code == 201

    investor = db.query(Investor).one()
    assert investor.investor_name == "Ivy Invest"
    assert investor.investor_contact_no == ""
    assert investor.investor_budget_range == "0-0"
    assert investor.investor_type == "individual"
    assert db.query(Farmer).count() == 0


def test_register_investor_with_profile_fields(client):
    """Test optional investor fields are stored when given."""
    response = register(
        client,
        email="org@example.com",
        role="investor",
        contact="+254700000000",
        budget_range="1000-5000",
        investor_type="organization",
    )
    assert response.status_code == 201
    profile = response.json()["data"]["user"]["profile"]
    assert profile["investor_contact_no"] == "+254700000000"
    assert profile["investor_budget_range"] == "1000-5000"
    assert profile["investor_type"] == "organization"


def test_register_token_is_usable(client):
    """Test the registration token authenticates follow-up requests."""
    token = register(client).json()["data"]["token"]

    response = client.get("/api/v1/auth/me", headers=bearer(token))
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "jane@x.com"


def test_register_duplicate_email(client, db):
    """Test a second registration with the same email fails generically."""
    assert register(client).status_code == 201

    response = register(client, name="Someone Else", role="investor")
    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Registration failed"
    assert "errors" not in body
    assert db.query(User).count() == 1
    assert db.query(Investor).count() == 0


def test_register_duplicate_email_is_case_insensitive(client, db):
    """Test emails differing only by case count as duplicates."""
    assert register(client, email="Jane@X.com").status_code == 201
    assert register(client, email="jane@x.com").status_code == 422
    assert db.query(User).one().email == "jane@x.com"


def test_register_short_password(client, db):
    """Test a short password is rejected and nothing is written."""
    response = register(client, password="short")
    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Validation failed"
    assert "password" in body["errors"]
    assert db.query(User).count() == 0


def test_register_missing_password(client, db):
    """Test a missing password is rejected."""
    payload = {"name": "Jane", "email": "jane@x.com", "phone": "555", "role": "farmer"}
    response = client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 422
    assert "password" in response.json()["errors"]
    assert db.query(User).count() == 0


def test_register_reports_every_invalid_field(client):
    """Test all field errors are reported together."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "",
            "email": "not-an-email",
            "password": "short",
            "phone": "1" * 21,
            "role": "admin",
        },
    )
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert {"name", "email", "password", "phone", "role"} <= set(errors)


def test_register_rejects_blank_name_and_phone(client, db):
    """Test names and phones made only of spaces are rejected."""
    response = register(client, name="   ", phone="  ")
    assert response.status_code == 422
    assert {"name", "phone"} <= set(response.json()["errors"])
    assert db.query(User).count() == 0
    assert db.query(Farmer).count() == 0


def test_register_trims_text_fields(client, db):
    response = register(client, name="  Jane Doe ", phone=" 555-0100 ", contact="   ")
    assert response.status_code == 201

    user = db.query(User).one()
    assert (user.name, user.phone) == ("Jane Doe", "555-0100")
    farmer = db.query(Farmer).one()
    assert (farmer.farmer_fname, farmer.farmer_lname, farmer.farmer_contact) == ("Jane", "Doe", "")


def test_register_rejects_admin_role(client, db):
    """Test the public endpoint cannot create admins."""
    response = register(client, role="admin")
    assert response.status_code == 422
    assert "role" in response.json()["errors"]
    assert db.query(User).count() == 0


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token"]
    assert data["token_type"] == "Bearer"
    assert data["user"]["id"] == auth_headers.user_id


def test_login_email_is_case_insensitive(client, auth_headers):
    """Test login accepts the email in any case."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "FARMER@example.com", "password": TEST_PASSWORD}
    )
    assert response.status_code == 200


def test_login_revokes_previous_tokens(client, auth_headers, db):
    """Test every login invalidates earlier tokens and issues exactly one."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": TEST_PASSWORD}
    )
    new_token = response.json()["data"]["token"]

    assert client.get("/api/v1/auth/me", headers=auth_headers).status_code == 401
    assert client.get("/api/v1/auth/me", headers=bearer(new_token)).status_code == 200

    active = (
        db.query(AccessToken)
        .filter(AccessToken.user_id == auth_headers.user_id, AccessToken.revoked_at.is_(None))
        .count()
    )
    assert active == 1


def test_login_wrong_password(client, auth_headers, db):
    """Test login with wrong password changes nothing."""
    tokens_before = db.query(AccessToken).count()

    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "wrong"}
    )
    assert response.status_code == 401
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Invalid credentials"
    assert "data" not in body

    assert db.query(AccessToken).count() == tokens_before
    assert client.get("/api/v1/auth/me", headers=auth_headers).status_code == 200


def test_login_unknown_email(client):
    """Test unknown emails get the same answer as wrong passwords."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "whatever1"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_validation(client):
    """Test login shape validation."""
    response = client.post("/api/v1/auth/login", json={"email": "nope"})
    assert response.status_code == 422
    assert {"email", "password"} <= set(response.json()["errors"])


def test_get_current_user(client, auth_headers):
    """Test getting current user information."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["email"] == auth_headers.email
    assert data["role"] == "farmer"
    assert data["profile"]["farmer_fname"] == "Test"


def test_me_requires_token(client):
    """Test that endpoints require authentication."""
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.json()["status"] == "error"


def test_me_rejects_garbage_token(client):
    response = client.get("/api/v1/auth/me", headers=bearer("not-a-token"))
    assert response.status_code == 401


def test_logout_revokes_current_token(client, auth_headers):
    """Test logout ends the session of the token used."""
    response = client.post("/api/v1/auth/logout", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Logged out successfully"

    assert client.get("/api/v1/auth/me", headers=auth_headers).status_code == 401
    assert client.post("/api/v1/auth/logout", headers=auth_headers).status_code == 401


def test_logout_keeps_other_sessions(client, auth_headers, db):
    """Test logout leaves other tokens of the same user valid."""
    from src.services.auth import issue_token

    user = db.get(User, auth_headers.user_id)
    second_token, _ = issue_token(db, user)
    db.commit()

    assert client.post("/api/v1/auth/logout", headers=auth_headers).status_code == 200

    assert client.get("/api/v1/auth/me", headers=auth_headers).status_code == 401
    assert client.get("/api/v1/auth/me", headers=bearer(second_token)).status_code == 200
