from sqlalchemy.exc import OperationalError

from app.application.services.auth_service import is_admin
from app.domain.models.admin_record import AdminRecord
from app.domain.models.site_setting import ADMIN_SETUP_COMPLETED, SiteSetting
from app.domain.models.user import User
from app.interfaces.api import auth as auth_routes

from conftest import ADMIN_EMAIL, PASSWORD, USER_EMAIL


def _register(client, username="friend", email="friend@example.org", password=PASSWORD):
    return client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )


def test_register_login_and_me(client):
    created = _register(client)
    assert created.status_code == 201
    assert created.json()["isAdmin"] is False
    assert "passwordHash" not in created.json()

    login = client.post("/api/auth/login", json={"email": "Friend@Example.org", "password": PASSWORD})
    assert login.status_code == 200
    body = login.json()
    assert body["tokenType"] == "bearer"
    assert body["isAdmin"] is False

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['accessToken']}"})
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "friend@example.org"
    assert me.json()["isAdmin"] is False


def test_register_rejects_duplicates(client):
    assert _register(client).status_code == 201
    assert _register(client, username="other").status_code == 400
    assert _register(client, email="other@example.org").status_code == 400


def test_register_requires_fields(client):
    response = client.post("/api/auth/register", json={"username": "x", "email": "x@example.org"})
    assert response.status_code == 400


def test_login_with_wrong_password_is_unauthorized(client, regular_user):
    response = client.post("/api/auth/login", json={"email": USER_EMAIL, "password": "nope"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password."


def test_me_requires_valid_token(client):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_admin_session_reports_admin(client, admin_headers):
    me = client.get("/api/auth/me", headers=admin_headers)
    assert me.json()["isAdmin"] is True


def test_setup_creates_first_admin_once(client, session_factory):
    first = client.post(
        "/api/auth/setup",
        json={"username": "founder", "email": "founder@example.org", "password": PASSWORD},
    )
    assert first.status_code == 201
    assert first.json()["isAdmin"] is True
    assert first.json()["user"]["isAdmin"] is True

    second = client.post(
        "/api/auth/setup",
        json={"username": "intruder", "email": "intruder@example.org", "password": PASSWORD},
    )
    assert second.status_code == 403

    with session_factory() as db:
        assert db.query(AdminRecord).count() == 1
        assert db.query(User).filter_by(email="intruder@example.org").first() is None


def test_setup_stays_closed_after_admins_are_removed(client, session_factory, admin_user):
    with session_factory() as db:
        db.query(AdminRecord).delete()
        db.query(User).delete()
        db.commit()
        assert db.get(SiteSetting, ADMIN_SETUP_COMPLETED) is not None

    response = client.post(
        "/api/auth/setup",
        json={"username": "late", "email": "late@example.org", "password": PASSWORD},
    )
    assert response.status_code == 403


def test_setup_promotes_existing_account_with_matching_password(client, regular_user):
    response = client.post(
        "/api/auth/setup",
        json={"username": "volunteer", "email": USER_EMAIL, "password": PASSWORD},
    )
    assert response.status_code == 201
    assert response.json()["user"]["id"] == regular_user.id
    assert response.json()["isAdmin"] is True


def test_setup_rejects_existing_account_with_wrong_password(client, regular_user):
    response = client.post(
        "/api/auth/setup",
        json={"username": "volunteer", "email": USER_EMAIL, "password": "guess"},
    )
    assert response.status_code == 400


def test_setup_checks_token_when_configured(client, monkeypatch):
    monkeypatch.setattr(auth_routes.settings, "ADMIN_SETUP_TOKEN", "let-me-in")
    payload = {"username": "founder", "email": "founder@example.org", "password": PASSWORD}

    assert client.post("/api/auth/setup", json=payload).status_code == 403
    assert client.post("/api/auth/setup", json=payload, headers={"X-Setup-Token": "wrong"}).status_code == 403
    assert client.post("/api/auth/setup", json=payload, headers={"X-Setup-Token": "let-me-in"}).status_code == 201


def test_grant_and_revoke_admin(client, admin_headers, regular_user, user_headers):
    assert client.get("/api/admin/users", headers=user_headers).status_code == 403

    granted = client.put(f"/api/admin/users/{regular_user.id}/admin", json={"isAdmin": True}, headers=admin_headers)
    assert granted.status_code == 200
    assert granted.json()["isAdmin"] is True
    assert client.get("/api/admin/users", headers=user_headers).status_code == 200

    revoked = client.put(f"/api/admin/users/{regular_user.id}/admin", json={"isAdmin": False}, headers=admin_headers)
    assert revoked.json()["isAdmin"] is False
    assert client.get("/api/admin/users", headers=user_headers).status_code == 403


def test_admin_cannot_revoke_self(client, admin_user, admin_headers):
    response = client.put(f"/api/admin/users/{admin_user.id}/admin", json={"isAdmin": False}, headers=admin_headers)
    assert response.status_code == 422


def test_grant_unknown_user_is_not_found(client, admin_headers):
    response = client.put("/api/admin/users/9999/admin", json={"isAdmin": True}, headers=admin_headers)
    assert response.status_code == 404


def test_list_users_for_admin(client, admin_headers, regular_user):
    response = client.get("/api/admin/users", headers=admin_headers)
    assert sorted(u["email"] for u in response.json()) == [ADMIN_EMAIL, USER_EMAIL]


def test_profile_flag_alone_grants_admin(client, session_factory, regular_user, user_headers):
    with session_factory() as db:
        db.get(User, regular_user.id).is_admin = True
        db.commit()

    assert client.get("/api/auth/me", headers=user_headers).json()["isAdmin"] is True


class _BrokenAdminStore:
    def get_admin_record(self, user_id):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))


def test_admin_check_fails_closed_on_store_error():
    user = User(id=1, username="x", email="x@example.org", password_hash="-", is_admin=True)
    assert is_admin(_BrokenAdminStore(), user) is False
