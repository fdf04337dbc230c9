import pytest

import app.main as main_module
from app.domain.models.admin_record import AdminRecord
from app.domain.models.user import User
from app.infrastructure import database

from conftest import PASSWORD, USER_EMAIL


@pytest.fixture()
def bootstrap(monkeypatch, session_factory):
    monkeypatch.setattr(database, "SessionLocal", session_factory)

    def configure(email, password):
        monkeypatch.setattr(main_module.settings, "BOOTSTRAP_ADMIN_EMAIL", email)
        monkeypatch.setattr(main_module.settings, "BOOTSTRAP_ADMIN_PASSWORD", password)
        main_module._bootstrap_admin()

    return configure


def test_bootstrap_creates_configured_admin(bootstrap, session_factory):
    bootstrap("founder@example.org", PASSWORD)

    with session_factory() as db:
        user = db.query(User).filter_by(email="founder@example.org").one()
        assert db.query(AdminRecord).filter_by(user_id=user.id).count() == 1


def test_bootstrap_conflict_does_not_stop_startup(bootstrap, session_factory, regular_user):
    bootstrap(USER_EMAIL, "not-the-password")

    with session_factory() as db:
        assert db.query(AdminRecord).count() == 0


def test_bootstrap_is_skipped_once_setup_is_done(bootstrap, session_factory, admin_user):
    bootstrap("second@example.org", PASSWORD)

    with session_factory() as db:
        assert db.query(User).filter_by(email="second@example.org").first() is None
