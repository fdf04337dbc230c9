import hashlib
import hmac
import os
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "tests-secret-key"
os.environ["ADMIN_SETUP_TOKEN"] = ""
os.environ["BOOTSTRAP_ADMIN_EMAIL"] = ""
os.environ["RAZORPAY_KEY_ID"] = "rzp_test_key"
os.environ["RAZORPAY_KEY_SECRET"] = "rzp_test_secret"
os.environ["RAZORPAY_WEBHOOK_SECRET"] = "rzp_webhook_secret"
os.environ["MEDIA_DIR"] = str(Path(tempfile.gettempdir()) / "nonprofit-site-tests-media")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.application.services.auth_service import create_access_token, hash_password
from app.domain.models.user import User
from app.infrastructure.database import Base, get_db
from app.infrastructure.media_storage import MediaStorage
from app.infrastructure.razorpay_api import PaymentGatewayError, RazorpayClient
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.interfaces.deps import get_media_storage, get_payment_gateway

ADMIN_EMAIL = "admin@example.org"
USER_EMAIL = "volunteer@example.org"
PASSWORD = "correct-horse-battery"


class FakeGateway(RazorpayClient):
    """Razorpay stand-in: real signature checks, canned API responses."""

    def __init__(self):
        super().__init__(
            key_id="rzp_test_key",
            key_secret="rzp_test_secret",
            webhook_secret="rzp_webhook_secret",
        )
        self.orders: dict[str, dict] = {}
        self.payments: dict[str, dict] = {}
        self.fail_with: str | None = None

    async def create_order(self, amount_minor, currency, receipt, notes=None):
        if self.fail_with:
            raise PaymentGatewayError(self.fail_with, 400)
        order_id = f"order_{len(self.orders) + 1:04d}"
        self.orders[order_id] = {
            "id": order_id,
            "amount": amount_minor,
            "currency": currency,
            "receipt": receipt,
            "notes": notes or {},
            "status": "created",
        }
        return self.orders[order_id]

    async def fetch_order(self, order_id):
        if order_id not in self.orders:
            raise PaymentGatewayError("The id provided does not exist", 400)
        return self.orders[order_id]

    async def fetch_payment(self, payment_id):
        if payment_id not in self.payments:
            raise PaymentGatewayError("The id provided does not exist", 400)
        return self.payments[payment_id]

    def add_payment(self, payment_id, order_id, status="captured"):
        order = self.orders[order_id]
        self.payments[payment_id] = {
            "id": payment_id,
            "order_id": order_id,
            "amount": order["amount"],
            "currency": order["currency"],
            "status": status,
            "email": "payer@example.org",
            "notes": {},
        }
        return self.payments[payment_id]

    def checkout_signature(self, order_id, payment_id):
        message = f"{order_id}|{payment_id}".encode("utf-8")
        return hmac.new(b"rzp_test_secret", message, hashlib.sha256).hexdigest()

    def webhook_signature(self, body: bytes):
        return hmac.new(b"rzp_webhook_secret", body, hashlib.sha256).hexdigest()


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def gateway():
    return FakeGateway()


@pytest.fixture()
def media_root(tmp_path):
    return tmp_path / "media"


@pytest.fixture()
def client(session_factory, gateway, media_root):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    app.dependency_overrides[get_media_storage] = lambda: MediaStorage(root=str(media_root), url_prefix="/media")
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}


@pytest.fixture()
def admin_user(db_session):
    repo = SQLAlchemyUserRepository(db_session, User)
    user = User(username="admin", email=ADMIN_EMAIL, password_hash=hash_password(PASSWORD))
    return repo.complete_admin_setup(user)


@pytest.fixture()
def regular_user(db_session):
    repo = SQLAlchemyUserRepository(db_session, User)
    return repo.create({
        "username": "volunteer",
        "email": USER_EMAIL,
        "password_hash": hash_password(PASSWORD),
    })


@pytest.fixture()
def admin_headers(admin_user):
    return _auth_headers(admin_user)


@pytest.fixture()
def user_headers(regular_user):
    return _auth_headers(regular_user)
