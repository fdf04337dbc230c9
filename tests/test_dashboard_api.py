from decimal import Decimal

from sqlalchemy.exc import OperationalError

from app.domain.models.donation import Donation
from app.domain.models.subscriber import Subscriber
from app.interfaces.deps import get_subscriber_repository
from app.main import app


def _seed(session_factory):
    with session_factory() as db:
        db.add_all([
            Subscriber(email="one@example.org"),
            Subscriber(email="two@example.org"),
            Donation(amount=Decimal("100.00"), currency="INR", payment_id="pay_a"),
            Donation(amount=Decimal("250.50"), currency="INR", payment_id="pay_b"),
        ])
        db.commit()


def test_stats_count_everything(client, admin_headers, session_factory):
    _seed(session_factory)

    response = client.get("/api/admin/stats", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {
        "events": 0,
        "newsPosts": 0,
        "subscribers": 2,
        "donations": 2,
        "donationTotal": 350.5,
    }


def test_stats_are_admin_only(client, user_headers):
    assert client.get("/api/admin/stats").status_code == 401
    assert client.get("/api/admin/stats", headers=user_headers).status_code == 403


class _BrokenCounts:
    def count(self):
        raise OperationalError("SELECT count(*)", {}, Exception("disk I/O error"))


def test_failing_stat_reads_as_zero(client, admin_headers, session_factory):
    _seed(session_factory)
    app.dependency_overrides[get_subscriber_repository] = _BrokenCounts

    response = client.get("/api/admin/stats", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["subscribers"] == 0
    assert response.json()["donations"] == 2
