from app.domain.models.subscriber import Subscriber


def test_subscribe_rejects_invalid_email(client, session_factory):
    for body in ({}, {"email": ""}, {"email": "not-an-email"}):
        response = client.post("/api/subscribe", json=body)
        assert response.status_code == 400
    with session_factory() as db:
        assert db.query(Subscriber).count() == 0


def test_subscribe_stores_email(client, session_factory):
    response = client.post("/api/subscribe", json={"email": "a@b.com"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["subscriber"]["email"] == "a@b.com"

    with session_factory() as db:
        assert [s.email for s in db.query(Subscriber).all()] == ["a@b.com"]


def test_subscribe_twice_keeps_one_row(client, session_factory):
    first = client.post("/api/subscribe", json={"email": "reader@example.org"})
    second = client.post("/api/subscribe", json={"email": "  Reader@Example.org "})

    assert second.status_code == 200
    assert second.json()["message"] == "Already subscribed"
    assert second.json()["subscriber"]["id"] == first.json()["subscriber"]["id"]
    with session_factory() as db:
        assert db.query(Subscriber).count() == 1


def test_subscribers_list_is_admin_only(client, admin_headers, user_headers):
    client.post("/api/subscribe", json={"email": "reader@example.org"})

    assert client.get("/api/subscribers").status_code == 401
    assert client.get("/api/subscribers", headers=user_headers).status_code == 403
    response = client.get("/api/subscribers", headers=admin_headers)
    assert [s["email"] for s in response.json()] == ["reader@example.org"]


def test_contact_form(client):
    response = client.post(
        "/api/contact",
        json={"name": "Ravi", "email": "ravi@example.org", "subject": "Volunteering", "message": "Hi!"},
    )
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_contact_form_requires_fields(client):
    response = client.post("/api/contact", json={"name": "Ravi", "email": "ravi@example.org", "message": "  "})
    assert response.status_code == 400
    assert response.json()["message"] == "Please provide all required fields"
