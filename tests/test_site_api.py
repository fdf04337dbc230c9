from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import OperationalError

from app.main import app
from app.interfaces.deps import get_event_repository, get_menu_repository, get_news_repository


class _UnavailableStore:
    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("no such table"))

    list = count = list_active = get_with_filters = _fail


def _post(client, headers, path, body):
    response = client.post(path, json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _news(client, headers, **overrides):
    body = {"title": "Annual report", "content": "Numbers are in", "category": "News", "authorName": "Emma Rodriguez"}
    return _post(client, headers, "/api/news", {**body, **overrides})


def _future(days):
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


def test_empty_store_serves_placeholders(client):
    events = client.get("/api/site/events").json()
    news = client.get("/api/site/news").json()
    menu = client.get("/api/site/menu").json()

    assert events["placeholder"] is True
    assert len(events["items"]) == 3
    assert news["placeholder"] is True
    assert len(news["items"]) == 3
    assert menu["placeholder"] is True
    assert [i["title"] for i in menu["items"]] == ["Home", "About", "Events", "News", "Contact"]


def test_placeholder_events_are_upcoming(client):
    now = datetime.now(timezone.utc)
    items = client.get("/api/site/events").json()["items"]
    dates = [datetime.fromisoformat(i["date"].replace("Z", "+00:00")) for i in items]
    assert all(d > now for d in dates)


def test_placeholder_news_respects_category(client):
    items = client.get("/api/site/news", params={"category": "Announcement"}).json()["items"]
    assert [i["category"] for i in items] == ["Announcement"]


def test_placeholder_news_respects_search_text(client):
    items = client.get("/api/site/news", params={"q": "scholarship"}).json()["items"]
    assert [i["title"] for i in items] == ["Scholarship Program Helps 30 Students Achieve College Dreams"]

    assert client.get("/api/site/news", params={"q": "nothing-like-this"}).json() == {
        "items": [],
        "placeholder": True,
    }


def test_real_content_replaces_placeholders(client, admin_headers):
    _post(
        client,
        admin_headers,
        "/api/events",
        {"title": "Beach Cleanup", "description": "Bring gloves", "date": _future(3), "location": "North Beach"},
    )
    _news(client, admin_headers)
    _post(client, admin_headers, "/api/menu", {"title": "Donate", "path": "/donate", "order": 1})

    events = client.get("/api/site/events").json()
    assert events["placeholder"] is False
    assert [e["title"] for e in events["items"]] == ["Beach Cleanup"]

    news = client.get("/api/site/news").json()
    assert news["placeholder"] is False
    assert [n["title"] for n in news["items"]] == ["Annual report"]

    menu = client.get("/api/site/menu").json()
    assert menu["placeholder"] is False
    assert [m["title"] for m in menu["items"]] == ["Donate"]


def test_news_filter_with_no_matches_is_not_placeholder(client, admin_headers):
    _news(client, admin_headers)
    news = client.get("/api/site/news", params={"q": "nothing-like-this"}).json()
    assert news == {"items": [], "placeholder": False}


def test_inactive_menu_items_are_hidden(client, admin_headers):
    _post(client, admin_headers, "/api/menu", {"title": "Home", "path": "/", "order": 1})
    _post(client, admin_headers, "/api/menu", {"title": "Drafts", "path": "/drafts", "order": 2, "isActive": False})

    menu = client.get("/api/site/menu").json()
    assert [m["title"] for m in menu["items"]] == ["Home"]


def test_all_inactive_menu_falls_back_to_defaults(client, admin_headers):
    _post(client, admin_headers, "/api/menu", {"title": "Drafts", "path": "/drafts", "order": 1, "isActive": False})

    menu = client.get("/api/site/menu").json()
    assert menu["placeholder"] is True
    assert menu["items"][0]["title"] == "Home"


def test_store_failure_serves_placeholders(client):
    for dependency in (get_event_repository, get_news_repository, get_menu_repository):
        app.dependency_overrides[dependency] = _UnavailableStore

    assert client.get("/api/site/events").json()["placeholder"] is True
    assert client.get("/api/site/news").json()["placeholder"] is True
    assert client.get("/api/site/menu").json()["placeholder"] is True
