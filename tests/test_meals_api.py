"""Meal creation, lookup, update and delete over HTTP."""
from uuid import uuid4

from database import models


def _only_meal_id(client):
    meals = client.get("/meal").json()["Meals"]
    assert len(meals) == 1
    return meals[0]["id"]


def test_create_meal_then_fetch_by_id(registered_client, lunch):
    """A created meal can be fetched by id with its diet flag."""
    resp = registered_client.post("/meal", json=lunch)
    assert resp.status_code == 201
    assert resp.content == b""

    meal_id = _only_meal_id(registered_client)
    body = registered_client.get(f"/meal/{meal_id}").json()

    assert body["Meal"]["id"] == meal_id
    assert body["Meal"]["itsontheDiet"] == "yes"
    assert body["Meal"]["description"] == "Rice and beans"
    assert body["Meal"]["session_id"] == registered_client.cookies.get("sessionId")


def test_create_meal_without_cookie_stores_null_session(client, db, lunch):
    """Meals logged without a cookie are stored with no session."""
    resp = client.post("/meal", json={**lunch, "type": "no"})

    assert resp.status_code == 201
    assert "set-cookie" not in resp.headers
    meal = db.query(models.Meal).one()
    assert meal.session_id is None
    assert meal.itsontheDiet == "no"


def test_create_meal_rejects_bad_diet_flag(registered_client, db, lunch):
    """An invalid diet flag returns 422 and stores nothing."""
    resp = registered_client.post("/meal", json={**lunch, "type": "maybe"})

    assert resp.status_code == 422
    fields = [e["field"] for e in resp.json()["error"]["details"]["validation_errors"]]
    assert "body.type" in fields
    assert db.query(models.Meal).count() == 0


def test_create_meal_rejects_missing_fields(registered_client, lunch):
    """A body missing a field returns 422."""
    payload = dict(lunch)
    del payload["hour"]
    resp = registered_client.post("/meal", json=payload)
    assert resp.status_code == 422


def test_fetch_unknown_meal_is_not_an_error(registered_client):
    """Fetching an unknown id returns 200 with a null Meal."""
    resp = registered_client.get(f"/meal/{uuid4()}")

    assert resp.status_code == 200
    assert resp.json() == {"Meal": None}


def test_fetch_other_sessions_meal_returns_null(registered_client, other_client, lunch):
    """A meal from another session is not visible."""
    registered_client.post("/meal", json=lunch)
    meal_id = _only_meal_id(registered_client)
    other_client.post("/", json={"name": "Carla"})

    resp = other_client.get(f"/meal/{meal_id}")

    assert resp.status_code == 200
    assert resp.json()["Meal"] is None


def test_fetch_requires_cookie(client):
    """Fetching a meal without a cookie returns 401."""
    assert client.get(f"/meal/{uuid4()}").status_code == 401


def test_fetch_rejects_malformed_id(registered_client):
    """A non-UUID id returns 422."""
    resp = registered_client.get("/meal/not-a-uuid")
    assert resp.status_code == 422


def test_update_meal_replaces_fields(registered_client, lunch):
    """Update replaces every mutable field."""
    registered_client.post("/meal", json=lunch)
    meal_id = _only_meal_id(registered_client)
    changes = {
        "name": "Dinner",
        "description": "Pizza",
        "date": "2024-01-02",
        "hour": "20:30",
        "type": "no",
    }

    resp = registered_client.put(f"/meal/update/{meal_id}", json=changes)

    assert resp.status_code == 200
    assert resp.text == "successfully update meal"
    meal = registered_client.get(f"/meal/{meal_id}").json()["Meal"]
    assert meal["name"] == "Dinner"
    assert meal["hour"] == "20:30"
    assert meal["itsontheDiet"] == "no"


def test_update_from_another_session_still_succeeds(registered_client, other_client, lunch):
    """Update matches on id only, so another session can rewrite a meal."""
    # update matches on id only; any session holding the id may rewrite it
    registered_client.post("/meal", json=lunch)
    meal_id = _only_meal_id(registered_client)
    other_client.post("/", json={"name": "Carla"})

    resp = other_client.put(f"/meal/update/{meal_id}", json={**lunch, "name": "Hijacked"})

    assert resp.status_code == 200
    meal = registered_client.get(f"/meal/{meal_id}").json()["Meal"]
    assert meal["name"] == "Hijacked"


def test_update_unknown_meal_succeeds_silently(client, lunch):
    """Updating an unknown id still returns the confirmation text."""
    resp = client.put(f"/meal/update/{uuid4()}", json=lunch)
    assert resp.status_code == 200
    assert resp.text == "successfully update meal"


def test_update_rejects_incomplete_body(client):
    """An incomplete update body returns 422."""
    resp = client.put(f"/meal/update/{uuid4()}", json={"name": "Dinner"})
    assert resp.status_code == 422


def test_delete_meal(registered_client, lunch):
    """Delete removes the meal and returns the confirmation text."""
    registered_client.post("/meal", json=lunch)
    meal_id = _only_meal_id(registered_client)

    resp = registered_client.delete(f"/meal/delete/{meal_id}")

    assert resp.status_code == 200
    assert resp.text == "successfully deleted meal"
    assert registered_client.get("/meal").json()["Meals"] == []


def test_delete_unknown_meal_returns_confirmation(client):
    """Deleting an unknown id still returns the confirmation text."""
    resp = client.delete(f"/meal/delete/{uuid4()}")

    assert resp.status_code == 200
    assert resp.text == "successfully deleted meal"


def test_delete_rejects_malformed_id(client):
    """Deleting with a non-UUID id returns 422."""
    assert client.delete("/meal/delete/42").status_code == 422
