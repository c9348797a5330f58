import pytest
from sqlalchemy.orm import Session


@pytest.mark.parametrize("path", ["/health", "/check-server"])
def test_health(client, path):
    response = client.get(path)
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_category_success(client):
    response = client.post("/categories", json={"name": "Investigação"})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Investigação"
    assert "id" in data


def test_create_category_empty_name(client):
    response = client.post("/categories", json={"name": ""})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_create_category_missing_name(client):
    response = client.post("/categories", json={})
    assert response.status_code == 400


def test_create_category_duplicate(client, category):
    response = client.post("/categories", json={"name": category.name})
    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_RESOURCE"


def test_create_category_duplicate_on_write(db: Session, category):
    """The unique constraint still reports a duplicate that slipped past the lookup."""
    from boardcamp.errors import DuplicateResourceError
    from boardcamp.repositories.category import create_category, list_categories

    with pytest.raises(DuplicateResourceError):
        create_category(db, name=category.name)

    assert [c.name for c in list_categories(db)] == ["Strategy"]


def test_list_categories(client, db: Session):
    from boardcamp.repositories.category import create_category

    for name in ("Strategy", "Party", "Cooperative"):
        create_category(db, name=name)

    response = client.get("/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Strategy", "Party", "Cooperative"]

    by_name = client.get("/categories", params={"order": "name"}).json()
    assert [c["name"] for c in by_name] == ["Cooperative", "Party", "Strategy"]

    page = client.get("/categories", params={"offset": 1, "limit": 1}).json()
    assert [c["name"] for c in page] == ["Party"]


def test_list_categories_unknown_order_is_ignored(client, db: Session):
    from boardcamp.repositories.category import create_category

    create_category(db, name="B")
    create_category(db, name="A")

    response = client.get("/categories", params={"order": "name; DROP TABLE categories"})
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["B", "A"]


def test_list_categories_empty(client):
    response = client.get("/categories")
    assert response.status_code == 200
    assert response.json() == []
