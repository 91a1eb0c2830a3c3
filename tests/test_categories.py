ITEMS_URL = "/api/inventory/items"


def create_category(client, headers, name, **extra):
    return client.post("/api/categories", json={"name": name, **extra}, headers=headers)


def test_create_and_list_categories(client, auth_headers):
    assert create_category(client, auth_headers, "Produce").status_code == 201
    assert create_category(client, auth_headers, "Dairy", description="Milk and cheese").status_code == 201

    categories = client.get("/api/categories", headers=auth_headers).json()
    assert [c["name"] for c in categories] == ["Dairy", "Produce"]


def test_category_names_are_unique_ignoring_case(client, auth_headers):
    create_category(client, auth_headers, "Produce")

    response = create_category(client, auth_headers, "produce")
    assert response.status_code == 409
    assert response.json()["status_code"] == "2002"


def test_update_category(client, auth_headers):
    produce = create_category(client, auth_headers, "Produce").json()
    create_category(client, auth_headers, "Dairy")

    url = f"/api/settings/categories/{produce['id']}"
    response = client.put(url, json={"name": "Fresh Produce"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Fresh Produce"

    assert client.put(url, json={"name": "DAIRY"}, headers=auth_headers).status_code == 409


def test_delete_category_orphans_items(client, auth_headers, make_item):
    produce = create_category(client, auth_headers, "Produce").json()
    item = make_item(categoryId=produce["id"])
    assert item["category_name"] == "Produce"

    response = client.delete(f"/api/settings/categories/{produce['id']}", headers=auth_headers)
    assert response.status_code == 200

    orphan = client.get(f"{ITEMS_URL}/{item['id']}", headers=auth_headers).json()
    assert orphan["category_id"] is None
    assert orphan["category_name"] == "Uncategorized"
    assert client.get("/api/categories", headers=auth_headers).json() == []


def test_delete_unknown_category(client, auth_headers):
    response = client.delete(
        "/api/settings/categories/00000000-0000-0000-0000-000000000000", headers=auth_headers)
    assert response.status_code == 404
