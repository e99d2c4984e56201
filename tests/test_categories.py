"""Tests for category endpoints."""

from fastapi.testclient import TestClient

from catalog_api.schemas.category import CategoryCreate
from catalog_api.services.category_service import CategoryService


class TestCreateCategory:
    """Tests for POST /category."""

    def test_create_returns_requested_fields(self, client: TestClient, create_attribute):
        """Should echo name, description and the requested attributes."""
        color = create_attribute("Color")
        size = create_attribute("Size")

        response = client.post(
            "/category",
            json={
                "name": "Clothing",
                "description": "Apparel",
                "attributeIds": [color["id"], size["id"]],
            },
        )
        assert response.status_code == 201

        data = response.json()
        assert data["name"] == "Clothing"
        assert data["description"] == "Apparel"
        assert data["createdAt"] is not None
        assert data["updatedAt"] is None
        assert [a["id"] for a in data["attributes"]] == [color["id"], size["id"]]

    def test_get_after_create_matches(self, client: TestClient, create_attribute):
        """Should read back exactly what was created, dropping unknown IDs."""
        color = create_attribute("Color")
        created = client.post(
            "/category",
            json={"name": "Clothing", "attributeIds": [color["id"], 9999]},
        ).json()

        response = client.get(f"/category/{created['id']}")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Clothing"
        assert data["description"] is None
        assert data["attributes"] == [
            {"id": color["id"], "name": "Color", "description": None}
        ]

    def test_attribute_summaries_have_no_values(self, client: TestClient, create_attribute):
        """Attributes listed under a category should not carry values."""
        color = create_attribute("Color", values=["Red"])
        data = client.post(
            "/category", json={"name": "Clothing", "attributeIds": [color["id"]]}
        ).json()

        assert "values" not in data["attributes"][0]

    def test_create_requires_name(self, client: TestClient):
        """Should reject a missing name with 400."""
        response = client.post("/category", json={"description": "No name"})
        assert response.status_code == 400

    def test_create_rejects_long_name(self, client: TestClient):
        """Should reject names over 100 characters."""
        response = client.post("/category", json={"name": "x" * 101})
        assert response.status_code == 400


class TestReadCategories:
    """Tests for GET /category endpoints."""

    def test_list_all(self, client: TestClient, create_category):
        """Should list every category."""
        create_category("Electronics")
        create_category("Books")

        response = client.get("/category/all")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Electronics", "Books"]

    def test_get_not_found(self, client: TestClient):
        """Should return 404 for an unknown category."""
        response = client.get("/category/9999")
        assert response.status_code == 404


class TestUpdateCategory:
    """Tests for PUT /category/{id}."""

    def test_update_scalars_and_stamp(self, client: TestClient, create_category):
        """Should overwrite name/description and set updatedAt."""
        category = create_category("Electronics", description="Old")

        response = client.put(
            f"/category/{category['id']}",
            json={"name": "Gadgets"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Gadgets"
        assert data["description"] is None
        assert data["updatedAt"] is not None

    def test_omitted_attribute_ids_keep_attributes(
        self, client: TestClient, create_category, create_attribute
    ):
        """Omitting attributeIds should leave associations untouched."""
        color = create_attribute("Color")
        category = create_category("Clothing", attributeIds=[color["id"]])

        data = client.put(f"/category/{category['id']}", json={"name": "Apparel"}).json()
        assert [a["id"] for a in data["attributes"]] == [color["id"]]

    def test_empty_attribute_ids_detach_all(
        self, client: TestClient, create_category, create_attribute
    ):
        """An empty attributeIds list should detach every attribute."""
        color = create_attribute("Color")
        size = create_attribute("Size")
        category = create_category("Clothing", attributeIds=[color["id"], size["id"]])

        data = client.put(
            f"/category/{category['id']}",
            json={"name": "Clothing", "attributeIds": []},
        ).json()
        assert data["attributes"] == []

        # The attributes themselves survive
        assert client.get(f"/attribute/{color['id']}").status_code == 200

    def test_attribute_ids_replace_set(
        self, client: TestClient, create_category, create_attribute
    ):
        """A new attributeIds list should replace, not merge."""
        color = create_attribute("Color")
        size = create_attribute("Size")
        category = create_category("Clothing", attributeIds=[color["id"]])

        data = client.put(
            f"/category/{category['id']}",
            json={"name": "Clothing", "attributeIds": [size["id"]]},
        ).json()
        assert [a["id"] for a in data["attributes"]] == [size["id"]]

    def test_update_not_found(self, client: TestClient):
        """Should return 404 for an unknown category."""
        response = client.put("/category/9999", json={"name": "Nothing"})
        assert response.status_code == 404


class TestDeleteCategory:
    """Tests for DELETE /category/{id}."""

    def test_delete(self, client: TestClient, create_category, create_attribute):
        """Should delete the category but keep its attributes."""
        color = create_attribute("Color")
        category = create_category("Clothing", attributeIds=[color["id"]])

        response = client.delete(f"/category/{category['id']}")
        assert response.status_code == 204
        assert client.get(f"/category/{category['id']}").status_code == 404
        assert client.get(f"/attribute/{color['id']}").status_code == 200

    def test_delete_not_found(self, client: TestClient):
        """Should return 404 for an unknown category."""
        assert client.delete("/category/9999").status_code == 404

    def test_delete_with_products_is_rejected(
        self, client: TestClient, create_category, create_product
    ):
        """Should refuse to delete a category that products still use."""
        category = create_category("Electronics")
        create_product(category["id"])

        response = client.delete(f"/category/{category['id']}")
        assert response.status_code == 400
        assert "associated products" in response.json()["detail"]
        assert client.get(f"/category/{category['id']}").status_code == 200


class TestCategoryService:
    """Service-level checks for CategoryService."""

    def test_update_of_concurrently_deleted_category(
        self, db, create_category, create_attribute, deleted_after_get
    ):
        """A category deleted while being updated reads as not found."""
        color = create_attribute("Color")
        category = create_category("Clothing")
        service = CategoryService(db)
        deleted_after_get(service)

        updated = service.update(
            category["id"],
            CategoryCreate(name="Apparel", attribute_ids=[color["id"]]),
        )

        assert updated is None
        assert CategoryService(db).get(category["id"]) is None
