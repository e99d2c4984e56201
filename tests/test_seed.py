"""Tests for the demo catalog seeder."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.data import demo_catalog
from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.scripts import seed as seed_script
from catalog_api.services import seed_service

DEMO_STATS = {
    "categories": 4,
    "attributes": 15,
    "attribute_values": 16,
    "products": 12,
    "product_attribute_values": 12,
}


class TestSeedService:
    """Tests for seed_service."""

    def test_seed_populates_demo_catalog(self, db):
        """Should insert the demo catalog into an empty database."""
        assert seed_service.seed(db) is True
        assert seed_service.catalog_stats(db) == DEMO_STATS

    def test_seed_is_idempotent(self, db):
        """A second seed is a no-op."""
        seed_service.seed(db)

        assert seed_service.seed(db) is False
        assert seed_service.catalog_stats(db) == DEMO_STATS

    def test_seed_skips_when_attributes_exist(self, db, create_attribute):
        """Any existing attribute blocks seeding."""
        create_attribute("Color")

        assert seed_service.seed(db) is False
        assert db.query(Category).count() == 0

    def test_reseed_twice_gives_same_counts(self, db, create_category):
        """Reseeding replaces existing data with the demo catalog."""
        create_category("Leftover")

        seed_service.reseed(db)
        assert seed_service.catalog_stats(db) == DEMO_STATS

        seed_service.reseed(db)
        assert seed_service.catalog_stats(db) == DEMO_STATS
        assert db.query(Category).filter(Category.name == "Leftover").count() == 0

    def test_failed_seed_leaves_nothing_behind(self, db, monkeypatch):
        """A seed that fails part way is rolled back as a whole."""
        broken = dict(demo_catalog.PRODUCTS[0], category="Garage")
        monkeypatch.setattr(demo_catalog, "PRODUCTS", [*demo_catalog.PRODUCTS, broken])

        with pytest.raises(KeyError):
            seed_service.seed(db)

        assert set(seed_service.catalog_stats(db).values()) == {0}

    def test_failed_reseed_keeps_existing_data(self, db, monkeypatch, create_category):
        """A reseed that fails does not wipe the catalog."""
        create_category("Leftover")
        broken = dict(demo_catalog.PRODUCTS[0], category="Garage")
        monkeypatch.setattr(demo_catalog, "PRODUCTS", [broken])

        with pytest.raises(KeyError):
            seed_service.reseed(db)

        assert [c.name for c in db.query(Category).all()] == ["Leftover"]
        assert seed_service.catalog_stats(db)["attributes"] == 0

    def test_seeded_products_are_linked(self, db):
        """Seeded products carry their category, image and attribute values."""
        seed_service.seed(db)

        shoes = db.query(Product).filter(Product.name.like("Nike%")).one()
        assert shoes.category.name == "Clothing"
        assert shoes.image_content_type == "image/jpeg"
        assert shoes.image_base64
        values = sorted(link.attribute_value.value for link in shoes.attribute_links)
        assert values == ["Black", "Nike", "S"]

    def test_shared_attributes_on_every_category(self, db):
        """Brand, Color and Material are attached to all demo categories."""
        seed_service.seed(db)

        for category in db.query(Category).all():
            names = {a.name for a in category.attributes}
            assert {"Brand", "Color", "Material"} <= names


class TestSeedEndpoints:
    """Tests for /database endpoints."""

    def test_seed_endpoint(self, client: TestClient):
        """Should seed once and then report a no-op."""
        first = client.post("/database/seed")
        assert first.status_code == 200
        assert first.json()["seeded"] is True
        assert first.json()["stats"]["productAttributeValues"] == 12

        second = client.post("/database/seed").json()
        assert second["seeded"] is False
        assert second["stats"]["products"] == 12

    def test_reseed_endpoint(self, client: TestClient, create_category):
        """Should wipe and repopulate."""
        create_category("Leftover")

        response = client.post("/database/reseed")
        assert response.status_code == 200

        data = response.json()
        assert data["seeded"] is True
        assert data["stats"]["categories"] == 4
        assert [c["name"] for c in client.get("/category/all").json()] == [
            "Electronics",
            "Clothing",
            "Books",
            "Home & Garden",
        ]


class TestSeedScript:
    """Tests for the seed command line."""

    def test_unknown_command(self, capsys):
        assert seed_script.main(["grow"]) == 1
        assert "Unknown command" in capsys.readouterr().out

    def test_no_command_prints_usage(self, capsys):
        assert seed_script.main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_seed_then_stats(self, monkeypatch, capsys, engine, session_factory):
        """Should seed the configured database and print counts."""

        def fake_get_db():
            session = session_factory()
            try:
                yield session
            finally:
                session.close()

        monkeypatch.setattr(seed_script, "get_db", fake_get_db)
        monkeypatch.setattr(seed_script, "create_tables", lambda: None)

        assert seed_script.main(["seed"]) == 0
        assert "Seeded demo catalog" in capsys.readouterr().out

        assert seed_script.main(["stats"]) == 0
        out = capsys.readouterr().out
        assert "Products: 12" in out
        assert "Attribute Values: 16" in out
