"""Shared fixtures for catalog tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from catalog_api.main import app
from catalog_api.models.attribute import AttributeValue
from catalog_api.models.database import create_tables, get_db, make_engine


@pytest.fixture
def engine(tmp_path):
    """Create a fresh SQLite database for each test."""
    engine = make_engine(f"sqlite:///{tmp_path / 'catalog_test.db'}")
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Database session for service-level tests."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """Create test client bound to the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def value_id(session_factory):
    """Look up the ID of an attribute value by attribute ID and literal."""

    def lookup(attribute_id: int, value: str) -> int:
        session = session_factory()
        try:
            row = (
                session.query(AttributeValue)
                .filter(
                    AttributeValue.category_attribute_id == attribute_id,
                    AttributeValue.value == value,
                )
                .one()
            )
            return row.id
        finally:
            session.close()

    return lookup


@pytest.fixture
def create_category(client):
    """Create a category through the API and return its JSON."""

    def create(name: str = "Electronics", **extra) -> dict:
        response = client.post("/category", json={"name": name, **extra})
        assert response.status_code == 201, response.text
        return response.json()

    return create


@pytest.fixture
def create_attribute(client):
    """Create an attribute through the API and return its JSON."""

    def create(name: str = "Color", values: list[str] | None = None, **extra) -> dict:
        body = {"name": name, **extra}
        if values is not None:
            body["values"] = values
        response = client.post("/attribute", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return create


@pytest.fixture
def create_product(client):
    """Create a product through the multipart API and return its JSON."""

    def create(
        category_id: int,
        name: str = "Phone",
        price: str = "99.99",
        attribute_value_ids: list[int] | None = None,
        image: tuple[str, bytes, str] | None = None,
        **extra,
    ) -> dict:
        data = {
            "name": name,
            "price": price,
            "stockQuantity": "5",
            "categoryId": str(category_id),
            **extra,
        }
        if attribute_value_ids is not None:
            data["attributeValueIds"] = [str(i) for i in attribute_value_ids]
        files = {"image": image} if image else None
        response = client.post("/product", data=data, files=files)
        assert response.status_code == 201, response.text
        return response.json()

    return create


@pytest.fixture
def deleted_after_get(monkeypatch, session_factory):
    """Make a service's ``get`` delete the row from another session.

    The service still receives the loaded entity, so its next write hits a
    row that no longer exists.
    """

    def install(service) -> None:
        load = service.get

        def get_then_delete(entity_id: int):
            entity = load(entity_id)
            other = session_factory()
            try:
                other_service = type(service)(other)
                row = other_service.get(entity_id)
                if row is not None:
                    other_service.delete(row)
            finally:
                other.close()
            return entity

        monkeypatch.setattr(service, "get", get_then_delete)

    return install
