"""Pydantic schemas for database maintenance endpoints."""

from catalog_api.schemas.base import CamelModel


class CatalogStats(CamelModel):
    """Row counts per catalog table."""

    categories: int
    attributes: int
    attribute_values: int
    products: int
    product_attribute_values: int


class SeedResponse(CamelModel):
    """Result of a seed or reseed run."""

    message: str
    seeded: bool
    stats: CatalogStats
