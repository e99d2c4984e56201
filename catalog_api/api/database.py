"""Database maintenance endpoints."""

from fastapi import APIRouter

from catalog_api.dependencies import DbSession
from catalog_api.schemas.database import SeedResponse
from catalog_api.services import seed_service

router = APIRouter()


@router.post("/seed", response_model=SeedResponse)
async def seed_database(db: DbSession):
    """Seed the demo catalog.

    Does nothing if categories or attributes already exist.
    """
    seeded = seed_service.seed(db)
    message = (
        "Database seeded successfully"
        if seeded
        else "Database already contains data, nothing seeded"
    )
    return SeedResponse(
        message=message,
        seeded=seeded,
        stats=seed_service.catalog_stats(db),
    )


@router.post("/reseed", response_model=SeedResponse)
async def reseed_database(db: DbSession):
    """Delete all catalog data and seed the demo catalog again."""
    seed_service.reseed(db)
    return SeedResponse(
        message="Database reseeded successfully",
        seeded=True,
        stats=seed_service.catalog_stats(db),
    )
