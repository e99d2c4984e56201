"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
from catalog_api.models.database import create_tables, get_db
from catalog_api.services import seed_service
from catalog_api.api import categories, attributes, products, database

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    create_tables()

    if settings.seed_on_startup:
        db = next(get_db())
        try:
            seed_service.seed(db)
        finally:
            db.close()

    yield


app = FastAPI(
    title="E-commerce Catalog API",
    description="Categories, attributes and products for an online store catalog",
    version=VERSION,
    lifespan=lifespan,
)

# Include routers
app.include_router(categories.router, prefix="/category", tags=["Categories"])
app.include_router(attributes.router, prefix="/attribute", tags=["Attributes"])
app.include_router(products.router, prefix="/product", tags=["Products"])
app.include_router(database.router, prefix="/database", tags=["Database"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed requests with 400 instead of 422."""
    logger.info(f"Invalid request to {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "E-commerce Catalog API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
    }


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
