"""
Application FastAPI de CineShelf.

Initialise l'application web avec le Container DI et monte les routes
de l'API JSON.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from ..infrastructure.persistence.database import dispose_engine
from .routes.catalog import router as catalog_router
from .routes.imports import router as imports_router
from .routes.lookup import router as lookup_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage, libère les ressources à l'arrêt."""
    container = Container()
    container.database.init()
    app.state.container = container
    logger.info("API CineShelf démarrée")
    yield

    omdb_client = container.omdb_client()
    if omdb_client is not None:
        await omdb_client.close()
    container.api_cache().close()
    dispose_engine()


app = FastAPI(title="CineShelf", lifespan=lifespan)

# Routes
app.include_router(catalog_router)
app.include_router(imports_router)
app.include_router(lookup_router)
