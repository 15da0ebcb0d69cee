"""
Dépendances partagées de l'application web.

Fournit les services construits par le Container DI stocké dans
app.state (voir le lifespan de app.py). Les routes les reçoivent via
Depends(), ce qui permet de les remplacer dans les tests.
"""

from fastapi import Request

from ..container import Container
from ..services.catalog import CatalogService
from ..services.catalog_importer import CatalogImportService
from ..services.lookup import LookupService


def get_container(request: Request) -> Container:
    """Retourne le Container initialisé au démarrage."""
    return request.app.state.container


def get_catalog_service(request: Request) -> CatalogService:
    return get_container(request).catalog_service()


def get_import_service(request: Request) -> CatalogImportService:
    return get_container(request).import_service()


def get_lookup_service(request: Request) -> LookupService:
    return get_container(request).lookup_service()


def get_error_preview(request: Request) -> int:
    """Nombre de messages d'erreur renvoyés dans un résumé d'import."""
    return get_container(request).config().import_error_preview
