"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache
from .adapters.api.omdb_client import OMDbClient
from .adapters.csv.tabular_parser import TabularParser
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelMovieRepository
from .services.catalog import CatalogService
from .services.catalog_importer import CatalogImportService
from .services.lookup import LookupService
from .services.normalizer import RowNormalizer


def _build_lookup_client(settings: Settings, cache: APICache):
    """Cree le client OMDb, ou None si aucune cle n'est configuree."""
    if not settings.lookup_enabled:
        return None
    return OMDbClient(api_key=settings.omdb_api_key, cache=cache)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        importer = container.import_service()
        report = importer.import_text(text)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(
        init_db,
        database_url=config.provided.database_url,
    )

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repository - Factory pour nouvelle instance avec session fraiche
    movie_repository = providers.Factory(
        SQLModelMovieRepository,
        session=session,
    )

    # Import CSV (stateless - Singletons)
    tabular_parser = providers.Singleton(
        TabularParser,
        dialect=config.provided.csv_dialect,
    )
    row_normalizer = providers.Singleton(
        RowNormalizer,
        default_cover_url=config.provided.default_cover_url,
    )

    # Service d'import - Factory car depend du repository (session fraiche)
    import_service = providers.Factory(
        CatalogImportService,
        movie_repo=movie_repository,
        parser=tabular_parser,
        normalizer=row_normalizer,
    )

    catalog_service = providers.Factory(
        CatalogService,
        movie_repo=movie_repository,
    )

    # Cache API - Singleton partage
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.api_cache_dir,
    )

    # Client OMDb - None si la cle API n'est pas definie
    omdb_client = providers.Singleton(
        _build_lookup_client,
        settings=config,
        cache=api_cache,
    )

    lookup_service = providers.Factory(
        LookupService,
        lookup_client=omdb_client,
    )
