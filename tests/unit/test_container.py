"""
Tests du cablage du Container DI.
"""

from dependency_injector import providers

from src.adapters.api.omdb_client import OMDbClient
from src.adapters.csv.tabular_parser import CsvDialect
from src.config import Settings
from src.container import Container


def _container(settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    return container


class TestContainer:
    def test_parser_follows_configured_dialect(self, tmp_path):
        settings = Settings(_env_file=None, csv_dialect="standard", api_cache_dir=tmp_path)
        assert _container(settings).tabular_parser().dialect == CsvDialect.STANDARD

    def test_normalizer_uses_configured_cover(self, tmp_path):
        settings = Settings(
            _env_file=None,
            default_cover_url="https://example.com/none.png",
            api_cache_dir=tmp_path,
        )
        movie = _container(settings).row_normalizer().normalize({"name": "Heat", "year": "1995"})
        assert movie.cover_url == "https://example.com/none.png"

    def test_lookup_disabled_without_key(self, test_settings):
        container = _container(test_settings)
        assert container.omdb_client() is None
        assert container.lookup_service().enabled is False

    def test_lookup_enabled_with_key(self, tmp_path):
        settings = Settings(_env_file=None, omdb_api_key="key", api_cache_dir=tmp_path / "cache")
        container = _container(settings)
        try:
            assert isinstance(container.omdb_client(), OMDbClient)
            assert container.lookup_service().enabled is True
        finally:
            container.api_cache().close()
