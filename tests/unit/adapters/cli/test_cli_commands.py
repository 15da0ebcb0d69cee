"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- import: rapport, erreurs bloquantes, choix du dialecte
- list / show / add / edit / delete / genres
- lookup: recherche desactivee, fiche trouvee ou non
- aide globale et presence des commandes
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from src.adapters.cli.commands.catalog_commands import (
    _add_async,
    _collect_overrides,
    _delete_async,
    _edit_async,
    _genres_async,
    _list_movies_async,
    _show_async,
)
from src.adapters.cli.commands.import_commands import _import_catalog_async
from src.adapters.cli.commands.lookup_commands import _lookup_async
from src.adapters.csv.tabular_parser import CsvDialect, TabularParser
from src.core.entities.media import Movie, MovieFormat
from src.core.ports.api_clients import LookupResult
from src.services.catalog import CatalogService
from src.services.catalog_importer import CatalogImportService
from src.services.normalizer import RowNormalizer

# Chemins de patch des sous-modules
_IMPORT = "src.adapters.cli.commands.import_commands"
_CATALOG = "src.adapters.cli.commands.catalog_commands"
_LOOKUP = "src.adapters.cli.commands.lookup_commands"
_DISPLAY = "src.adapters.cli.display"

runner = CliRunner()


def _printed(mock_console: MagicMock) -> str:
    return "\n".join(str(call) for call in mock_console.print.call_args_list)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_container():
    """Mock le Container pour les tests.

    Patche Container dans helpers.py car c'est la que le decorateur
    @with_container() l'importe et l'instancie.
    """
    with patch("src.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.database.init = MagicMock()
        container_instance.config.return_value = MagicMock(import_error_preview=5)
        yield container_instance


@pytest.fixture
def catalog_container(mock_container, movie_repository):
    """Container dont le service catalogue utilise la base en memoire."""
    mock_container.catalog_service.return_value = CatalogService(movie_repository)
    return mock_container


# ============================================================================
# import
# ============================================================================


class TestImportCommand:
    """Tests pour la commande import."""

    @pytest.fixture
    def importer(self, mock_container, mock_movie_repository):
        service = CatalogImportService(
            movie_repo=mock_movie_repository,
            parser=TabularParser(),
            normalizer=RowNormalizer(),
        )
        mock_container.import_service.return_value = service
        return service

    @pytest.mark.asyncio
    async def test_import_shows_summary(self, mock_container, importer, tmp_path):
        csv_file = tmp_path / "movies.csv"
        csv_file.write_text("name,year\nHeat,1995\n,2000\n", encoding="utf-8")

        with patch(f"{_IMPORT}.console"), patch(f"{_DISPLAY}.console") as display_console:
            await _import_catalog_async(csv_file, None, None)

        output = _printed(display_console)
        assert "1" in output and "importe" in output
        assert "Row 3: Missing required fields (name, year)" in output
        mock_container.database.init.assert_called_once()

    @pytest.mark.asyncio
    async def test_import_truncates_errors(self, mock_container, importer, tmp_path):
        csv_file = tmp_path / "movies.csv"
        lines = ["name,year"] + [f"Film {i},abc" for i in range(8)]
        csv_file.write_text("\n".join(lines), encoding="utf-8")

        with patch(f"{_IMPORT}.console"), patch(f"{_DISPLAY}.console") as display_console:
            await _import_catalog_async(csv_file, None, None)

        output = _printed(display_console)
        assert "Row 6:" in output
        assert "Row 7:" not in output
        assert "... et 3 autre(s) erreur(s)" in output

    @pytest.mark.asyncio
    async def test_import_lists_skipped_lines(self, mock_container, importer, tmp_path):
        csv_file = tmp_path / "movies.csv"
        csv_file.write_text("name,year\nHeat,1995\nA,B,C\n", encoding="utf-8")

        with patch(f"{_IMPORT}.console"), patch(f"{_DISPLAY}.console") as display_console:
            await _import_catalog_async(csv_file, None, None)

        assert "ignoree" in _printed(display_console)

    @pytest.mark.asyncio
    async def test_import_wrong_type_exits(self, mock_container, importer, tmp_path):
        json_file = tmp_path / "movies.json"
        json_file.write_text("[]", encoding="utf-8")

        with patch(f"{_IMPORT}.console") as mock_console:
            with pytest.raises(typer.Exit) as exc_info:
                await _import_catalog_async(json_file, None, None)

        assert exc_info.value.exit_code == 1
        assert "Invalid file type" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_import_content_type_override(self, mock_container, importer, tmp_path):
        """--content-type remplace le type deduit de l'extension."""
        txt_file = tmp_path / "movies.txt"
        txt_file.write_text("name,year\nHeat,1995\n", encoding="utf-8")

        with patch(f"{_IMPORT}.console"), patch(f"{_DISPLAY}.console"):
            await _import_catalog_async(txt_file, "text/csv", None)

        assert importer._movie_repo.insert.call_count == 1

    @pytest.mark.asyncio
    async def test_import_empty_file_exits(self, mock_container, importer, tmp_path):
        csv_file = tmp_path / "empty.csv"
        csv_file.write_text("name,year\n", encoding="utf-8")

        with patch(f"{_IMPORT}.console") as mock_console:
            with pytest.raises(typer.Exit):
                await _import_catalog_async(csv_file, None, None)

        assert "No valid data found in CSV file" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_import_dialect_override(self, mock_container, importer, tmp_path):
        csv_file = tmp_path / "movies.csv"
        csv_file.write_text("name,year\nHeat,1995\n", encoding="utf-8")

        with patch(f"{_IMPORT}.console"), patch(f"{_DISPLAY}.console"):
            await _import_catalog_async(csv_file, None, CsvDialect.STANDARD)

        kwargs = mock_container.import_service.call_args.kwargs
        assert kwargs["parser"].dialect == CsvDialect.STANDARD


# ============================================================================
# Catalogue
# ============================================================================


class TestCatalogCommands:
    """Tests pour list, show, add, edit, delete et genres."""

    @pytest.mark.asyncio
    async def test_list_empty(self, catalog_container):
        with patch(f"{_CATALOG}.console") as mock_console:
            await _list_movies_async("", [], [])
        assert "Aucun film" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_list_filters(self, catalog_container, movie_repository, matrix, godfather):
        movie_repository.insert(matrix)
        movie_repository.insert(godfather)

        with patch(f"{_CATALOG}.render_movie_table") as render:
            await _list_movies_async("", ["Crime"], [])

        (movies,) = render.call_args.args
        assert [m.name for m in movies] == ["The Godfather"]

    @pytest.mark.asyncio
    async def test_show_missing_exits(self, catalog_container):
        with patch(f"{_CATALOG}.console"):
            with pytest.raises(typer.Exit):
                await _show_async("42")

    @pytest.mark.asyncio
    async def test_show(self, catalog_container, movie_repository, matrix):
        stored = movie_repository.insert(matrix)
        with patch(f"{_CATALOG}.render_movie") as render:
            await _show_async(stored.id)
        render.assert_called_once_with(stored)

    @pytest.mark.asyncio
    async def test_add_complete_entry(self, catalog_container, movie_repository):
        overrides = _collect_overrides(
            "Heat", 1995, "Michael Mann", ["Al Pacino"], "Crime",
            MovieFormat.DVD, "https://example.com/heat.jpg",
        )
        with patch(f"{_CATALOG}.console"), patch(f"{_CATALOG}.render_movie"):
            await _add_async(overrides, None)

        (movie,) = movie_repository.list_all()
        assert movie.name == "Heat"
        assert movie.format == MovieFormat.DVD

    @pytest.mark.asyncio
    async def test_add_incomplete_entry_exits(self, catalog_container, movie_repository):
        overrides = _collect_overrides("Heat", 1995, None, None, None, None, None)
        with patch(f"{_CATALOG}.console") as mock_console:
            with pytest.raises(typer.Exit):
                await _add_async(overrides, None)

        assert "Informations manquantes" in _printed(mock_console)
        assert movie_repository.list_all() == []

    @pytest.mark.asyncio
    async def test_add_with_lookup_prefill(self, catalog_container, movie_repository):
        """Les options fournies completent la fiche trouvee."""
        found = Movie(
            name="The Matrix",
            year=1999,
            director="Lana Wachowski",
            actors=("Keanu Reeves",),
            genre="Action",
            cover_url="https://example.com/matrix.jpg",
        )
        lookup_service = MagicMock()
        lookup_service.prefill = AsyncMock(return_value=LookupResult(found=True, movie=found))
        catalog_container.lookup_service.return_value = lookup_service

        overrides = _collect_overrides(None, None, None, None, "Sci-Fi", MovieFormat.BLU_RAY, None)
        with patch(f"{_CATALOG}.console"), patch(f"{_CATALOG}.render_movie"):
            await _add_async(overrides, "The Matrix")

        (movie,) = movie_repository.list_all()
        assert movie.name == "The Matrix"
        assert movie.genre == "Sci-Fi"
        assert movie.format == MovieFormat.BLU_RAY

    @pytest.mark.asyncio
    async def test_edit_only_changes_given_fields(self, catalog_container, movie_repository, matrix):
        stored = movie_repository.insert(matrix)

        with patch(f"{_CATALOG}.console"), patch(f"{_CATALOG}.render_movie"):
            await _edit_async(stored.id, {"genre": "Action"})

        updated = movie_repository.get_by_id(stored.id)
        assert updated.genre == "Action"
        assert updated.name == "The Matrix"

    @pytest.mark.asyncio
    async def test_edit_missing_exits(self, catalog_container):
        with patch(f"{_CATALOG}.console"):
            with pytest.raises(typer.Exit):
                await _edit_async("42", {"genre": "Action"})

    @pytest.mark.asyncio
    async def test_delete(self, catalog_container, movie_repository, matrix):
        stored = movie_repository.insert(matrix)

        with patch(f"{_CATALOG}.console"):
            await _delete_async(stored.id)

        assert movie_repository.list_all() == []

    @pytest.mark.asyncio
    async def test_delete_missing_exits(self, catalog_container):
        with patch(f"{_CATALOG}.console"):
            with pytest.raises(typer.Exit):
                await _delete_async("42")

    @pytest.mark.asyncio
    async def test_genres(self, catalog_container, movie_repository, matrix, godfather):
        movie_repository.insert(matrix)
        movie_repository.insert(godfather)

        with patch(f"{_CATALOG}.console") as mock_console:
            await _genres_async()

        output = _printed(mock_console)
        assert "Crime, Science Fiction" in output
        assert "1990s, 1970s" in output

    def test_collect_overrides_keeps_given_values(self):
        overrides = _collect_overrides(None, 2001, None, ["A", "B"], None, None, None)
        assert overrides == {"year": 2001, "actors": ("A", "B")}


# ============================================================================
# lookup
# ============================================================================


class TestLookupCommand:
    """Tests pour la commande lookup."""

    @pytest.mark.asyncio
    async def test_lookup_disabled_exits(self, mock_container):
        mock_container.lookup_service.return_value = MagicMock(enabled=False)

        with patch(f"{_LOOKUP}.console") as mock_console:
            with pytest.raises(typer.Exit):
                await _lookup_async("Alien")

        assert "CINESHELF_OMDB_API_KEY" in _printed(mock_console)
        mock_container.database.init.assert_not_called()

    @pytest.mark.asyncio
    async def test_lookup_found(self, mock_container):
        movie = Movie(name="Alien", year=1979)
        service = MagicMock(enabled=True)
        service.prefill = AsyncMock(return_value=LookupResult(found=True, movie=movie))
        mock_container.lookup_service.return_value = service

        with patch(f"{_LOOKUP}.render_movie") as render:
            await _lookup_async("Alien")

        render.assert_called_once_with(movie)

    @pytest.mark.asyncio
    async def test_lookup_not_found_exits(self, mock_container):
        service = MagicMock(enabled=True)
        service.prefill = AsyncMock(
            return_value=LookupResult(found=False, error="Movie not found!")
        )
        mock_container.lookup_service.return_value = service

        with patch(f"{_LOOKUP}.console") as mock_console:
            with pytest.raises(typer.Exit):
                await _lookup_async("Nothing")

        assert "Movie not found!" in _printed(mock_console)


# ============================================================================
# Application
# ============================================================================


class TestApp:
    """Tests pour l'application Typer."""

    def test_global_help_lists_commands(self):
        from src.main import app

        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("import", "list", "add", "lookup", "serve"):
            assert command in result.stdout

    def test_import_help(self):
        from src.main import app

        result = runner.invoke(app, ["import", "--help"])
        assert result.exit_code == 0
        assert "--dialect" in result.stdout

    def test_version(self):
        from src.main import __version__, app

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_delete_aborts_without_confirmation(self):
        from src.main import app

        with patch(f"{_CATALOG}._delete_async") as delete_impl:
            result = runner.invoke(app, ["delete", "1"], input="n\n")

        assert result.exit_code != 0
        delete_impl.assert_not_called()
