"""
Tests pour la normalisation des lignes importees.

Verifie la resolution champ par champ via les en-tetes synonymes,
les valeurs par defaut et les regles de rejet (titre vide, annee nulle).
"""

import pytest

from src.core.entities.media import MovieFormat
from src.services.normalizer import (
    RowNormalizer,
    first_non_empty,
    resolve_actors,
    resolve_cover_url,
    resolve_format,
    resolve_name,
    resolve_year,
)
from src.utils.constants import DEFAULT_COVER_URL, UNKNOWN_ACTOR, UNKNOWN_GENRE


class TestFirstNonEmpty:
    """Tests pour la resolution par ordre de priorite."""

    def test_first_column_wins(self):
        row = {"name": "Alien", "title": "Aliens"}
        assert first_non_empty(row, ("name", "title")) == "Alien"

    def test_empty_value_falls_through(self):
        """Une valeur vide passe au synonyme suivant."""
        row = {"name": "", "title": "Aliens"}
        assert first_non_empty(row, ("name", "title")) == "Aliens"

    def test_missing_everywhere_returns_empty(self):
        assert first_non_empty({"other": "x"}, ("name", "title")) == ""

    def test_non_string_value_raises(self):
        with pytest.raises(TypeError):
            first_non_empty({"name": 42}, ("name",))


class TestResolvers:
    """Tests des resolveurs champ par champ."""

    @pytest.mark.parametrize(
        "row,expected",
        [
            ({"name": "A"}, "A"),
            ({"title": "B"}, "B"),
            ({"Name": "C"}, "C"),
            ({"Title": "D"}, "D"),
            ({"title": "B", "Name": "C"}, "B"),
            ({"TITLE": "E"}, ""),
        ],
    )
    def test_resolve_name(self, row, expected):
        assert resolve_name(row) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1979", 1979),
            ("1999.5", 1999),
            ("2005-2010", 2005),
            ("  1984", 1984),
            ("abc", 0),
            ("", 0),
        ],
    )
    def test_resolve_year(self, value, expected):
        assert resolve_year({"year": value}) == expected

    def test_resolve_year_uses_capitalized_header(self):
        assert resolve_year({"Year": "2001"}) == 2001

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("DVD", MovieFormat.DVD),
            ("Blu-ray", MovieFormat.BLU_RAY),
            ("Digital", MovieFormat.DIGITAL),
            ("dvd", MovieFormat.DIGITAL),
            ("VHS", MovieFormat.DIGITAL),
            ("", MovieFormat.DIGITAL),
        ],
    )
    def test_resolve_format(self, label, expected):
        """Le format est sensible a la casse, Digital par defaut."""
        assert resolve_format({"format": label}) == expected

    def test_resolve_actors_mixed_separators(self):
        assert resolve_actors({"actors": "A, B|C"}) == ("A", "B", "C")

    def test_resolve_actors_drops_empty_names(self):
        assert resolve_actors({"Main Actors": " A ,, | B "}) == ("A", "B")

    def test_resolve_actors_absent(self):
        assert resolve_actors({}) == ()

    def test_resolve_cover_url_synonyms(self):
        assert resolve_cover_url({"image": "x.jpg"}) == "x.jpg"
        assert resolve_cover_url({"poster": "p.jpg", "image": "x.jpg"}) == "p.jpg"


class TestRowNormalizer:
    """Tests pour RowNormalizer.normalize."""

    @pytest.fixture
    def normalizer(self) -> RowNormalizer:
        return RowNormalizer()

    def test_minimal_row_gets_defaults(self, normalizer):
        """Titre et annee suffisent, le reste prend les valeurs par defaut."""
        movie = normalizer.normalize({"Title": "Alien", "Year": "1979"})

        assert movie is not None
        assert movie.id is None
        assert movie.name == "Alien"
        assert movie.year == 1979
        assert movie.director == ""
        assert movie.actors == (UNKNOWN_ACTOR,)
        assert movie.genre == UNKNOWN_GENRE
        assert movie.format == MovieFormat.DIGITAL
        assert movie.cover_url == DEFAULT_COVER_URL

    def test_full_row(self, normalizer):
        row = {
            "name": "Heat",
            "year": "1995",
            "director": "Michael Mann",
            "actors": "Al Pacino|Robert De Niro",
            "genre": "Crime",
            "format": "Blu-ray",
            "coverUrl": "https://example.com/heat.jpg",
        }
        movie = normalizer.normalize(row)

        assert movie.director == "Michael Mann"
        assert movie.actors == ("Al Pacino", "Robert De Niro")
        assert movie.genre == "Crime"
        assert movie.format == MovieFormat.BLU_RAY
        assert movie.cover_url == "https://example.com/heat.jpg"

    def test_custom_default_cover(self):
        normalizer = RowNormalizer(default_cover_url="https://example.com/none.png")
        movie = normalizer.normalize({"name": "Heat", "year": "1995"})
        assert movie.cover_url == "https://example.com/none.png"

    def test_missing_name_is_rejected(self, normalizer):
        assert normalizer.normalize({"year": "1995", "director": "Mann"}) is None

    def test_non_numeric_year_is_rejected(self, normalizer):
        assert normalizer.normalize({"name": "Heat", "year": "abc"}) is None

    def test_zero_year_is_rejected(self, normalizer):
        assert normalizer.normalize({"name": "Heat", "year": "0"}) is None

    def test_negative_year_is_accepted(self, normalizer):
        """Seule l'annee 0 est un rejet."""
        movie = normalizer.normalize({"name": "Odd", "year": "-5"})
        assert movie is not None
        assert movie.year == -5

    def test_non_string_value_is_rejected_not_raised(self, normalizer):
        """Une valeur non textuelle est traitee comme un rejet."""
        assert normalizer.normalize({"name": ["Heat"], "year": "1995"}) is None

    def test_unknown_format_falls_back_to_digital(self, normalizer):
        movie = normalizer.normalize({"name": "Heat", "year": "1995", "format": "vhs"})
        assert movie.format == MovieFormat.DIGITAL
