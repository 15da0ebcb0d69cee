"""
Normalisation des lignes importees vers le schema du catalogue.

Chaque champ cible est resolu a partir d'une liste ordonnee d'en-tetes
synonymes (voir src/utils/constants.py): la premiere valeur non vide
l'emporte. Les resolveurs sont des fonctions independantes, testables
champ par champ.

Seuls le titre et l'annee sont obligatoires. Les autres champs recoivent
une valeur par defaut et ne provoquent jamais de rejet.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from loguru import logger

from src.core.entities.media import Movie, MovieFormat
from src.utils.constants import (
    ACTORS_COLUMNS,
    COVER_URL_COLUMNS,
    DEFAULT_COVER_URL,
    DIRECTOR_COLUMNS,
    FORMAT_COLUMNS,
    GENRE_COLUMNS,
    NAME_COLUMNS,
    UNKNOWN_ACTOR,
    UNKNOWN_GENRE,
    YEAR_COLUMNS,
)
from src.utils.helpers import parse_leading_int, split_actors


def first_non_empty(row: Mapping[str, Any], columns: Sequence[str]) -> str:
    """
    Retourne la premiere valeur non vide parmi les colonnes, sinon "".

    Raises:
        TypeError: Si la valeur retenue n'est pas une chaine
    """
    for column in columns:
        value = row.get(column)
        if value:
            if not isinstance(value, str):
                raise TypeError(f"Valeur non textuelle pour {column!r}: {value!r}")
            return value
    return ""


def resolve_name(row: Mapping[str, Any]) -> str:
    return first_non_empty(row, NAME_COLUMNS)


def resolve_year(row: Mapping[str, Any]) -> int:
    """Annee en tete de la valeur, 0 si absente ou non numerique."""
    return parse_leading_int(first_non_empty(row, YEAR_COLUMNS) or "0")


def resolve_director(row: Mapping[str, Any]) -> str:
    return first_non_empty(row, DIRECTOR_COLUMNS)


def resolve_genre(row: Mapping[str, Any]) -> str:
    return first_non_empty(row, GENRE_COLUMNS)


def resolve_format(row: Mapping[str, Any]) -> MovieFormat:
    """Format exact (sensible a la casse), Digital sinon."""
    label = first_non_empty(row, FORMAT_COLUMNS)
    return MovieFormat.from_label(label) or MovieFormat.DIGITAL


def resolve_actors(row: Mapping[str, Any]) -> tuple[str, ...]:
    """Acteurs separes par virgule ou pipe, tuple vide si aucun."""
    value = first_non_empty(row, ACTORS_COLUMNS)
    if not value:
        return ()
    return tuple(split_actors(value))


def resolve_cover_url(row: Mapping[str, Any]) -> str:
    return first_non_empty(row, COVER_URL_COLUMNS)


class RowNormalizer:
    """
    Convertit une ligne brute (en-tete -> valeur) en entree du catalogue.

    Une ligne est rejetee (None) si le titre est vide ou si l'annee vaut 0.
    Toute erreur inattendue pendant la resolution (valeur non textuelle...)
    est traitee comme un rejet et n'est jamais propagee.

    Example:
        normalizer = RowNormalizer()
        movie = normalizer.normalize({"Title": "Alien", "Year": "1979"})
        # Movie(name="Alien", year=1979, actors=("Unknown",), genre="Unknown", ...)
    """

    def __init__(self, default_cover_url: str = DEFAULT_COVER_URL) -> None:
        """
        Initialise le normaliseur.

        Args:
            default_cover_url: Image utilisee quand aucune couverture n'est fournie
        """
        self._default_cover_url = default_cover_url

    def normalize(self, row: Mapping[str, Any]) -> Optional[Movie]:
        """
        Normalise une ligne brute.

        Args:
            row: Ligne produite par le parser

        Returns:
            Movie sans ID si la ligne est valide, None si elle est rejetee
        """
        try:
            name = resolve_name(row)
            year = resolve_year(row)

            if not name or year == 0:
                return None

            actors = resolve_actors(row)
            return Movie(
                name=name,
                year=year,
                director=resolve_director(row),
                actors=actors or (UNKNOWN_ACTOR,),
                genre=resolve_genre(row) or UNKNOWN_GENRE,
                format=resolve_format(row),
                cover_url=resolve_cover_url(row) or self._default_cover_url,
            )
        except Exception as e:
            logger.debug(f"Ligne rejetee: {e}")
            return None
