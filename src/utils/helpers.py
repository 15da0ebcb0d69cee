"""
Fonctions utilitaires partagees dans le projet CineShelf.

Ce module centralise les fonctions reutilisees a travers le codebase :
- parse_leading_int : entier en tete d'une chaine ("1999", "2005-2010", " 42abc")
- split_actors : decoupage d'une liste d'acteurs separes par virgule ou pipe
- strip_quotes : retrait des guillemets doubles d'un champ
"""

import re

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_ACTOR_SEPARATORS_RE = re.compile(r"[,|]")


def parse_leading_int(value: str, default: int = 0) -> int:
    """
    Extrait l'entier en tete d'une chaine.

    Les caracteres apres les chiffres sont ignores ("1999.5" -> 1999,
    "2005–2010" -> 2005). Retourne `default` si la chaine ne commence
    pas par un nombre.
    """
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return default
    return int(match.group(1))


def split_actors(value: str) -> list[str]:
    """Decoupe sur ',' ou '|', retire les espaces et les noms vides."""
    tokens = (token.strip() for token in _ACTOR_SEPARATORS_RE.split(value))
    return [token for token in tokens if token]


def strip_quotes(value: str) -> str:
    """Retire les espaces en bordure puis tous les guillemets doubles."""
    return value.strip().replace('"', "")
