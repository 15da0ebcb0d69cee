"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository :
- IMovieRepository : Stockage des films du catalogue

Ports client API :
- IMetadataLookup : Résolution titre -> métadonnées
- LookupResult : Résultat d'une résolution

Ports parsing :
- ITabularParser : Parsing de texte tabulaire en lignes brutes
- RawRow : Ligne brute (en-tête -> valeur)
- MalformedTextError : Texte impossible à découper
"""

from src.core.ports.repositories import IMovieRepository
from src.core.ports.api_clients import IMetadataLookup, LookupResult
from src.core.ports.parser import ITabularParser, MalformedTextError, RawRow

__all__ = [
    # Repositories
    "IMovieRepository",
    # Clients API
    "IMetadataLookup",
    "LookupResult",
    # Parsing
    "ITabularParser",
    "MalformedTextError",
    "RawRow",
]
