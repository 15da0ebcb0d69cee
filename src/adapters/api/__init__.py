"""
Clients API externes.

Ce module fournit l'adaptateur vers le service de metadonnees:
- OMDbClient: resolution titre -> fiche film (Open Movie Database)

Infrastructure partagee:
- APICache: Cache persistant des fiches resolues (24h)
- RateLimitError / ServiceUnavailableError: erreurs relancees
- request_with_retry: requete HTTP avec backoff exponentiel

Le client implemente IMetadataLookup defini dans core/ports/api_clients.py.
"""

from src.adapters.api.cache import APICache
from src.adapters.api.omdb_client import OMDbClient
from src.adapters.api.retry import (
    RateLimitError,
    RetryableHTTPError,
    ServiceUnavailableError,
    request_with_retry,
    with_retry,
)

__all__ = [
    "APICache",
    "OMDbClient",
    "RateLimitError",
    "RetryableHTTPError",
    "ServiceUnavailableError",
    "request_with_retry",
    "with_retry",
]
