"""
Relance des requetes vers le service de metadonnees.

Les reponses 429 (rate limiting) et les indisponibilites passageres
(502, 503, 504) sont relancees avec un backoff exponentiel et du jitter.
Les autres erreurs HTTP sont propagees immediatement.

Usage:
    response = await request_with_retry(client, "GET", "/", params={"t": "Alien"})
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

# Statuts consideres comme une indisponibilite passagere
TRANSIENT_STATUS_CODES = frozenset({502, 503, 504})


class RetryableHTTPError(Exception):
    """Erreur HTTP pour laquelle une nouvelle tentative a un sens."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(RetryableHTTPError):
    """
    Le service a repondu 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(429, f"Rate limited. Retry after: {retry_after}s")


class ServiceUnavailableError(RetryableHTTPError):
    """Le service est momentanement indisponible (502, 503, 504)."""

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code, f"Service unavailable ({status_code})")


def with_retry(max_attempts: int = 3, max_wait: int = 30):
    """
    Decorateur de relance sur RetryableHTTPError.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives (secondes)

    Returns:
        Decorateur tenacity a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RetryableHTTPError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec relance sur 429 et 502/503/504.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL (relative a la base_url du client)
        max_attempts: Nombre maximum de tentatives
        **kwargs: Arguments passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RetryableHTTPError: Apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        if response.status_code in TRANSIENT_STATUS_CODES:
            raise ServiceUnavailableError(response.status_code)
        response.raise_for_status()
        return response

    return await _do_request()
