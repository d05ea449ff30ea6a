"""
Relance des requetes catalogue limitees en debit (HTTP 429).

Seul le 429 est relance. Le delai suit le header Retry-After quand TMDB
le fournit, plafonne a max_wait ; sinon un backoff exponentiel avec jitter.
Toute autre reponse, erreurs 4xx/5xx comprises, est rendue a l'appelant
qui la convertit en erreur de domaine. Les erreurs de transport ne sont
jamais relancees.
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Reponse 429 Too Many Requests.

    Attributes:
        retry_after: Secondes demandees par le header Retry-After, None si
                     absent ou sous forme de date HTTP.
        response: Derniere reponse 429 recue
    """

    def __init__(
        self,
        retry_after: Optional[int] = None,
        response: Optional[httpx.Response] = None,
    ) -> None:
        self.retry_after = retry_after
        self.response = response
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit le header Retry-After (secondes uniquement)."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class wait_retry_after:
    """Strategie d'attente tenacity : Retry-After plafonne, sinon backoff."""

    def __init__(self, max_wait: float) -> None:
        self._max_wait = max_wait
        self._fallback = wait_random_exponential(multiplier=0.5, max=max_wait)

    def __call__(self, retry_state: RetryCallState) -> float:
        outcome = retry_state.outcome
        error = outcome.exception() if outcome is not None else None
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return float(min(max(error.retry_after, 0), self._max_wait))
        return self._fallback(retry_state)


def _log_retry(retry_state: RetryCallState) -> None:
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(
        f"Rate limit TMDB (tentative {retry_state.attempt_number}), "
        f"nouvel essai dans {delay:.1f}s"
    )


def with_retry(max_attempts: int = 5, max_wait: float = 60):
    """
    Decorateur relancant une coroutine tant qu'elle leve RateLimitError.

    Apres max_attempts tentatives, la derniere RateLimitError est re-levee.
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_retry_after(max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: float = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP, relancee sur 429.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL absolue ou relative a base_url
        max_attempts: Nombre maximum de tentatives
        max_wait: Attente maximale entre deux tentatives en secondes
        **kwargs: Transmis a client.request()

    Returns:
        La premiere reponse qui n'est pas un 429

    Raises:
        RateLimitError: 429 persistant apres max_attempts tentatives
        httpx.TransportError: Erreur reseau, sans nouvel essai
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _send() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(
                _parse_retry_after(response.headers.get("Retry-After")),
                response=response,
            )
        return response

    return await _send()
