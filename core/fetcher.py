# =============================================================================
# core/fetcher.py  -  Resilient Fetcher (HTTP GET with bounded retry)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs one logical GET for a tool call and always hands back a
#   FetchOutcome.  Nothing raised by the network or the upstream API escapes;
#   every failure becomes an {url, error, statusCode?} envelope.
#
# THE ATTEMPT LOOP (attempt index a = 0 .. max_retry_attempts - 1):
#
#   2xx                        -> {url, data}                       done
#   408/429/500/502/503/504    -> wait retry_delay * (a + 1), retry;
#                                 last attempt -> {url, error, statusCode}
#   any other status           -> {url, error, statusCode}          done
#   timeout                    -> retry like a transient status;
#                                 last attempt -> "Request timed out ..."
#   network error (DNS, refused connection, protocol) -> retry;
#                                 last attempt -> "Network error: ..."
#   anything else              -> "Unexpected error: ..."           done
#   cancelled                  -> re-raised, no further attempts
#
#   Timeouts and network errors use every attempt even when the
#   cause is permanent (e.g. a hostname that never resolves).
#
# RESOURCES:
#   Each attempt opens its own httpx.AsyncClient with "async with", so the
#   connection pool is released on every exit path.
#
#   http_timeout bounds the WHOLE attempt, body included, through
#   asyncio.wait_for.  The httpx client gets the same value, but httpx only
#   bounds each connect/read/write step on its own.
#
#   The transport and the sleep function are injectable; tests pass
#   httpx.MockTransport and a recording fake sleep.
# =============================================================================

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx

from core.models import FetchOutcome, FetchSettings

logger = logging.getLogger(__name__)

# Upstream conditions expected to clear up on their own.
TRANSIENT_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})

TIMEOUT_ERROR = "Request timed out after multiple attempts"
RETRIES_EXCEEDED_ERROR = "Maximum retry attempts exceeded"


def is_transient_failure(status_code: int) -> bool:
    """Return True if a response with this status should be retried."""
    return status_code in TRANSIENT_STATUS_CODES


class ParliamentFetcher:
    """Stateless GET service shared by every tool.

    Args:
        settings: Timeout and retry policy.  Defaults to FetchSettings().
        transport: Optional httpx transport, used by tests to stub the network.
        sleep: Coroutine used for backoff waits (defaults to asyncio.sleep).
    """

    def __init__(
        self,
        settings: Optional[FetchSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.settings = settings or FetchSettings()
        self._transport = transport
        self._sleep = sleep

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.http_timeout,
            transport=self._transport,
            follow_redirects=True,
        )

    async def _get(self, url: str) -> httpx.Response:
        async with self._client() as client:
            return await client.get(url)

    async def _backoff(self, attempt: int) -> None:
        await self._sleep(self.settings.retry_delay * (attempt + 1))

    async def fetch(self, url: str) -> FetchOutcome:
        """GET ``url`` and wrap the result.  Never raises, except on cancellation."""
        max_attempts = self.settings.max_retry_attempts

        for attempt in range(max_attempts):
            is_last = attempt >= max_attempts - 1
            try:
                logger.info("Making HTTP request to %s (attempt %d/%d)",
                            url, attempt + 1, max_attempts)
                response = await asyncio.wait_for(self._get(url), self.settings.http_timeout)

                if response.is_success:
                    logger.info("Successfully retrieved data from %s", url)
                    return FetchOutcome.success(url, response.text)

                status = response.status_code
                if is_transient_failure(status):
                    logger.warning("Transient failure for %s: %d. Attempt %d/%d",
                                   url, status, attempt + 1, max_attempts)
                    if not is_last:
                        await self._backoff(attempt)
                        continue

                logger.error("Final failure for %s: %d", url, status)
                return FetchOutcome.failure(
                    url,
                    f"HTTP request failed with status {status}: {response.reason_phrase}",
                    status_code=status,
                )

            except (httpx.TimeoutException, asyncio.TimeoutError):
                logger.warning("Request to %s timed out. Attempt %d/%d",
                               url, attempt + 1, max_attempts)
                if not is_last:
                    await self._backoff(attempt)
                    continue
                logger.error("Request to %s timed out after all retry attempts", url)
                return FetchOutcome.failure(url, TIMEOUT_ERROR)

            except httpx.RequestError as exc:
                logger.warning("HTTP request exception for %s: %s. Attempt %d/%d",
                               url, exc, attempt + 1, max_attempts)
                if not is_last:
                    await self._backoff(attempt)
                    continue
                logger.error("Network error for %s after all retry attempts", url)
                return FetchOutcome.failure(url, f"Network error: {exc}")

            except asyncio.CancelledError:
                logger.warning("Request to %s cancelled on attempt %d/%d",
                               url, attempt + 1, max_attempts)
                raise

            except Exception as exc:
                logger.exception("Unexpected error for %s", url)
                return FetchOutcome.failure(url, f"Unexpected error: {exc}")

        return FetchOutcome.failure(url, RETRIES_EXCEEDED_ERROR)
