# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# Two dataclasses travel through every tool call:
#
#   FetchSettings  - the process-wide HTTP configuration (timeout, retry cap,
#                    retry delay unit).  Built once at startup, frozen, and
#                    handed to the fetcher's constructor.
#
#   FetchOutcome   - the envelope every tool returns.  Either
#                    {url, data} on success or {url, error, statusCode?} on
#                    failure.  It is serialized immediately and never stored.
#
# Upstream payloads are NOT modelled here.  The server passes the raw body
# through as text; the client does the reading.
# =============================================================================

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional


# -----------------------------------------------------------------------------
# FetchSettings - HTTP timeout and retry policy
# -----------------------------------------------------------------------------
# Environment overrides (all optional):
#   PARLIAMENT_HTTP_TIMEOUT         seconds per GET attempt   (default 30)
#   PARLIAMENT_MAX_RETRY_ATTEMPTS   total attempts per call   (default 3)
#   PARLIAMENT_RETRY_DELAY          backoff unit in seconds   (default 1)
#
# Backoff is linear: the wait after attempt N (0-based) is
# retry_delay * (N + 1), so the defaults give 1s then 2s.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FetchSettings:
    """Immutable HTTP configuration for the Resilient Fetcher."""

    http_timeout: float = 30.0         # Hard bound for a single GET attempt
    max_retry_attempts: int = 3        # Attempts, not retries: 3 = 1 try + 2 retries
    retry_delay: float = 1.0           # Multiplied by (attempt index + 1)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FetchSettings":
        """Build settings from environment variables, falling back to defaults.

        Raises:
            ValueError: if a variable is set but not a positive number.
        """
        env = os.environ if environ is None else environ
        return cls(
            http_timeout=_positive(env, "PARLIAMENT_HTTP_TIMEOUT", float, cls.http_timeout),
            max_retry_attempts=_positive(
                env, "PARLIAMENT_MAX_RETRY_ATTEMPTS", int, cls.max_retry_attempts
            ),
            retry_delay=_positive(env, "PARLIAMENT_RETRY_DELAY", float, cls.retry_delay),
        )


def _positive(env: Mapping[str, str], name: str, cast: Callable[[str], Any], default: Any) -> Any:
    """Read one setting: unset or blank gives ``default``, otherwise it must be positive.

    ``cast`` is int or float; an int setting rejects fractional input such
    as "3.0".
    """
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        kind = "an integer" if cast is int else "a number"
        raise ValueError(f"{name} must be {kind}, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be greater than zero, got {raw!r}")
    return value


# -----------------------------------------------------------------------------
# FetchOutcome - the uniform tool result
# -----------------------------------------------------------------------------
# Wire format (compact JSON):
#   success  {"url": "...", "data": "<raw upstream body>"}
#   failure  {"url": "...", "error": "...", "statusCode": 503}
#
# statusCode is present only when a definite HTTP status came back.
# Timeouts, network errors and unexpected exceptions carry no status.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FetchOutcome:
    """Result of one tool invocation: success-with-body or failure-with-diagnostic."""

    url: str
    data: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, url: str, data: str) -> "FetchOutcome":
        return cls(url=url, data=data)

    @classmethod
    def failure(cls, url: str, error: str, status_code: Optional[int] = None) -> "FetchOutcome":
        return cls(url=url, error=error, status_code=status_code)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"url": self.url, "data": self.data}
        result: dict[str, Any] = {"url": self.url, "error": self.error}
        if self.status_code is not None:
            result["statusCode"] = self.status_code
        return result

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))
