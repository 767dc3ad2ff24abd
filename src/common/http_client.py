"""Shared HTTP helpers used by the registry scanners.

Directory listings and POM files are plain GET requests. Every failure mode
(non-2xx, timeout, connection error) is folded into ``None`` so callers can
treat "unreachable" and "not found" the same way: there is nothing at
that URL. Transient failures are retried here and nowhere else.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


@dataclass
class PageResponse:
    """Body of a successfully fetched page."""
    url: str
    status_code: int
    body: str


def ensure_trailing_slash(url: str) -> str:
    """Return ``url`` with exactly one trailing slash."""
    return url.rstrip("/") + "/"


class PageFetcher:
    """GET pages with retries, reporting anything but a 2xx as ``None``."""

    def __init__(
        self,
        *,
        timeout: float = Constants.REQUEST_TIMEOUT,
        retry_max: int = Constants.HTTP_RETRY_MAX,
        retry_delay: float = Constants.HTTP_RETRY_BASE_DELAY_SEC,
        session: Optional[requests.Session] = None,
        context: str = "sbt",
    ):
        self.timeout = timeout
        self.retry_max = max(1, retry_max)
        self.retry_delay = retry_delay
        self.context = context
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", Constants.USER_AGENT)

    def fetch(self, url: str, **kwargs: Any) -> Optional[PageResponse]:
        """Fetch ``url`` and return its body, or None when there is no usable content.

        Args:
            url: Target URL. Callers normalize trailing separators.
            **kwargs: Passed through to ``requests.Session.get``.

        Returns:
            PageResponse for 2xx responses, None otherwise.
        """
        safe_target = safe_url(url)
        last_problem: Optional[str] = None

        for attempt in range(1, self.retry_max + 1):
            with Timer() as t:
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP request",
                        extra=extra_context(
                            event="http_request",
                            component="http_client",
                            action="GET",
                            target=safe_target,
                            attempt=attempt,
                            context=self.context,
                        )
                    )
                try:
                    res = self.session.get(url, timeout=self.timeout, **kwargs)
                except requests.Timeout:
                    last_problem = "timeout"
                    if is_debug_enabled(logger):
                        logger.debug(
                            "HTTP timeout",
                            extra=extra_context(
                                event="http_exception",
                                component="http_client",
                                action="GET",
                                outcome="timeout",
                                attempt=attempt,
                                target=safe_target,
                            )
                        )
                    self._backoff(attempt)
                    continue
                except requests.RequestException as exc:  # includes ConnectionError
                    last_problem = str(exc)
                    if is_debug_enabled(logger):
                        logger.debug(
                            "HTTP request exception",
                            extra=extra_context(
                                event="http_exception",
                                component="http_client",
                                action="GET",
                                outcome="request_exception",
                                attempt=attempt,
                                target=safe_target,
                            )
                        )
                    self._backoff(attempt)
                    continue

            if res.status_code >= 500:
                last_problem = f"HTTP {res.status_code}"
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP server error, retrying",
                        extra=extra_context(
                            event="http_response",
                            component="http_client",
                            action="GET",
                            outcome="server_error",
                            status_code=res.status_code,
                            attempt=attempt,
                            target=safe_target,
                        )
                    )
                self._backoff(attempt)
                continue

            if 200 <= res.status_code < 300:
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP response ok",
                        extra=extra_context(
                            event="http_response",
                            component="http_client",
                            action="GET",
                            outcome="success",
                            status_code=res.status_code,
                            duration_ms=t.duration_ms(),
                            target=safe_target,
                        )
                    )
                return PageResponse(url=url, status_code=res.status_code, body=res.text)

            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP non-2xx handled",
                    extra=extra_context(
                        event="http_response",
                        component="http_client",
                        action="GET",
                        outcome="handled_non_2xx",
                        status_code=res.status_code,
                        duration_ms=t.duration_ms(),
                        target=safe_target,
                    )
                )
            return None

        logger.warning(
            "%s request for %s failed after %s attempts: %s",
            self.context,
            safe_target,
            self.retry_max,
            last_problem,
        )
        return None

    def _backoff(self, attempt: int) -> None:
        if attempt < self.retry_max and self.retry_delay > 0:
            time.sleep(self.retry_delay * attempt)
