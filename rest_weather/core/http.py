from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

import requests
from requests import Response

from .errors import InvalidURL, RequestBuildError, TransportError


logger = logging.getLogger(__name__)

SECURE_SCHEME = "https"
DEFAULT_TIMEOUT = 5.0


def validate_url(raw_url: str) -> str:
    """Return ``raw_url`` normalized, or raise :class:`InvalidURL`.

    Only ``https`` URLs with a non-empty host are accepted.
    """
    try:
        parsed = urlsplit(raw_url)
        host = parsed.hostname
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidURL(f"invalid URL: {raw_url}") from exc
    if parsed.scheme != SECURE_SCHEME or not host:
        raise InvalidURL(f"invalid URL: {raw_url}")
    return parsed.geturl()


@dataclass
class RequestConfig:
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = 8


def _discard_late_response(future: Future) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    future.result().close()


class RequestExecutor:
    """Issue a single outbound request under a fixed deadline.

    There are no retries. The deadline is measured from the start of
    :meth:`execute` and covers the whole exchange, body included: the request
    runs on a worker thread and the caller stops waiting once the deadline
    passes, reporting a :class:`TransportError`. A response that arrives after
    that is closed and dropped. The returned response belongs to the caller,
    who must close it (``with executor.execute(...) as response:``).
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
        time_func: Callable[[], float] = time.monotonic,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._time_func = time_func
        self._pool = ThreadPoolExecutor(
            max_workers=self.request_config.max_workers,
            thread_name_prefix="rest-weather-http",
        )

    def execute(self, method: str, url: str, body: Any = None) -> Response:
        validated_url = validate_url(url)
        started = self._time_func()
        timeout = self.request_config.timeout

        try:
            prepared = self.session.prepare_request(requests.Request(method, validated_url, data=body))
        except (requests.RequestException, ValueError, TypeError) as exc:
            logger.error("Failed to create HTTP request for %s: %s", url, exc)
            raise RequestBuildError(f"failed to create HTTP request: {exc}") from exc

        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)
        future = self._pool.submit(self.session.send, prepared, timeout=timeout, **settings)
        try:
            response = future.result(timeout=self._remaining(started))
        except FutureTimeout:
            future.add_done_callback(_discard_late_response)
            logger.error("HTTP request to %s exceeded %.1fs deadline", validated_url, timeout)
            raise TransportError(f"request deadline of {timeout}s exceeded") from None
        except requests.RequestException as exc:
            logger.error("Failed to perform HTTP request to %s: %s", validated_url, exc)
            raise TransportError(f"failed to perform HTTP request: {exc}") from exc

        elapsed = self._time_func() - started
        if elapsed > timeout:
            response.close()
            logger.error("HTTP request to %s exceeded %.1fs deadline (%.2fs)", validated_url, timeout, elapsed)
            raise TransportError(f"request deadline of {timeout}s exceeded")
        return response

    def close(self) -> None:
        self._pool.shutdown(wait=False)
        self.session.close()

    def _remaining(self, started: float) -> float:
        return max(0.0, self.request_config.timeout - (self._time_func() - started))


__all__ = ["RequestConfig", "RequestExecutor", "validate_url", "DEFAULT_TIMEOUT"]
