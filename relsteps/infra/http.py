"""HTTP probing for artifact visibility checks.

This module provides:
- HttpClient: Protocol for probing a URL (injectable for tests)
- RealHttpClient: urllib implementation
- MockHttpClient: scripted responses for tests
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from relsteps import __version__
from relsteps.core.result import Err, Ok, Result
from relsteps.steps.timeouts import HTTP_TIMEOUT_SECONDS

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    def probe(self, url: str) -> Result[None, HttpError]:
        """Issue a HEAD request; Ok when the URL answers 2xx."""
        ...


class RealHttpClient:
    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        user_agent: str = f"relsteps/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def probe(self, url: str) -> Result[None, HttpError]:
        try:
            req = urllib.request.Request(
                url,
                method="HEAD",
                headers={"User-Agent": self.user_agent},
            )
            with urllib.request.urlopen(req, timeout=self.timeout, context=self._ssl_context):
                return Ok(None)
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


class MockHttpClient:
    """Mock HTTP client for tests.

    Each URL answers from a queue of scripted statuses; the last one repeats.
    Unknown URLs answer 404.

    Usage:
        client = MockHttpClient()
        client.script("https://repo/a.jar", [404, 200])
    """

    def __init__(self) -> None:
        self._scripts: dict[str, list[int]] = {}
        self.calls: list[str] = []

    def script(self, url: str, statuses: Sequence[int]) -> None:
        self._scripts[url] = list(statuses)

    def probe(self, url: str) -> Result[None, HttpError]:
        self.calls.append(url)
        queue = self._scripts.get(url)
        if not queue:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        status = queue.pop(0) if len(queue) > 1 else queue[0]
        if 200 <= status < 300:
            return Ok(None)
        return Err(HttpError(url=url, status=status, message="mock status"))
