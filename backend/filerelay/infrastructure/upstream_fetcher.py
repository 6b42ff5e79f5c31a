"""
Upstream Fetcher

Streaming GET against the origin content provider using requests.
"""

import logging
import threading
from typing import Iterator, Mapping, Optional, Tuple

import requests

from filerelay.domain.errors import UpstreamFetchError

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN_FILE_URL = "https://api.telegram.org/file/bot"
DEFAULT_CHUNK_SIZE = 64 * 1024


class UpstreamResponse:
    """
    One in-flight origin response.

    Exposes the status code and headers as soon as they arrive and the
    body as a lazy, single-use sequence of byte chunks. ``close()``
    releases the underlying connection without draining the body and
    may be called any number of times.
    """

    def __init__(self, response: requests.Response, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._response = response
        self.chunk_size = chunk_size
        self._consumed = False
        self._closed = False

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    @property
    def closed(self) -> bool:
        return self._closed

    def iter_bytes(self) -> Iterator[bytes]:
        """
        Yield the body chunk by chunk, then close the response.

        Closing the returned generator early (client went away) also
        closes the upstream connection.
        """
        if self._consumed:
            raise RuntimeError("upstream body can only be iterated once")
        self._consumed = True
        return self._generate()

    def _generate(self) -> Iterator[bytes]:
        try:
            for chunk in self._response.iter_content(chunk_size=self.chunk_size):
                if chunk:
                    yield chunk
        except requests.RequestException as e:
            logger.warning(f"Upstream stream interrupted: {e}")
            raise UpstreamFetchError("upstream stream interrupted", e) from e
        finally:
            self.close()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._response.close()


class UpstreamFetcher:
    """
    Opens streaming GETs against ``<origin_url><token>/<path>``.

    A single requests.Session is shared, so connections to the origin
    are pooled across requests.
    """

    def __init__(
        self,
        origin_url: str = DEFAULT_ORIGIN_FILE_URL,
        session: Optional[requests.Session] = None,
        timeout: Tuple[float, float] = (10.0, 60.0),
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.origin_url = origin_url
        self.timeout = timeout
        self.chunk_size = chunk_size
        self._session = session
        self._lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            with self._lock:
                if self._session is None:
                    self._session = requests.Session()
        return self._session

    def build_url(self, token: str, path: str) -> str:
        return f"{self.origin_url}{token}/{path}"

    def fetch(self, token: str, path: str) -> UpstreamResponse:
        """
        Issue the GET and return once response headers are available.

        The body is not read here.

        Raises:
            UpstreamFetchError: Connection failed, timed out, or was refused
        """
        url = self.build_url(token, path)
        try:
            response = self.session.get(url, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            # never log the url, it carries the token
            logger.error(f"Upstream request failed for path {path}: {e.__class__.__name__}")
            raise UpstreamFetchError("upstream request failed", e) from e

        return UpstreamResponse(response, chunk_size=self.chunk_size)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
