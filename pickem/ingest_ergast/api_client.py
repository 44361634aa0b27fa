"""
HTTP transport for the Ergast API.

One GET per call, no retries, no caching. Failures are classified into
the race-data error kinds before they leave this module.
"""
import time

import requests
from requests.adapters import HTTPAdapter

from pickem.config import cfg
from pickem.ingest_ergast.errors import RequestTimeoutError, TransportError, UpstreamError
from pickem.utils.logger import logger

_CHUNK_SIZE = 16 * 1024


class ErgastApiClient:
    """
    Thin session-based client for the Ergast REST API.

    Holds only its configuration and a pooled requests session, so one
    instance can serve concurrent callers.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or cfg.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.api.timeout

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=0, pool_maxsize=cfg.api.pool_maxsize)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            session.headers.update({"Accept": "application/json"})
        self.session = session

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, timeout: float | None = None) -> bytes:
        """
        Fetch a path below the base URL and return the raw response body.

        The timeout is an overall deadline for the call: it bounds each
        connect and read, and the body is streamed in chunks so a server
        trickling bytes cannot hold the call past it either.

        Args:
            path: Endpoint path, e.g. 'api/f1/2022.json'.
            timeout: Seconds to wait before giving up; defaults to the
                client's configured timeout.

        Returns:
            The undecoded response body.

        Raises:
            RequestTimeoutError: the deadline passed before the body was read.
            TransportError: the request could not be sent or completed.
            UpstreamError: the API answered with a non-200 status.
        """
        url = self.url_for(path)
        timeout = timeout if timeout is not None else self.timeout
        deadline = time.monotonic() + timeout
        logger.debug(f"Fetching: {url} (timeout={timeout}s)")

        try:
            response = self.session.get(url, timeout=timeout, stream=True)
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timed out for {url}: {e}")
            raise RequestTimeoutError(f"request to {url} timed out after {timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed for {url}: {e}")
            raise TransportError(f"request to {url} failed: {e}") from e

        try:
            if response.status_code != 200:
                logger.error(f"HTTP {response.status_code} for {url}")
                raise UpstreamError(response.status_code, url)
            return self._read_body(response, url, timeout, deadline)
        finally:
            response.close()

    def _read_body(self, response, url: str, timeout: float, deadline: float) -> bytes:
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                if time.monotonic() > deadline:
                    logger.error(f"Deadline of {timeout}s passed while reading {url}")
                    raise RequestTimeoutError(f"request to {url} timed out after {timeout}s")
                chunks.append(chunk)
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timed out for {url}: {e}")
            raise RequestTimeoutError(f"request to {url} timed out after {timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Unable to read response body for {url}: {e}")
            raise TransportError(f"reading response from {url} failed: {e}") from e
        return b"".join(chunks)
