"""
HTTP helper with a short timeout + polite headers reused by the resolver strategies.

`timeout` is a total budget per call. requests only applies it per socket
operation, so the body is streamed and the deadline checked between reads.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError
from urllib3.util.retry import Retry

from hoarder.errors import NetworkFailure, ParseFailure
from hoarder.security import redact_secrets
from hoarder.settings import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


class HttpClient:
    def __init__(self, timeout: float = 5.0, max_retries: int = 0, user_agent: str | None = None):
        self.timeout = timeout
        self.session = requests.Session()
        retry = Retry(
            total=max_retries,
            backoff_factor=0.6,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = requests.adapters.HTTPAdapter(max_retries=retry)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.headers.update(
            {
                "User-Agent": user_agent or DEFAULT_USER_AGENT,
                "Accept": "application/json",
            }
        )

    def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        deadline = time.monotonic() + self.timeout
        try:
            resp = self.session.get(url, params=params, headers=headers, timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            logger.warning("HTTP GET exception %s", redact_secrets(str(exc)))
            raise NetworkFailure(redact_secrets(str(exc)), url=url) from exc
        try:
            if resp.status_code != 200:
                logger.warning("HTTP GET failed %s %s", resp.status_code, redact_secrets(str(resp.reason or "")))
                raise NetworkFailure(f"HTTP {resp.status_code}", url=url)
            body = self._read_body(resp, deadline, url)
        finally:
            resp.close()
        try:
            return json.loads(body)
        except ValueError as exc:
            raise ParseFailure("response body is not JSON", url=url) from exc

    def _read_body(self, resp: requests.Response, deadline: float, url: str) -> bytes:
        # read1 returns after a single socket read, so a server trickling bytes
        # cannot keep one call alive past the deadline.
        chunks = []
        try:
            while True:
                if time.monotonic() > deadline:
                    logger.warning("HTTP GET exceeded %.1fs budget for %s", self.timeout, redact_secrets(url))
                    raise NetworkFailure(f"timed out after {self.timeout}s", url=url)
                chunk = resp.raw.read1(READ_CHUNK_SIZE, decode_content=True)
                if not chunk:
                    break
                chunks.append(chunk)
        except (requests.RequestException, Urllib3HTTPError, OSError) as exc:
            logger.warning("HTTP GET read failed %s", redact_secrets(str(exc)))
            raise NetworkFailure(redact_secrets(str(exc)), url=url) from exc
        return b"".join(chunks)

    def close(self) -> None:
        self.session.close()
