"""
Page Fetcher adapter.

Retrieves raw markup for the command line. The analyzers never import this
module; they only see the parsed document.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SEOScoringEngine/1.0)"


class FetchError(Exception):
    """Base class for every failure to retrieve a page."""

    kind = "fetch_error"

    def to_dict(self) -> dict:
        return {"type": self.kind, "message": str(self)}


class FetchTimeoutError(FetchError):
    kind = "timeout"


class HTTPStatusError(FetchError):
    kind = "http_status_error"

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"Received status {status_code}")
        self.status_code = status_code

    def to_dict(self) -> dict:
        out = super().to_dict()
        out["status_code"] = self.status_code
        return out


class NetworkError(FetchError):
    kind = "network_error"


@dataclass(frozen=True)
class FetchedPage:
    markup: str
    final_url: str
    status_code: int


class PageFetcher:
    def __init__(self, config=None):
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})
        self.timeout = self.global_config.get("request_timeout", 10)

        self.session = requests.Session()
        self.session.max_redirects = int(self.global_config.get("max_redirects", 5))
        retries_total = int(self.global_config.get("http_retries_total", 2))
        if retries_total > 0:
            retry_cfg = Retry(
                total=retries_total,
                connect=retries_total,
                read=retries_total,
                backoff_factor=float(self.global_config.get("http_backoff_factor", 0.2)),
                status_forcelist=self.global_config.get("http_status_forcelist", [429, 500, 502, 503, 504]),
                allowed_methods={"HEAD", "GET", "OPTIONS"},
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_cfg)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)
        self.session.headers.update({
            "User-Agent": self.global_config.get("user_agent", DEFAULT_USER_AGENT),
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": self.global_config.get("accept_language", "en-US,en;q=0.8"),
        })

    def fetch(self, url: str) -> FetchedPage:
        """
        Fetches a page.

        Raises:
            FetchTimeoutError: the server did not answer within the timeout.
            HTTPStatusError: the final response was not 2xx.
            NetworkError: DNS, connection, TLS or redirect-limit failures.
        """
        logger.debug("Fetching %s (timeout=%ss)", url, self.timeout)
        try:
            resp = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.Timeout as e:
            raise FetchTimeoutError(f"Timeout when connecting to {url}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise HTTPStatusError(resp.status_code, f"Failed to fetch {url}: Received status {resp.status_code}")

        logger.debug("Fetched %s -> %s (%d)", url, resp.url, resp.status_code)
        return FetchedPage(markup=resp.text, final_url=resp.url or url, status_code=resp.status_code)

    def close(self):
        self.session.close()
