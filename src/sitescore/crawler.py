"""Page fetcher for the single analysed target."""

import logging
import time
from typing import Optional

import httpx

from sitescore.config import Config
from sitescore.constants import DEFAULT_SCHEME
from sitescore.models import FetchResult

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The target page could not be retrieved."""


def normalize_url(target: str) -> str:
    """Turn a raw target identifier into an absolute URL.

    Args:
        target: URL or bare host supplied by the caller

    Returns:
        The target with a scheme, http:// when none was given

    Raises:
        ValueError: If the target is empty
    """
    if target is None or not target.strip():
        raise ValueError("URL is required")

    url = target.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = f"{DEFAULT_SCHEME}://{url}"
    return url


class PageFetcher:
    """Fetches one page with bounded timeout and redirect count."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the fetcher.

        Args:
            config: Analyzer configuration (timeout, redirects, user agent)
            transport: Optional httpx transport, used by tests to stub the network
        """
        self.config = config or Config()
        self.transport = transport
        self.headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a page once; no retries.

        Args:
            url: Absolute URL to fetch

        Returns:
            FetchResult with markup, final URL and response headers

        Raises:
            FetchError: On network error, timeout, non-success status or
                too many redirects
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=True,
                max_redirects=self.config.max_redirects,
                headers=self.headers,
                transport=self.transport,
            ) as client:
                start_time = time.time()
                response = await client.get(url)
                elapsed = time.time() - start_time
                response.raise_for_status()

        except httpx.TimeoutException:
            logger.error(f"Timeout fetching {url} (>{self.config.timeout}s)")
            raise FetchError(f"timeout of {self.config.timeout}s exceeded")

        except httpx.TooManyRedirects:
            logger.error(f"Too many redirects fetching {url}")
            raise FetchError(f"maximum of {self.config.max_redirects} redirects exceeded")

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP {e.response.status_code} fetching {url}")
            raise FetchError(f"request failed with status code {e.response.status_code}")

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FetchError(str(e) or e.__class__.__name__)

        logger.info(f"Fetched {url} ({response.status_code}, {elapsed:.2f}s)")

        return FetchResult(
            url=url,
            final_url=str(response.url),
            status_code=response.status_code,
            html=response.text,
            headers={k.lower(): v for k, v in response.headers.items()},
            elapsed=elapsed,
        )
