"""
Canteen site client.

Fetches a building's menu page and turns it into markdown.
Each call makes exactly one request; failures are not retried.
"""

import logging
from typing import Optional

import requests

from .buildings import Building, resolve
from .config import get_request_timeout
from .menu_extractor import extract_menu, render_markdown


logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the menu page cannot be fetched."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {reason}")


class LunchClient:
    """
    Client for the catering site's menu pages.

    Holds one requests.Session; close it when done, or use the
    client as a context manager.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
    ):
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.base_url = base_url

    def __enter__(self) -> "LunchClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def fetch_page(self, url: str) -> str:
        """
        Fetch a page body with a single GET.

        Raises:
            FetchError: On network errors or a non-success status
        """
        logger.info(f"Fetching menu page {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Fetch failed for {url}: {e}")
            raise FetchError(url, str(e)) from e

        # requests assumes ISO-8859-1 for text/html without a charset
        content_type = response.headers.get("Content-Type", "")
        if "charset" not in content_type.lower():
            response.encoding = "utf-8"
        return response.text

    def get_lunch(self, building: Building) -> str:
        """
        Get today's lunch for a building as markdown.

        Raises:
            FetchError: If the menu page cannot be fetched
            ExtractionError: If the page no longer has the expected layout
        """
        url = resolve(building, self.base_url)
        page = self.fetch_page(url)
        record = extract_menu(page)
        return render_markdown(record)


def get_lunch(building: Building) -> str:
    """Get today's lunch for a building using a throwaway client."""
    with LunchClient() as client:
        return client.get_lunch(building)
