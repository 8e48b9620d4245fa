"""HTTP client for the portal library document."""

import logging

import httpx

from portallib.models import Library
from portallib.models.config import DEFAULT_DATA_URL

logger = logging.getLogger(__name__)


class LibraryError(Exception):
    """Base exception for library fetch errors."""

    pass


class LibraryTimeoutError(LibraryError):
    """Exception raised when the library request times out."""

    pass


class LibraryResponseError(LibraryError):
    """Exception raised when the library body is not valid JSON."""

    pass


class LibraryClient:
    """Async client for the remote library document.

    Every call issues a fresh GET with cache-busting headers; nothing is
    cached between calls.
    """

    DATA_URL = DEFAULT_DATA_URL
    NO_CACHE_HEADERS = {
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize library client.

        Args:
            url: Document URL (defaults to the published library JSON)
            timeout: Request timeout in seconds (defaults to no timeout)
            transport: Optional httpx transport, used to stub the network in tests
        """
        self.url = url or self.DATA_URL
        self.timeout = timeout
        self._transport = transport

    async def fetch_library(self) -> Library:
        """Fetch and parse the library document.

        Returns:
            Library parsed from the response body. A body without a usable
            category list yields an empty Library.

        Raises:
            LibraryTimeoutError: If a timeout is configured and the request exceeds it
            LibraryResponseError: If the body is not valid JSON
            LibraryError: For non-success status codes and transport failures
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.url, headers=self.NO_CACHE_HEADERS)
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {e}")
            raise LibraryTimeoutError(
                f"Request to {self.url} timed out after {self.timeout}s"
            ) from e

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error: {e}")
            raise LibraryError(f"HTTP {e.response.status_code}: {e}") from e

        except httpx.RequestError as e:
            logger.error(f"Request error: {e}")
            raise LibraryError(f"Failed to connect to {self.url}: {e}") from e

        except ValueError as e:
            logger.error(f"Failed to parse response: {e}")
            raise LibraryResponseError(f"Malformed library document: {e}") from e

        library = Library.from_api_response(data)
        logger.info(f"Fetched library with {len(library.categories)} categories")
        return library
