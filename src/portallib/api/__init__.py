"""HTTP client for the portal library document."""

from portallib.api.client import (
    LibraryClient,
    LibraryError,
    LibraryResponseError,
    LibraryTimeoutError,
)

__all__ = ["LibraryClient", "LibraryError", "LibraryTimeoutError", "LibraryResponseError"]
