"""Abstract backend protocol for the Jira services."""

from typing import Any, Protocol

import httpx


class JiraBackend(Protocol):
    """Protocol that all backends must implement."""

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build a request for ``path`` (relative to the base URL), JSON-encoding ``body``."""
        ...

    def do(self, request: httpx.Request) -> httpx.Response:
        """Send the request. Raises a ``JiraError`` on failure or non-2xx status."""
        ...
