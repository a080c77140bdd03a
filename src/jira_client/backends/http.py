"""HTTP backend for the Jira REST API (httpx)."""

import json
import logging
from typing import Any

import httpx

from jira_client.errors import (
    DecodeError,
    RequestBuildError,
    TransportError,
    new_jira_error,
)

logger = logging.getLogger("jira_client.http")

DEFAULT_USER_AGENT = "jira-client"


class HttpBackend:
    """Backend that talks to a Jira server over HTTP.

    Credentials: a username plus API token selects basic auth; a token alone
    is sent as a bearer token (personal access tokens).
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        api_token: str | None = None,
        timeout: float = 10.0,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.timeout = timeout

        headers = {"Accept": "application/json", "User-Agent": user_agent}
        auth: httpx.Auth | None = None
        if username and api_token:
            auth = httpx.BasicAuth(username, api_token)
        elif api_token:
            headers["Authorization"] = f"Bearer {api_token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            auth=auth,
            timeout=timeout,
            verify=verify_ssl,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        if not path.startswith(("http://", "https://")) and not path.startswith("/"):
            path = "/" + path

        content: bytes | None = None
        headers: dict[str, str] = {}
        if body is not None:
            try:
                content = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise RequestBuildError(f"Could not encode request body: {e}", cause=e) from e
            headers["Content-Type"] = "application/json"

        try:
            return self._client.build_request(method, path, content=content, headers=headers)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError) as e:
            raise RequestBuildError(f"Invalid request path {path!r}: {e}", cause=e) from e

    def do(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"{request.method} {request.url}")
        try:
            resp = self._client.send(request)
        except httpx.TransportError as e:
            logger.error(f"Failed to connect to Jira at {self.base_url}: {e}")
            raise TransportError(str(e), cause=e) from e

        if resp.is_success:
            return resp

        logger.error(
            f"Jira API error for {request.method} {request.url.path}: "
            f"{resp.status_code} - {resp.text}"
        )
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise new_jira_error(resp, e) from e
        # 1xx/3xx that were not followed
        raise new_jira_error(resp, f"Unexpected status {resp.status_code}")


def decode_json(resp: httpx.Response, expected: type | None = None) -> Any:
    """Decode the JSON body of a response; an empty body decodes to ``None``.

    With ``expected`` set, a body of another JSON type is a ``DecodeError``.
    """
    try:
        content = resp.content
    except httpx.StreamError as e:
        raise new_jira_error(resp, e, DecodeError) from e
    if not content.strip():
        return None
    try:
        data = json.loads(content)
    except ValueError as e:
        raise new_jira_error(resp, e, DecodeError) from e
    if expected is not None and not isinstance(data, expected):
        raise new_jira_error(
            resp, f"expected a JSON {expected.__name__}, got {type(data).__name__}", DecodeError
        )
    return data
