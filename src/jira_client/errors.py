"""Exception hierarchy for the Jira client.

Every error raised by the library derives from ``JiraError``.  Errors that
happen after a response was received keep that response so callers can look
at the status code and body.
"""

import json

import httpx


class JiraError(Exception):
    """Base error carrying the originating response and cause, if any."""

    def __init__(
        self,
        message: str,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.cause = cause

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None

    @property
    def body(self) -> str:
        if self.response is None:
            return ""
        try:
            return self.response.text
        except httpx.ResponseNotRead:
            return ""

    def __str__(self) -> str:
        if self.response is None:
            return self.message
        try:
            request = self.response.request
        except RuntimeError:
            # Response built without a request (tests, hand-made responses)
            return f"{self.response.status_code} {self.message}"
        return f"{request.method} {request.url}: {self.response.status_code} {self.message}"


class RequestBuildError(JiraError):
    """The request could not be constructed (bad path, unserialisable body)."""


class TransportError(JiraError):
    """The request could not be delivered or the connection failed."""


class ResponseError(JiraError):
    """The server answered with a non-success status."""


class DecodeError(JiraError):
    """The response body could not be parsed."""


class ValidationError(JiraError, ValueError):
    """Arguments were rejected before any network activity."""


def _error_details(response: httpx.Response) -> str:
    """Extract Jira's ``errorMessages``/``errors`` payload as one line."""
    try:
        data = json.loads(response.content or b"")
    except (ValueError, httpx.ResponseNotRead):
        return ""
    if not isinstance(data, dict):
        return ""

    parts: list[str] = [str(m) for m in data.get("errorMessages") or []]
    errors = data.get("errors") or {}
    if isinstance(errors, dict):
        parts.extend(f"{field}: {msg}" for field, msg in errors.items())
    return "; ".join(parts)


def new_jira_error(
    response: httpx.Response | None,
    cause: BaseException | str,
    error_class: type[JiraError] = ResponseError,
) -> JiraError:
    """Build a ``JiraError`` from a response and the underlying failure.

    The message prefers the error details Jira puts in the body and falls
    back to the text of ``cause``.
    """
    message = str(cause)
    if response is not None:
        details = _error_details(response)
        if details:
            message = f"{details}: {message}" if message else details
    return error_class(
        message,
        response=response,
        cause=cause if isinstance(cause, BaseException) else None,
    )
