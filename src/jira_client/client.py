"""JiraClient facade - user and group services over one backend."""

import logging
import os
from collections.abc import Mapping
from typing import Any

from jira_client.backends.base import JiraBackend
from jira_client.config import load_settings, redact
from jira_client.services.group import GroupService
from jira_client.services.user import UserService

logger = logging.getLogger("jira_client")


class JiraClient:
    """Main client for the Jira user and group APIs.

    Usage:
        # Basic auth with an API token
        jira = JiraClient("https://jira.example.com", username="bot", api_token="...")

        # From JIRA_* environment variables
        jira = JiraClient.from_env()

        user = jira.user.get("jdoe")
        members = jira.group.get("jira-developers")
        jira.group.add("jira-developers", "jdoe")

        # Flask integration
        jira.init_app(app)
    """

    def __init__(
        self,
        base_url: str | None = None,
        username: str | None = None,
        api_token: str | None = None,
        timeout: float = 10.0,
        verify_ssl: bool = True,
        user_agent: str = "jira-client",
        backend: JiraBackend | None = None,
    ) -> None:
        if backend is None:
            if not base_url:
                raise ValueError("Provide either base_url or a backend")

            from jira_client.backends.http import HttpBackend

            backend = HttpBackend(
                base_url,
                username=username,
                api_token=api_token,
                timeout=timeout,
                verify_ssl=verify_ssl,
                user_agent=user_agent,
            )

        self.backend = backend
        self.user = UserService(backend)
        self.group = GroupService(backend)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "JiraClient":
        """Build a client from a dict keyed by registry key (see ``config``)."""
        logger.debug(f"Configuring Jira client: {redact(settings)}")
        return cls(
            base_url=str(settings.get("jira.base_url", "")),
            username=str(settings.get("jira.username", "")) or None,
            api_token=str(settings.get("jira.api_token", "")) or None,
            timeout=float(settings.get("jira.timeout", 10)),
            verify_ssl=bool(settings.get("jira.verify_ssl", True)),
            user_agent=str(settings.get("jira.user_agent", "jira-client")),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "JiraClient":
        """Build a client from ``JIRA_*`` environment variables."""
        return cls.from_settings(load_settings(os.environ if environ is None else environ))

    def close(self) -> None:
        """Release the backend's connections, if it holds any."""
        close = getattr(self.backend, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------
    # Flask integration
    # -------------------------------------------------------------------

    def init_app(self, app) -> None:
        """Register this client on a Flask app (``app.extensions["jira_client"]``)."""
        from jira_client.flask_integration import setup_flask_integration

        setup_flask_integration(app, self)

    def group_required(self, group_name: str):
        """Decorator: require ``g.user`` to be a member of a Jira group."""
        from jira_client.flask_integration import group_required_decorator

        return group_required_decorator(self, group_name)
