"""Flask integration helpers for JiraClient."""

import logging
from functools import wraps

from flask import abort, current_app, g

from jira_client.errors import JiraError

logger = logging.getLogger("jira_client.flask")

EXTENSION_KEY = "jira_client"


def setup_flask_integration(app, client) -> None:
    """Store the client on the app so views can reach it."""
    app.extensions[EXTENSION_KEY] = client


def current_client():
    """Return the JiraClient registered on the current Flask app."""
    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:
        raise RuntimeError("JiraClient.init_app() has not been called for this app") from None


def _username(user) -> str | None:
    if user is None:
        return None
    if isinstance(user, str):
        return user
    return getattr(user, "username", None)


def group_required_decorator(client, group_name: str):
    """Decorator factory that requires membership of a Jira group."""

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            username = _username(g.get("user"))
            if not username:
                abort(401)
            try:
                groups = client.user.get_groups(username)
            except JiraError as e:
                logger.error(f"Could not check Jira groups for {username}: {e}")
                abort(503)
            if group_name not in {grp.name for grp in groups}:
                abort(403)
            return f(*args, **kwargs)

        return decorated_function

    return decorator
