#!/usr/bin/env python3
"""Print Jira account details and group memberships for the given users.

Reads the connection settings from the environment:
  - JIRA_BASE_URL: server URL (required)
  - JIRA_USERNAME: username or email for basic auth
  - JIRA_API_TOKEN: API token / personal access token
  - JIRA_TIMEOUT, JIRA_VERIFY_SSL, JIRA_USER_AGENT: optional

For each username prints:
  - displayName
  - emailAddress
  - active
  - timeZone
  - group names

Usage:
    python scripts/jira_user_details.py USERNAME [USERNAME ...]
    python scripts/jira_user_details.py --show-config
"""

import logging
import os
import sys

from jira_client import JiraClient, JiraError
from jira_client.config import KEY_MAP, REGISTRY, load_settings, serialize_value


def show_config() -> None:
    """Print the effective settings, secrets masked."""
    settings = load_settings(os.environ)
    for entry in REGISTRY:
        value = serialize_value(entry, settings[entry.key])
        if entry.secret and value:
            value = "********"
        print(f"  {KEY_MAP[entry.key]:<18} {value}")


def print_user(client: JiraClient, username: str) -> bool:
    """Look up one user. Returns False if any request failed."""
    print(f"{username}:")
    try:
        user = client.user.get(username)
        groups = client.user.get_groups(username)
    except JiraError as exc:
        print(f"  Jira error: {exc}")
        return False

    print(f"  displayName:  {user.display_name}")
    print(f"  emailAddress: {user.email_address}")
    print(f"  active:       {'yes' if user.active else 'no'}")
    print(f"  timeZone:     {user.time_zone}")
    if groups:
        print("  groups:")
        for group in groups:
            print(f"    - {group.name}")
    else:
        print("  groups:       (none)")
    return True


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if not argv or argv[0] in ("-h", "--help"):
        print(__doc__)
        return 0 if argv else 2

    if argv[0] == "--show-config":
        show_config()
        return 0

    try:
        client = JiraClient.from_env()
    except ValueError as exc:
        print(f"ERROR: {exc}. Set JIRA_BASE_URL.", file=sys.stderr)
        return 2

    ok = True
    with client:
        for username in argv:
            ok = print_user(client, username) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
