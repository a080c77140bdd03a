"""Configuration registry and type system.

Every client setting is declared here with its key, type, default,
description, and whether it contains a secret.  Settings are read from any
string mapping: the process environment or a Flask ``app.config``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConfigType(Enum):
    STRING = "string"
    INT = "int"
    BOOL = "bool"


@dataclass(frozen=True, slots=True)
class ConfigEntry:
    key: str
    type: ConfigType
    default: str | int | bool
    description: str
    secret: bool = False


# ---------------------------------------------------------------------------
# Registry -- every known setting
# ---------------------------------------------------------------------------

REGISTRY: list[ConfigEntry] = [
    ConfigEntry("jira.base_url", ConfigType.STRING, "", "Base URL of the Jira server"),
    ConfigEntry("jira.username", ConfigType.STRING, "", "Username or email for basic auth"),
    ConfigEntry(
        "jira.api_token",
        ConfigType.STRING,
        "",
        "API token (basic auth with username, bearer token without)",
        secret=True,
    ),
    ConfigEntry("jira.timeout", ConfigType.INT, 10, "Request timeout in seconds"),
    ConfigEntry("jira.verify_ssl", ConfigType.BOOL, True, "Verify TLS certificates"),
    ConfigEntry("jira.user_agent", ConfigType.STRING, "jira-client", "User-Agent header"),
]

# Fast lookup by key
_REGISTRY_MAP: dict[str, ConfigEntry] = {e.key: e for e in REGISTRY}

# Registry key -> environment variable / Flask app.config key
KEY_MAP: dict[str, str] = {
    "jira.base_url": "JIRA_BASE_URL",
    "jira.username": "JIRA_USERNAME",
    "jira.api_token": "JIRA_API_TOKEN",
    "jira.timeout": "JIRA_TIMEOUT",
    "jira.verify_ssl": "JIRA_VERIFY_SSL",
    "jira.user_agent": "JIRA_USER_AGENT",
}


def resolve_entry(key: str) -> ConfigEntry | None:
    """Look up a registry entry by key."""
    return _REGISTRY_MAP.get(key)


# ---------------------------------------------------------------------------
# Value parsing / serialization
# ---------------------------------------------------------------------------


def parse_value(entry: ConfigEntry, raw: str) -> str | int | bool:
    """Parse a raw string value according to the entry's type."""
    match entry.type:
        case ConfigType.STRING:
            return raw
        case ConfigType.INT:
            return int(raw)
        case ConfigType.BOOL:
            return raw.lower() in ("true", "1", "yes", "on")


def serialize_value(entry: ConfigEntry, value: str | int | bool) -> str:
    """Serialize a typed value back to a string."""
    match entry.type:
        case ConfigType.BOOL:
            return "true" if value else "false"
        case _:
            return str(value)


def load_settings(source: Mapping[str, Any]) -> dict[str, str | int | bool]:
    """Read every registry setting from ``source``, keyed by registry key.

    Missing or empty values take the registry default.  Values that are
    already typed (e.g. a bool in a Flask config) are kept as they are.
    """
    settings: dict[str, str | int | bool] = {}
    for entry in REGISTRY:
        raw = source.get(KEY_MAP[entry.key])
        if raw is None or raw == "":
            settings[entry.key] = entry.default
        elif isinstance(raw, str):
            try:
                settings[entry.key] = parse_value(entry, raw.strip())
            except ValueError as e:
                raise ValueError(f"Invalid value for {KEY_MAP[entry.key]}: {raw!r}") from e
        else:
            settings[entry.key] = raw
    return settings


def redact(settings: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``settings`` with secret values masked, for logging."""
    result = {}
    for key, value in settings.items():
        entry = resolve_entry(key)
        if entry is not None and entry.secret and value:
            result[key] = "********"
        else:
            result[key] = value
    return result
