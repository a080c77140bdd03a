"""Dataclasses mirroring the JSON shapes of the Jira user and group APIs.

Models are plain data: ``from_dict`` builds one from decoded JSON (missing
keys fall back to defaults, unknown keys are ignored) and ``to_dict``
produces the request payload with empty values left out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from jira_client.errors import ValidationError


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop empty and zero values, matching the server's omit-if-empty fields."""
    return {k: v for k, v in data.items() if v not in (None, "", 0, False, [], {})}


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@dataclass
class AvatarUrls:
    x48: str = ""
    x24: str = ""
    x16: str = ""
    x32: str = ""

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> AvatarUrls:
        data = data or {}
        return AvatarUrls(
            x48=data.get("48x48", ""),
            x24=data.get("24x24", ""),
            x16=data.get("16x16", ""),
            x32=data.get("32x32", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"48x48": self.x48, "24x24": self.x24, "16x16": self.x16, "32x32": self.x32}
        )


@dataclass
class UserGroup:
    name: str = ""
    self_url: str = ""

    @staticmethod
    def from_dict(data: dict[str, Any]) -> UserGroup:
        return UserGroup(name=data.get("name", ""), self_url=data.get("self", ""))

    def to_dict(self) -> dict[str, Any]:
        return _compact({"self": self.self_url, "name": self.name})


@dataclass
class UserGroups:
    size: int = 0
    items: list[UserGroup] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> UserGroups:
        data = data or {}
        return UserGroups(
            size=data.get("size", 0),
            items=[UserGroup.from_dict(item) for item in data.get("items") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact({"size": self.size, "items": [g.to_dict() for g in self.items]})


@dataclass
class User:
    """A Jira user.

    ``password`` is write-only: it is sent when creating a user and is never
    populated from a response.
    """

    name: str = ""
    key: str = ""
    account_id: str = ""
    email_address: str = ""
    display_name: str = ""
    active: bool = False
    notification: bool = False
    time_zone: str = ""
    self_url: str = ""
    avatar_urls: AvatarUrls = field(default_factory=AvatarUrls)
    groups: UserGroups = field(default_factory=UserGroups)
    application_keys: list[str] = field(default_factory=list)
    password: str = field(default="", repr=False)

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> User:
        data = data or {}
        return User(
            name=data.get("name", ""),
            key=data.get("key", ""),
            account_id=data.get("accountId", ""),
            email_address=data.get("emailAddress", ""),
            display_name=data.get("displayName", ""),
            active=data.get("active", False),
            notification=data.get("notification", False),
            time_zone=data.get("timeZone", ""),
            self_url=data.get("self", ""),
            avatar_urls=AvatarUrls.from_dict(data.get("avatarUrls")),
            groups=UserGroups.from_dict(data.get("groups")),
            application_keys=list(data.get("applicationKeys") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "self": self.self_url,
                "name": self.name,
                "password": self.password,
                "key": self.key,
                "accountId": self.account_id,
                "emailAddress": self.email_address,
                "avatarUrls": self.avatar_urls.to_dict(),
                "displayName": self.display_name,
                "active": self.active,
                "notification": self.notification,
                "timeZone": self.time_zone,
                "groups": self.groups.to_dict(),
                "applicationKeys": self.application_keys,
            }
        )


@dataclass(frozen=True, slots=True)
class UserSearchParam:
    """One ``name=value`` pair of a user search query."""

    name: str
    value: str


def _flag(value: bool) -> str:
    return "true" if value else "false"


def with_max_results(max_results: int) -> UserSearchParam:
    """Limit the number of users returned."""
    return UserSearchParam("maxResults", str(max_results))


def with_start_at(start_at: int) -> UserSearchParam:
    """Set the index of the first user returned."""
    return UserSearchParam("startAt", str(start_at))


def with_active(active: bool) -> UserSearchParam:
    """Include (or exclude) active users."""
    return UserSearchParam("includeActive", _flag(active))


def with_inactive(inactive: bool) -> UserSearchParam:
    """Include (or exclude) inactive users."""
    return UserSearchParam("includeInactive", _flag(inactive))


def with_query(query: str) -> UserSearchParam:
    """Free-text match against username, display name and email."""
    return UserSearchParam("query", query)


def with_username(username: str) -> UserSearchParam:
    """Match on username."""
    return UserSearchParam("username", username)


def with_account_id(account_id: str) -> UserSearchParam:
    """Match on account id (Jira Cloud)."""
    return UserSearchParam("accountId", account_id)


def with_property(property_query: str) -> UserSearchParam:
    """Filter on a user property, e.g. ``thepropertykey.something.nested=1``."""
    return UserSearchParam("property", property_query)


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@dataclass
class GroupPropertiesName:
    type: str = ""


@dataclass
class GroupProperties:
    name: GroupPropertiesName = field(default_factory=GroupPropertiesName)


@dataclass
class Group:
    id: str = ""
    name: str = ""
    title: str = ""
    type: str = ""
    self_url: str = ""
    properties: GroupProperties = field(default_factory=GroupProperties)
    additional_properties: bool = False

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> Group:
        data = data or {}
        name_prop = (data.get("properties") or {}).get("name") or {}
        return Group(
            id=data.get("id", ""),
            name=data.get("name", ""),
            title=data.get("title", ""),
            type=data.get("type", ""),
            self_url=data.get("self", ""),
            properties=GroupProperties(name=GroupPropertiesName(type=name_prop.get("type", ""))),
            additional_properties=data.get("additionalProperties", False),
        )


@dataclass
class GroupMember:
    """A user as listed in a group's membership (a narrow view of ``User``)."""

    name: str = ""
    key: str = ""
    account_id: str = ""
    email_address: str = ""
    display_name: str = ""
    active: bool = False
    time_zone: str = ""
    self_url: str = ""

    @staticmethod
    def from_dict(data: dict[str, Any]) -> GroupMember:
        return GroupMember(
            name=data.get("name", ""),
            key=data.get("key", ""),
            account_id=data.get("accountId", ""),
            email_address=data.get("emailAddress", ""),
            display_name=data.get("displayName", ""),
            active=data.get("active", False),
            time_zone=data.get("timeZone", ""),
            self_url=data.get("self", ""),
        )


@dataclass
class GroupMembersPage:
    """The paginated envelope returned by ``/group/member``."""

    start_at: int = 0
    max_results: int = 0
    total: int = 0
    members: list[GroupMember] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> GroupMembersPage:
        data = data or {}
        return GroupMembersPage(
            start_at=data.get("startAt", 0),
            max_results=data.get("maxResults", 0),
            total=data.get("total", 0),
            members=[GroupMember.from_dict(m) for m in data.get("values") or []],
        )


@dataclass
class GroupSearchOptions:
    """Pagination filters for group member listing."""

    start_at: int = 0
    max_results: int = 0
    include_inactive_users: bool = False

    def to_params(self) -> list[tuple[str, str]]:
        # All three are always sent, zero values included
        return [
            ("startAt", str(self.start_at)),
            ("maxResults", str(self.max_results)),
            ("includeInactiveUsers", _flag(self.include_inactive_users)),
        ]


@dataclass(frozen=True)
class GroupMemberRef:
    """The user to add to a group: a username and optionally an account id."""

    name: str
    account_id: str | None = None

    @staticmethod
    def from_params(*params: str) -> GroupMemberRef:
        """Accept ``(username,)`` or ``(username, account_id)``."""
        if len(params) not in (1, 2):
            raise ValidationError(
                f"Invalid User add parameters: expected 1 or 2 values, got {len(params)}"
            )
        return GroupMemberRef(*params)

    @property
    def forces_account_id(self) -> bool:
        return self.account_id is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.account_id:
            data["accountId"] = self.account_id
        return data


@dataclass
class GroupLabel:
    text: str = ""
    title: str = ""
    type: str = ""

    @staticmethod
    def from_dict(data: dict[str, Any]) -> GroupLabel:
        return GroupLabel(
            text=data.get("text", ""), title=data.get("title", ""), type=data.get("type", "")
        )


@dataclass
class GroupDetails:
    name: str = ""
    html: str = ""
    labels: list[GroupLabel] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> GroupDetails:
        return GroupDetails(
            name=data.get("name", ""),
            html=data.get("html", ""),
            labels=[GroupLabel.from_dict(label) for label in data.get("labels") or []],
        )


@dataclass
class GroupList:
    """Result of the group picker: header text, total and matching groups."""

    header: str = ""
    total: int = 0
    groups: list[GroupDetails] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> GroupList:
        data = data or {}
        return GroupList(
            header=data.get("header", ""),
            total=data.get("total", 0),
            groups=[GroupDetails.from_dict(g) for g in data.get("groups") or []],
        )


# ---------------------------------------------------------------------------
# Body-less results
# ---------------------------------------------------------------------------


@dataclass
class EmptyResult:
    """Outcome of an operation whose success carries no payload."""

    status_code: int
    response: httpx.Response = field(repr=False)

    @property
    def no_content(self) -> bool:
        return self.status_code == httpx.codes.NO_CONTENT
