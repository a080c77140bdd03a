"""Jira Client Library - user and group management over the Jira REST API."""

from jira_client.client import JiraClient
from jira_client.errors import (
    DecodeError,
    JiraError,
    RequestBuildError,
    ResponseError,
    TransportError,
    ValidationError,
)
from jira_client.models import (
    EmptyResult,
    Group,
    GroupList,
    GroupMember,
    GroupMemberRef,
    GroupSearchOptions,
    User,
    UserGroup,
    with_account_id,
    with_active,
    with_inactive,
    with_max_results,
    with_property,
    with_query,
    with_start_at,
    with_username,
)

__all__ = [
    "DecodeError",
    "EmptyResult",
    "Group",
    "GroupList",
    "GroupMember",
    "GroupMemberRef",
    "GroupSearchOptions",
    "JiraClient",
    "JiraError",
    "RequestBuildError",
    "ResponseError",
    "TransportError",
    "User",
    "UserGroup",
    "ValidationError",
    "with_account_id",
    "with_active",
    "with_inactive",
    "with_max_results",
    "with_property",
    "with_query",
    "with_start_at",
    "with_username",
]
