"""Group membership operations of the Jira REST API.

Jira API docs: https://docs.atlassian.com/software/jira/docs/api/REST/latest/#api/2/group
"""

import logging

from jira_client.backends.base import JiraBackend
from jira_client.backends.http import decode_json
from jira_client.errors import ValidationError
from jira_client.models import (
    EmptyResult,
    Group,
    GroupList,
    GroupMember,
    GroupMemberRef,
    GroupMembersPage,
    GroupSearchOptions,
)
from jira_client.services import REST_API_BASE, QueryParams, append_query, escape

logger = logging.getLogger("jira_client.groups")


class GroupService:
    """List group members, add and remove users, and search groups."""

    def __init__(self, backend: JiraBackend) -> None:
        self.backend = backend

    def get(self, name: str) -> list[GroupMember]:
        """Get the members of a group and its subgroups, ordered by username.

        Only the first page is returned; use ``get_with_options`` to move
        through the rest.
        """
        return self.get_with_options(name, None)

    def get_with_options(
        self, name: str, options: GroupSearchOptions | None
    ) -> list[GroupMember]:
        """Get one page of group members.

        Without options no pagination parameters are sent and the server
        picks its defaults. The page metadata is not returned.
        """
        path = f"{REST_API_BASE}/group/member?groupname={escape(name)}"
        if options is not None:
            path += "".join(f"&{key}={value}" for key, value in options.to_params())
        req = self.backend.new_request("GET", path)
        resp = self.backend.do(req)
        page = GroupMembersPage.from_dict(decode_json(resp, dict))
        return page.members

    def add(self, groupname: str, *user_params: str) -> Group:
        """Add a user to a group.

        ``user_params`` is ``(username,)`` or ``(username, account_id)``;
        anything else raises ``ValidationError`` without contacting Jira.
        """
        try:
            member = GroupMemberRef.from_params(*user_params)
        except ValidationError as e:
            logger.warning(f"Rejected add to group {groupname}: {e}")
            raise
        return self.add_member(groupname, member)

    def add_member(self, groupname: str, member: GroupMemberRef) -> Group:
        """Add a user to a group.

        When the member carries an account id, the ``force-account-id``
        header tells the server to use it over the username.
        """
        req = self.backend.new_request(
            "POST", f"{REST_API_BASE}/group/user?groupname={escape(groupname)}", member.to_dict()
        )
        if member.forces_account_id:
            req.headers["force-account-id"] = "true"
        resp = self.backend.do(req)
        logger.info(f"Added {member.name} to Jira group {groupname}")
        return Group.from_dict(decode_json(resp, dict))

    def remove(self, groupname: str, username: str) -> EmptyResult:
        """Remove a user from a group."""
        req = self.backend.new_request(
            "DELETE",
            f"{REST_API_BASE}/group/user?groupname={escape(groupname)}&username={escape(username)}",
        )
        resp = self.backend.do(req)
        logger.info(f"Removed {username} from Jira group {groupname}")
        return EmptyResult(status_code=resp.status_code, response=resp)

    def get_list(self) -> GroupList:
        """List groups through the group picker."""
        return self.get_list_with_options(None)

    def get_list_with_options(self, params: QueryParams | None) -> GroupList:
        """Search groups through the group picker (``query``, ``exclude``, ``maxResults``...)."""
        req = self.backend.new_request("GET", append_query(f"{REST_API_BASE}/groups/picker", params))
        resp = self.backend.do(req)
        return GroupList.from_dict(decode_json(resp, dict))
