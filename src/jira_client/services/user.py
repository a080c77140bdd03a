"""User operations of the Jira REST API.

Jira API docs: https://docs.atlassian.com/software/jira/docs/api/REST/latest/#api/2/user
"""

import logging

from jira_client.backends.base import JiraBackend
from jira_client.backends.http import decode_json
from jira_client.errors import DecodeError, new_jira_error
from jira_client.models import EmptyResult, User, UserGroup, UserSearchParam
from jira_client.services import REST_API_BASE, QueryParams, append_query, escape

logger = logging.getLogger("jira_client.users")


class UserService:
    """Look up, create, delete and search Jira users."""

    def __init__(self, backend: JiraBackend) -> None:
        self.backend = backend

    def get(self, username: str) -> User:
        """Get a user by exact username."""
        return self.get_with_query_params({"username": username})

    def get_by_account_id(self, account_id: str) -> User:
        """Get a user by account id (Jira Cloud)."""
        return self.get_with_query_params({"accountId": account_id})

    def get_with_query_params(self, params: QueryParams | None) -> User:
        """Get a single user matching arbitrary query parameters."""
        path = append_query(f"{REST_API_BASE}/user", params)
        req = self.backend.new_request("GET", path)
        resp = self.backend.do(req)
        return User.from_dict(decode_json(resp, dict))

    def create(self, user: User) -> User:
        """Create a user. The password, if set, is sent with the request."""
        req = self.backend.new_request("POST", f"{REST_API_BASE}/user", user.to_dict())
        resp = self.backend.do(req)
        data = decode_json(resp, dict)
        if data is None:
            raise new_jira_error(resp, "Could not read the returned data", DecodeError)
        created = User.from_dict(data)
        logger.info(f"Created Jira user {created.name or user.name}")
        return created

    def delete(self, username: str) -> EmptyResult:
        """Delete a user. Jira answers 204 No Content on success."""
        req = self.backend.new_request("DELETE", f"{REST_API_BASE}/user?username={escape(username)}")
        resp = self.backend.do(req)
        logger.info(f"Deleted Jira user {username}")
        return EmptyResult(status_code=resp.status_code, response=resp)

    def get_groups(self, username: str) -> list[UserGroup]:
        """Get the groups a user belongs to."""
        req = self.backend.new_request(
            "GET", f"{REST_API_BASE}/user/groups?username={escape(username)}"
        )
        resp = self.backend.do(req)
        return [UserGroup.from_dict(g) for g in decode_json(resp, list) or []]

    def get_self(self) -> User:
        """Get the user the client is authenticated as."""
        req = self.backend.new_request("GET", f"{REST_API_BASE}/myself")
        resp = self.backend.do(req)
        return User.from_dict(decode_json(resp, dict))

    def find(self, *params: UserSearchParam) -> list[User]:
        """Search users by username, name or email.

        Parameters are sent in the order given. Repeating a parameter sends
        it twice; which one wins is up to the server.

            client.user.find(with_query("jdoe"), with_max_results(5))
        """
        query = "&".join(f"{p.name}={escape(p.value)}" for p in params)
        path = f"{REST_API_BASE}/user/search"
        if query:
            path = f"{path}?{query}"
        return self._search(path)

    def find_with_query_params(self, params: QueryParams | None) -> list[User]:
        """Search users with a prebuilt parameter map."""
        return self._search(append_query(f"{REST_API_BASE}/user/search", params))

    def _search(self, path: str) -> list[User]:
        req = self.backend.new_request("GET", path)
        resp = self.backend.do(req)
        return [User.from_dict(u) for u in decode_json(resp, list) or []]
