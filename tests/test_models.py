import pytest

from jira_client.errors import ValidationError
from jira_client.models import (
    AvatarUrls,
    GroupMemberRef,
    GroupMembersPage,
    GroupSearchOptions,
    User,
    UserSearchParam,
    with_account_id,
    with_active,
    with_inactive,
    with_max_results,
    with_property,
    with_query,
    with_start_at,
    with_username,
)


def test_user_from_dict_defaults():
    user = User.from_dict({})

    assert user.name == ""
    assert user.active is False
    assert user.avatar_urls == AvatarUrls()
    assert user.groups.items == []


def test_user_from_dict_ignores_password_and_unknown_keys():
    user = User.from_dict({"name": "fred", "password": "leaked", "locale": "en_AU"})

    assert user.name == "fred"
    assert user.password == ""


def test_user_password_not_in_repr():
    assert "abracadabra" not in repr(User(name="fred", password="abracadabra"))


def test_user_to_dict_omits_empty_values():
    assert User(name="fred").to_dict() == {"name": "fred"}


def test_user_to_dict_nested():
    user = User(
        name="fred",
        active=True,
        avatar_urls=AvatarUrls(x48="https://a/48", x16="https://a/16"),
    )

    assert user.to_dict() == {
        "name": "fred",
        "active": True,
        "avatarUrls": {"48x48": "https://a/48", "16x16": "https://a/16"},
    }


def test_group_members_page_keeps_envelope_fields():
    page = GroupMembersPage.from_dict(
        {"startAt": 10, "maxResults": 5, "total": 42, "values": [{"name": "fred"}]}
    )

    assert (page.start_at, page.max_results, page.total) == (10, 5, 42)
    assert [m.name for m in page.members] == ["fred"]


def test_group_search_options_always_has_all_params():
    assert GroupSearchOptions().to_params() == [
        ("startAt", "0"),
        ("maxResults", "0"),
        ("includeInactiveUsers", "false"),
    ]


def test_group_member_ref_from_one_param():
    ref = GroupMemberRef.from_params("fred")

    assert ref.account_id is None
    assert not ref.forces_account_id
    assert ref.to_dict() == {"name": "fred"}


def test_group_member_ref_from_two_params():
    ref = GroupMemberRef.from_params("fred", "abc-123")

    assert ref.forces_account_id
    assert ref.to_dict() == {"name": "fred", "accountId": "abc-123"}


@pytest.mark.parametrize("params", [(), ("a", "b", "c")])
def test_group_member_ref_wrong_arity(params):
    with pytest.raises(ValidationError, match="Invalid User add parameters"):
        GroupMemberRef.from_params(*params)


def test_group_member_ref_accepts_empty_values():
    account_only = GroupMemberRef.from_params("", "5b10ac8d82e05b22cc7d4ef5")
    empty_account = GroupMemberRef.from_params("fred", "")

    assert account_only.forces_account_id
    assert account_only.to_dict() == {"name": "", "accountId": "5b10ac8d82e05b22cc7d4ef5"}
    assert empty_account.forces_account_id
    assert empty_account.to_dict() == {"name": "fred"}


@pytest.mark.parametrize(
    "param,expected",
    [
        (with_max_results(5), UserSearchParam("maxResults", "5")),
        (with_start_at(0), UserSearchParam("startAt", "0")),
        (with_active(True), UserSearchParam("includeActive", "true")),
        (with_inactive(False), UserSearchParam("includeInactive", "false")),
        (with_query("fred@example.com"), UserSearchParam("query", "fred@example.com")),
        (with_username("john doe"), UserSearchParam("username", "john doe")),
        (with_account_id("abc"), UserSearchParam("accountId", "abc")),
        (with_property("team.lead=true"), UserSearchParam("property", "team.lead=true")),
    ],
)
def test_search_param_builders(param, expected):
    assert param == expected
