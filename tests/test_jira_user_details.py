from unittest.mock import MagicMock, patch

import jira_user_details
from jira_client import ResponseError, User, UserGroup


def test_help(capsys):
    assert jira_user_details.main(["--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_no_arguments():
    assert jira_user_details.main([]) == 2


def test_show_config_masks_token(monkeypatch, capsys):
    monkeypatch.setenv("JIRA_BASE_URL", "https://jira.example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "s3cr3t")

    assert jira_user_details.main(["--show-config"]) == 0

    out = capsys.readouterr().out
    assert "https://jira.example.com" in out
    assert "s3cr3t" not in out
    assert "********" in out


def test_missing_base_url(monkeypatch, capsys):
    monkeypatch.delenv("JIRA_BASE_URL", raising=False)

    assert jira_user_details.main(["fred"]) == 2
    assert "JIRA_BASE_URL" in capsys.readouterr().err


@patch("jira_user_details.JiraClient")
def test_prints_user_and_groups(jira_client_mock, capsys):
    client = MagicMock()
    client.__enter__.return_value = client
    client.user.get.return_value = User(
        name="fred", display_name="Fred F. User", email_address="fred@example.com", active=True
    )
    client.user.get_groups.return_value = [UserGroup(name="jira-users")]
    jira_client_mock.from_env.return_value = client

    assert jira_user_details.main(["fred"]) == 0

    out = capsys.readouterr().out
    assert "Fred F. User" in out
    assert "- jira-users" in out
    client.user.get.assert_called_with("fred")


@patch("jira_user_details.JiraClient")
def test_lookup_failure_sets_exit_code(jira_client_mock, capsys):
    client = MagicMock()
    client.__enter__.return_value = client
    client.user.get.side_effect = [ResponseError("not found"), User(name="wilma")]
    client.user.get_groups.return_value = []
    jira_client_mock.from_env.return_value = client

    assert jira_user_details.main(["ghost", "wilma"]) == 1

    out = capsys.readouterr().out
    assert "Jira error: not found" in out
    assert "(none)" in out
