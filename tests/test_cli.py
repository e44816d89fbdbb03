"""Tests for the command dispatcher."""

import logging
import pytest
from unittest.mock import patch
from ghrepo.cli.main import CommandOptions, dispatch, main, EXIT_OK, EXIT_FAILURE, EXIT_USAGE
from ghrepo.core.errors import DecodeError, RemoteError, TransportError
from ghrepo.core.models import Repository
from ghrepo.logger import get_logger

API = "https://api.github.com"


def _opts(**kw):
    kw.setdefault("api_url", API)
    return CommandOptions(**kw)


class TestDispatchCreateRepo:

    @patch("ghrepo.cli.main.create_repo")
    def test_success_output(self, mock_create, capsys):
        code = dispatch(_opts(create_repo=True, repo_name="demo", token="T"))

        assert code == EXIT_OK
        mock_create.assert_called_once_with("demo", "", False, "T", api_url=API)
        out = capsys.readouterr().out.splitlines()
        assert out == ["Creating repo: demo", "Created repo: demo"]

    @patch("ghrepo.cli.main.create_repo")
    def test_missing_token_exits_2_without_request(self, mock_create, capsys):
        code = dispatch(_opts(create_repo=True, repo_name="demo"))

        assert code == EXIT_USAGE
        mock_create.assert_not_called()
        captured = capsys.readouterr()
        assert "Creating repo" not in captured.out
        assert "token" in captured.err

    @patch("ghrepo.cli.main.create_repo", side_effect=RemoteError(422, '{"message": "Validation Failed"}'))
    def test_rejection_prints_status_and_body(self, mock_create, capsys):
        code = dispatch(_opts(create_repo=True, repo_name="demo", token="T"))

        assert code == EXIT_FAILURE
        out = capsys.readouterr().out
        assert "Response code is 422" in out
        assert "Validation Failed" in out
        assert "Created repo" not in out

    @patch("ghrepo.cli.main.create_repo", side_effect=TransportError("POST failed: refused"))
    def test_transport_error(self, mock_create, capsys):
        code = dispatch(_opts(create_repo=True, repo_name="demo", token="T"))
        assert code == EXIT_FAILURE
        assert "refused" in capsys.readouterr().err


class TestDispatchListRepos:

    @patch("ghrepo.cli.main.list_repos")
    def test_prints_indented_json(self, mock_list, capsys):
        mock_list.return_value = [Repository(name="a"), Repository(name="b", private=True)]

        code = dispatch(_opts(get_repos=True, owner="octocat", token="T"))

        assert code == EXIT_OK
        mock_list.assert_called_once_with("octocat", "T", api_url=API)
        out = capsys.readouterr().out
        assert out.index('"a"') < out.index('"b"')
        assert '  {\n    "name": "a"' in out

    @patch("ghrepo.cli.main.list_repos", side_effect=DecodeError("Malformed JSON in response"))
    def test_decode_error(self, mock_list, capsys):
        code = dispatch(_opts(get_repos=True, owner="octocat", token="T"))
        assert code == EXIT_FAILURE
        assert "Malformed JSON" in capsys.readouterr().err

    @patch("ghrepo.cli.main.list_repos", side_effect=RemoteError(401, ""))
    def test_remote_error(self, mock_list, capsys):
        code = dispatch(_opts(get_repos=True, owner="octocat", token="T"))
        assert code == EXIT_FAILURE
        assert "Response code is 401" in capsys.readouterr().out


class TestDispatchCreateIssue:

    @patch("ghrepo.cli.main.create_issue")
    def test_success(self, mock_issue, capsys):
        code = dispatch(_opts(create_issue=True, owner="octocat", repo_name="demo", title="Bug", body="b", token="T"))

        assert code == EXIT_OK
        mock_issue.assert_called_once_with("octocat", "demo", "Bug", "T", "b", api_url=API)
        assert "Created issue in octocat/demo: Bug" in capsys.readouterr().out


class TestDispatchNoAction:

    @patch("ghrepo.cli.main.create_issue")
    @patch("ghrepo.cli.main.list_repos")
    @patch("ghrepo.cli.main.create_repo")
    def test_no_action_is_silent_success(self, mock_create, mock_list, mock_issue, capsys):
        assert dispatch(_opts(token="T", owner="octocat")) == EXIT_OK
        mock_create.assert_not_called()
        mock_list.assert_not_called()
        mock_issue.assert_not_called()
        assert capsys.readouterr().out == ""


class TestMain:

    def test_no_flags_exits_0(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 0

    def test_positional_argument_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["stray"])
        assert exc.value.code == 2

    def test_unknown_flag_exits_2(self):
        with pytest.raises(SystemExit) as exc:
            main(["--nope"])
        assert exc.value.code == 2

    def test_help_exits_0(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "--createRepo" in out
        assert "--getrepos" in out

    @patch("ghrepo.cli.main.create_repo")
    def test_flags_reach_operation(self, mock_create):
        with pytest.raises(SystemExit) as exc:
            main(["--createRepo", "--repoName", "demo", "--description", "d", "--isPrivate", "--token", "T"])
        assert exc.value.code == 0
        mock_create.assert_called_once_with("demo", "d", True, "T", api_url=API)

    @patch("ghrepo.cli.main.list_repos", return_value=[])
    def test_token_and_owner_from_environment(self, mock_list, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ENV")
        monkeypatch.setenv("GITHUB_OWNER", "someone")
        with pytest.raises(SystemExit) as exc:
            main(["--getrepos"])
        assert exc.value.code == 0
        mock_list.assert_called_once_with("someone", "ENV", api_url=API)

    @patch("ghrepo.cli.main.list_repos", return_value=[])
    def test_flag_beats_environment(self, mock_list, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ENV")
        with pytest.raises(SystemExit):
            main(["--getrepos", "--owner", "o", "--token", "FLAG"])
        mock_list.assert_called_once_with("o", "FLAG", api_url=API)

    def test_missing_owner_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--getrepos", "--token", "T"])
        assert exc.value.code == 2
        assert "owner" in capsys.readouterr().err

    def test_verbose_enables_debug_logging(self):
        with pytest.raises(SystemExit):
            main(["--verbose"])
        assert logging.getLogger("ghrepo").level == logging.DEBUG
        assert get_logger() is logging.getLogger("ghrepo")
        logging.getLogger("ghrepo").setLevel(logging.WARNING)

    def test_malformed_config_exits_2(self, tmp_path, capsys):
        cfg = tmp_path / "bad.toml"
        cfg.write_text("[github\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(cfg), "--getrepos", "--owner", "o", "--token", "T"])
        assert exc.value.code == 2
        assert "Invalid config file" in capsys.readouterr().err

    def test_wrong_type_in_config_exits_2(self, tmp_path, capsys):
        (tmp_path / "config.toml").write_text("[github]\napi_url = 5\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2
        assert "api_url must be a string" in capsys.readouterr().err

    def test_bad_repo_name_for_issue_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--createIssue", "--owner", "octocat", "--repoName", "../../user/repos",
                  "--title", "Bug", "--token", "T"])
        assert exc.value.code == 2
        assert "Invalid repo name" in capsys.readouterr().err
