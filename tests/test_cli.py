"""Tests for gitcred.cli."""

from typer.testing import CliRunner

from gitcred.cli import app
from gitcred.store import CredentialStore

runner = CliRunner()


def _invoke(tmp_path, *args, **kwargs):
    return runner.invoke(app, ["--home", str(tmp_path), *args], **kwargs)


def test_path(tmp_path):
    result = _invoke(tmp_path, "path")
    assert result.exit_code == 0
    assert result.stdout.strip() == str(tmp_path / ".git-credentials")


def test_path_from_environment(tmp_path):
    result = runner.invoke(app, ["path"], env={"GITCRED_HOME": str(tmp_path)})
    assert result.exit_code == 0
    assert result.stdout.strip() == str(tmp_path / ".git-credentials")


def test_store_then_get(tmp_path):
    result = _invoke(tmp_path, "store", "git.example.com", "-u", "alice", "-p", "s3cret")
    assert result.exit_code == 0
    assert "saved" in result.stdout

    result = _invoke(tmp_path, "get", "https://git.example.com/org/repo.git")
    assert result.exit_code == 0
    assert "alice" in result.stdout
    assert "s3cret" not in result.stdout

    result = _invoke(tmp_path, "get", "git.example.com", "--show")
    assert "s3cret" in result.stdout


def test_get_no_match_exits_nonzero(tmp_path):
    result = _invoke(tmp_path, "get", "git.example.com")
    assert result.exit_code == 1


def test_store_declined_keeps_existing_file(tmp_path):
    CredentialStore(tmp_path).write("old.example", "u", "p")
    result = _invoke(tmp_path, "store", "new.example", "-u", "alice", "-p", "pw", input="n\n")
    assert result.exit_code == 0
    assert CredentialStore(tmp_path).find("old.example") is not None


def test_store_yes_replaces_existing_file(tmp_path):
    CredentialStore(tmp_path).write("old.example", "u", "p")
    result = _invoke(tmp_path, "store", "new.example", "-u", "alice", "-p", "pw", "--yes")
    assert result.exit_code == 0
    store = CredentialStore(tmp_path)
    assert store.find("old.example") is None
    assert store.find("new.example").username == "alice"


def test_store_failure_exits_nonzero(tmp_path):
    (tmp_path / ".git-credentials").mkdir()
    result = _invoke(tmp_path, "store", "h.example", "-u", "alice", "-p", "pw", "--yes")
    assert result.exit_code == 1


def test_list(tmp_path):
    (tmp_path / ".git-credentials").write_text(
        "https://alice:pw@one.example\nhttps://bob@two.example\n", encoding="utf-8"
    )
    result = _invoke(tmp_path, "list")
    assert result.exit_code == 0
    assert "one.example" in result.stdout
    assert "Skipped 1 malformed line(s)" in result.stdout


def test_list_missing_file(tmp_path):
    result = _invoke(tmp_path, "list")
    assert result.exit_code == 0
    assert "No credentials file" in result.stdout


def test_mirror_name():
    result = runner.invoke(app, ["mirror-name", "https://github.com/org/repo.git"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "mirror__github.com__org__repo.git"


def test_mirror_url():
    result = runner.invoke(
        app, ["mirror-url", "https://mirror.example.com", "git@github.com:org/repo.git"]
    )
    assert result.exit_code == 0
    assert (
        result.stdout.strip()
        == "https://mirror.example.com/syncuser/mirror__github.com__org__repo.git"
    )


def test_info(tmp_path):
    CredentialStore(tmp_path).write("h.example", "u", "p")
    result = _invoke(tmp_path, "info")
    assert result.exit_code == 0
    assert "gitcred info" in result.stdout
    assert "0o600" in result.stdout
