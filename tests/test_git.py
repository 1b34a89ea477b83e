import subprocess
from datetime import date

from tools.portfolio import git as git_mod
from tools.portfolio.git import git_last_commit_date


def test_untracked_file_has_no_date(tmp_path):
    path = tmp_path / "post.md"
    path.write_text("x", encoding="utf-8")
    assert git_last_commit_date(path) is None


def test_parses_short_author_date(tmp_path, monkeypatch):
    def fake_run(cmd, **kwargs):
        assert "--format=%as" in cmd
        return subprocess.CompletedProcess(cmd, 0, stdout="2023-04-05\n", stderr="")

    monkeypatch.setattr(git_mod.subprocess, "run", fake_run)
    assert git_last_commit_date(tmp_path / "post.md") == date(2023, 4, 5)


def test_missing_git_binary(tmp_path, monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(git_mod.subprocess, "run", fake_run)
    assert git_last_commit_date(tmp_path / "post.md") is None
