from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from hoist.errors import SyncError
from hoist.git import GitClient


class TestGitClient:
    @patch("hoist.git.subprocess.run")
    def test_clone(self, mock_run, tmp_path: Path):
        target: Path = tmp_path / "charts"

        GitClient().clone("https://example.com/charts.git", target)

        mock_run.assert_called_once()
        cmd = mock_run.call_args[0][0]
        assert cmd == ["git", "clone", "https://example.com/charts.git", str(target)]

    @patch("hoist.git.subprocess.run")
    def test_update_runs_in_working_copy(self, mock_run, tmp_path: Path):
        GitClient().update(tmp_path)

        cmds = [c[0][0] for c in mock_run.call_args_list]
        assert cmds == [["git", "fetch", "--tags", "origin"], ["git", "pull"]]
        assert all(c[1]["cwd"] == str(tmp_path) for c in mock_run.call_args_list)

    @patch("hoist.git.subprocess.run")
    def test_failure_raises_sync_error(self, mock_run, tmp_path: Path):
        mock_run.side_effect = subprocess.CalledProcessError(
            128, ["git", "pull"], stderr="fatal: not a git repository\n"
        )

        with pytest.raises(SyncError, match="not a git repository"):
            GitClient().update(tmp_path)

    @patch("hoist.git.subprocess.run")
    def test_missing_binary(self, mock_run, tmp_path: Path):
        mock_run.side_effect = FileNotFoundError("git")

        with pytest.raises(SyncError, match="Could not run git"):
            GitClient().clone("https://example.com/charts.git", tmp_path / "x")

    def test_check_local_without_git_dir(self, tmp_path: Path):
        assert GitClient().check_local(tmp_path) is False

    @patch("hoist.git.subprocess.run")
    def test_check_local_top_level(self, mock_run, tmp_path: Path):
        (tmp_path / ".git").mkdir()
        mock_run.return_value = MagicMock(stdout=f"{tmp_path.resolve()}\n")

        assert GitClient().check_local(tmp_path) is True

    @patch("hoist.git.subprocess.run")
    def test_check_local_rev_parse_fails(self, mock_run, tmp_path: Path):
        (tmp_path / ".git").mkdir()
        mock_run.side_effect = subprocess.CalledProcessError(128, ["git"], stderr="")

        assert GitClient().check_local(tmp_path) is False
