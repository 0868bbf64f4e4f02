"""Tests for tt.git runner and diff collection."""

import shutil
import subprocess
from unittest.mock import MagicMock

import pytest

from tt.errors import ErrorKind
from tt.git.diff import DiffPayload, DiffScope, get_changed_files, get_diff
from tt.git.exceptions import (
    GitError,
    NoChangesError,
    NoRepositoryError,
    ToolUnavailableError,
)
from tt.git.runner import _run_git_command, ensure_repository


def fake_git(outputs):
    """Build a subprocess.run replacement keyed by git arguments."""

    def run(cmd, **kwargs):
        value = outputs.get(tuple(cmd[1:]), "")
        if isinstance(value, Exception):
            raise value
        result = MagicMock()
        result.stdout = value
        result.returncode = 0
        return result

    return run


@pytest.fixture
def git_on_path(mocker):
    """Pretend git is installed."""
    return mocker.patch("tt.git.runner.shutil.which", return_value="/usr/bin/git")


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mock_result = MagicMock()
        mock_result.stdout = "output\n"
        mock_result.returncode = 0

        mocker.patch("subprocess.run", return_value=mock_result)

        result = _run_git_command(["status"])
        assert result == "output"

    def test_passes_cwd(self, mocker, temp_dir):
        """Test that cwd is forwarded to subprocess."""
        mock_run = mocker.patch("subprocess.run", return_value=MagicMock(stdout=""))

        _run_git_command(["status"], cwd=temp_dir)

        assert mock_run.call_args.kwargs["cwd"] == temp_dir

    def test_decodes_leniently(self, mocker):
        """Test output is decoded as UTF-8 with replacement."""
        mock_run = mocker.patch("subprocess.run", return_value=MagicMock(stdout=""))

        _run_git_command(["diff"])

        assert mock_run.call_args.kwargs["encoding"] == "utf-8"
        assert mock_run.call_args.kwargs["errors"] == "replace"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="error")
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["invalid"])

        assert "Git command failed" in str(exc_info.value)
        assert exc_info.value.kind == ErrorKind.COLLECTION

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises ToolUnavailableError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(ToolUnavailableError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)
        assert exc_info.value.kind == ErrorKind.PRECONDITION


class TestEnsureRepository:
    """Tests for ensure_repository function."""

    def test_inside_work_tree(self, mocker):
        """Test no error inside a repository."""
        mocker.patch("subprocess.run", return_value=MagicMock(stdout="true\n"))

        ensure_repository()

    def test_not_a_repository(self, mocker):
        """Test NoRepositoryError outside a repository."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="not a git repository")
        )

        with pytest.raises(NoRepositoryError) as exc_info:
            ensure_repository()

        assert "Not in a git repository" in str(exc_info.value)
        assert exc_info.value.kind == ErrorKind.PRECONDITION


class TestDiffPayload:
    """Tests for DiffPayload dataclass."""

    def test_create_payload(self, sample_diff):
        """Test creating a payload."""
        payload = DiffPayload(text=sample_diff, scope=DiffScope.STAGED, files=["app.py"])

        assert payload.scope == DiffScope.STAGED
        assert payload.files == ["app.py"]

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_rejects_empty_text(self, text):
        """Test that an empty diff cannot be represented."""
        with pytest.raises(ValueError):
            DiffPayload(text=text, scope=DiffScope.UNSTAGED)


class TestGetDiff:
    """Tests for get_diff function."""

    def test_prefers_staged_diff(self, mocker, git_on_path, sample_diff):
        """Test that the staged diff wins over the unstaged one."""
        mock_run = mocker.patch("subprocess.run", side_effect=fake_git({
            ("rev-parse", "--is-inside-work-tree"): "true",
            ("diff", "--staged"): sample_diff,
            ("diff", "--staged", "--name-only"): "app.py\n",
            ("diff",): "unstaged stuff",
        }))

        payload = get_diff()

        assert payload.scope == DiffScope.STAGED
        assert payload.text == sample_diff.strip()
        assert payload.files == ["app.py"]
        called = [tuple(c.args[0][1:]) for c in mock_run.call_args_list]
        assert ("diff",) not in called

    def test_falls_back_to_unstaged(self, mocker, git_on_path):
        """Test the unstaged diff is used when nothing is staged."""
        mocker.patch("subprocess.run", side_effect=fake_git({
            ("rev-parse", "--is-inside-work-tree"): "true",
            ("diff", "--staged"): "",
            ("diff",): "diff --git a/x b/x\n+line",
            ("diff", "--name-only"): "x\ny\n",
        }))

        payload = get_diff()

        assert payload.scope == DiffScope.UNSTAGED
        assert payload.text == "diff --git a/x b/x\n+line"
        assert payload.files == ["x", "y"]

    def test_no_changes_raises(self, mocker, git_on_path):
        """Test NoChangesError when both diffs are empty."""
        mocker.patch("subprocess.run", side_effect=fake_git({
            ("rev-parse", "--is-inside-work-tree"): "true",
        }))

        with pytest.raises(NoChangesError) as exc_info:
            get_diff()

        assert exc_info.value.kind == ErrorKind.COLLECTION

    def test_git_missing(self, mocker):
        """Test ToolUnavailableError before any git call."""
        mocker.patch("tt.git.runner.shutil.which", return_value=None)
        mock_run = mocker.patch("subprocess.run")

        with pytest.raises(ToolUnavailableError):
            get_diff()

        mock_run.assert_not_called()

    def test_not_a_repository(self, mocker, git_on_path):
        """Test NoRepositoryError outside a repository."""
        mocker.patch("subprocess.run", side_effect=fake_git({
            ("rev-parse", "--is-inside-work-tree"): subprocess.CalledProcessError(
                128, "git", stderr="fatal: not a git repository"
            ),
        }))

        with pytest.raises(NoRepositoryError):
            get_diff()

    def test_diff_failure_propagates(self, mocker, git_on_path):
        """Test that a failing diff query is not treated as empty."""
        mocker.patch("subprocess.run", side_effect=fake_git({
            ("rev-parse", "--is-inside-work-tree"): "true",
            ("diff", "--staged"): subprocess.CalledProcessError(1, "git", stderr="boom"),
        }))

        with pytest.raises(GitError) as exc_info:
            get_diff()

        assert not isinstance(exc_info.value, NoChangesError)


class TestGetChangedFiles:
    """Tests for get_changed_files function."""

    def test_staged_names(self, mocker, git_on_path):
        """Test staged file names are returned."""
        mocker.patch("subprocess.run", side_effect=fake_git({
            ("diff", "--staged", "--name-only"): "a.py\nb.py\n",
            ("diff", "--name-only"): "c.py\n",
        }))

        assert get_changed_files() == ["a.py", "b.py"]

    def test_falls_back_to_unstaged(self, mocker, git_on_path):
        """Test unstaged names are used when nothing is staged."""
        mocker.patch("subprocess.run", side_effect=fake_git({
            ("diff", "--name-only"): "c.py\n",
        }))

        assert get_changed_files() == ["c.py"]

    def test_no_files_raises(self, mocker, git_on_path):
        """Test NoChangesError when no files changed."""
        mocker.patch("subprocess.run", side_effect=fake_git({}))

        with pytest.raises(NoChangesError):
            get_changed_files()


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
class TestGetDiffWithGit:
    """Tests against a real temporary repository."""

    def test_non_utf8_content(self, temp_dir):
        """Test a Latin-1 file yields a diff instead of a decode error."""
        subprocess.run(["git", "init"], cwd=temp_dir, check=True, capture_output=True)
        (temp_dir / "latin1.txt").write_bytes(b"caf\xe9\n")
        subprocess.run(["git", "add", "latin1.txt"], cwd=temp_dir, check=True, capture_output=True)

        payload = get_diff(cwd=temp_dir)

        assert payload.scope == DiffScope.STAGED
        assert payload.files == ["latin1.txt"]
        assert "caf\ufffd" in payload.text
