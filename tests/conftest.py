"""Pytest fixtures for git-branch-tidy tests"""
import io
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from git_branch_tidy.services.git_service import GitService


def make_console(**kwargs) -> Console:
    """A console writing to memory; read it back with console.file.getvalue()."""
    options = {"file": io.StringIO(), "width": 120, "color_system": None}
    options.update(kwargs)
    return Console(**options)


def feed_input(console: Console, *responses: str) -> Mock:
    """Script the answers console.input() will return, in order."""
    console.input = Mock(side_effect=list(responses))
    return console.input


def commit_file(repo: git.Repo, name: str, content: str, message: str) -> None:
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    repo.index.commit(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'protected_pattern': 'master',
        'literal_protected': False,
        'fetch': True,
        'force_delete': True,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a bare 'origin' next to it."""
    origin_path = temp_dir / "origin.git"
    origin = git.Repo.init(origin_path, bare=True)

    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")
    repo.git.branch('-M', 'master')

    repo.create_remote('origin', str(origin_path))
    repo.git.push('origin', 'master')

    yield repo

    repo.close()
    origin.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with two local-only branches and one pushed branch.

    Local: master, feature/x, feature/y, feature/pushed
    Remote: origin/master, origin/feature/pushed
    """
    repo = git_repo

    repo.git.checkout('-b', 'feature/x')
    commit_file(repo, "x.txt", "x\n", "Add x")
    repo.git.checkout('master')

    repo.git.checkout('-b', 'feature/y')
    commit_file(repo, "y.txt", "y\n", "Add y")
    repo.git.checkout('master')

    repo.git.checkout('-b', 'feature/pushed')
    commit_file(repo, "pushed.txt", "pushed\n", "Add pushed")
    repo.git.push('origin', 'feature/pushed')
    repo.git.checkout('master')

    yield repo


@pytest.fixture
def mock_git_service():
    """A GitService double returning listings set by the test."""
    service = Mock(spec=GitService)
    service.repo_path = "/fake/repo/path"
    service.list_local_branches = Mock(return_value=[])
    service.list_remote_branches = Mock(return_value=[])
    return service


@pytest.fixture
def feed():
    """Return a helper that scripts console.input() answers."""
    return feed_input


@pytest.fixture
def console_factory():
    """Return a helper that builds in-memory consoles with custom options."""
    return make_console
