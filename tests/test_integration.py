"""Integration tests against real repositories"""
from unittest.mock import Mock, patch

from git_branch_tidy.cli.main import main
from git_branch_tidy.core.workflow import ReconciliationWorkflow, WorkflowOutcome
from git_branch_tidy.services.git_service import GitService


def head_names(repo):
    return sorted(head.name for head in repo.heads)


class TestReconciliationPass:
    """Full passes with GitService on a real clone."""

    def test_delete_selected_branch(self, git_repo_with_branches, mock_config, console, feed):
        feed(console, "1", "y")
        workflow = ReconciliationWorkflow(GitService(mock_config), mock_config, console)

        result = workflow.run(git_repo_with_branches.working_dir)

        assert result.outcome is WorkflowOutcome.COMPLETED
        assert result.deleted == ["feature/x"]
        assert [(row.id, row.branch) for row in result.remaining] == [(1, "feature/y")]
        assert head_names(git_repo_with_branches) == ["feature/pushed", "feature/y", "master"]

    def test_select_all_deletes_every_local_only_branch(
        self, git_repo_with_branches, mock_config, console, feed
    ):
        feed(console, "A", "yes")
        workflow = ReconciliationWorkflow(GitService(mock_config), mock_config, console)

        result = workflow.run(git_repo_with_branches.working_dir)

        assert result.deleted == ["feature/x", "feature/y"]
        assert result.remaining == []
        assert head_names(git_repo_with_branches) == ["feature/pushed", "master"]

    def test_quit_keeps_branches(self, git_repo_with_branches, mock_config, console, feed):
        feed(console, "1,2", "n", "q")
        before = head_names(git_repo_with_branches)
        workflow = ReconciliationWorkflow(GitService(mock_config), mock_config, console)

        result = workflow.run(git_repo_with_branches.working_dir)

        assert result.outcome is WorkflowOutcome.QUIT
        assert head_names(git_repo_with_branches) == before

    def test_current_branch_failure_is_reported(self, git_repo_with_branches, mock_config, console, feed):
        git_repo_with_branches.git.checkout('feature/x')
        feed(console, "1,2", "y")
        workflow = ReconciliationWorkflow(GitService(mock_config), mock_config, console)

        result = workflow.run(git_repo_with_branches.working_dir)

        assert result.deleted == ["feature/y"]
        assert result.failed == [("feature/x", "Cannot delete current branch")]
        assert [row.branch for row in result.remaining] == ["feature/x"]

    def test_fresh_clone_has_no_differences(self, git_repo, mock_config, console, feed):
        inputs = feed(console)
        workflow = ReconciliationWorkflow(GitService(mock_config), mock_config, console)

        result = workflow.run(git_repo.working_dir)

        assert result.outcome is WorkflowOutcome.NO_DIFFERENCES
        assert inputs.call_count == 0


class TestCli:
    """Test the command-line entry point."""

    def test_invalid_path_exits_with_error(self, temp_dir, console):
        with patch('git_branch_tidy.cli.main.console', console):
            code = main([str(temp_dir / "missing")])

        assert code == 1
        assert "not a valid git repository" in console.file.getvalue()

    def test_invalid_protected_pattern(self, git_repo, console):
        with patch('git_branch_tidy.cli.main.console', console):
            code = main([git_repo.working_dir, "--protected", "("])

        assert code == 1
        assert "Invalid configuration" in console.file.getvalue()

    def test_quit_exits_cleanly(self, git_repo_with_branches, console, feed):
        feed(console, "q")
        with patch('git_branch_tidy.cli.main.console', console):
            code = main([git_repo_with_branches.working_dir, "--no-fetch"])

        assert code == 0
        assert len(git_repo_with_branches.heads) == 4

    def test_literal_protection(self, git_repo_with_branches, console, feed):
        feed(console, "a", "y")
        with patch('git_branch_tidy.cli.main.console', console):
            code = main([git_repo_with_branches.working_dir, "--protected", "feature/y", "--literal"])

        assert code == 0
        assert head_names(git_repo_with_branches) == ["feature/pushed", "feature/y", "master"]

    def test_keyboard_interrupt(self, git_repo_with_branches, console):
        console.input = Mock(side_effect=KeyboardInterrupt)
        with patch('git_branch_tidy.cli.main.console', console):
            code = main([git_repo_with_branches.working_dir])

        assert code == 1
        assert "cancelled" in console.file.getvalue()
