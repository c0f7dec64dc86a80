"""Command-line interface for git-branch-tidy"""

import sys
from rich.console import Console
from rich.markup import escape

from git_branch_tidy.cli.args import parse_args
from git_branch_tidy.config import Config
from git_branch_tidy.core.workflow import ReconciliationWorkflow, WorkflowOutcome
from git_branch_tidy.logging_config import get_log_file, setup_logging
from git_branch_tidy.services.git_service import GitService

console = Console()


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            protected_pattern=parsed_args.protected,
            literal_protected=parsed_args.literal,
            fetch=not parsed_args.no_fetch,
            force_delete=not parsed_args.safe,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]", highlight=False)
        return 1

    if parsed_args.debug:
        console.print("[yellow]Debug mode enabled[/yellow]")
        console.print(f"[dim]Logging to {get_log_file()}[/dim]")
        console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            console.print(f"  {key}: {escape(str(value))}", highlight=False)

    git_service = GitService(config)
    try:
        workflow = ReconciliationWorkflow(git_service, config, console)
        result = workflow.run(parsed_args.path)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    finally:
        git_service.close()

    return 1 if result.outcome is WorkflowOutcome.ABORTED else 0


if __name__ == "__main__":
    sys.exit(main())
