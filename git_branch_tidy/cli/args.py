"""Command-line argument parsing for git-branch-tidy."""

import argparse
from git_branch_tidy.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Interactively delete local git branches that no longer exist on the remote",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the git working tree (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-branch-tidy {__version__}")
    parser.add_argument(
        "--protected",
        default="master",
        metavar="PATTERN",
        help="Regular expression of branch names that are never offered for deletion "
        "(default: master; pass '' to protect nothing)",
    )
    parser.add_argument(
        "--literal",
        action="store_true",
        help="Treat --protected as plain text instead of a regular expression",
    )
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Do not run 'git fetch --all --prune' before listing remote branches",
    )
    parser.add_argument(
        "--safe",
        action="store_true",
        help="Use safe delete (-d) instead of force delete (-D)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
