"""
git-branch-tidy - Interactive cleanup of local-only git branches
"""

from .__version__ import __version__
from .core import ReconciliationWorkflow, SelectionSession
from .cli.main import main

__all__ = ["ReconciliationWorkflow", "SelectionSession", "main", "__version__"]
