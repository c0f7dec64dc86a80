"""Comparison of local and remote branch listings"""
import re
from typing import Iterable, List, Optional, Union

from git_branch_tidy.constants import BRANCH_MARKERS
from git_branch_tidy.models.branch import BranchRow
from git_branch_tidy.services.highlighter import compile_pattern


def normalize_branch_name(raw: str) -> str:
    """
    Strip 'git branch' markers and surrounding whitespace from a listing line.

    Args:
        raw: A line such as "* main" or "+ feature/x"

    Returns:
        The bare branch name (possibly empty)
    """
    return raw.strip().lstrip(BRANCH_MARKERS).strip()


def normalize_remote_name(raw: str) -> str:
    """Strip a remote listing line, dropping the target of symbolic refs.

    "origin/HEAD -> origin/main" becomes "origin/HEAD".
    """
    return raw.split(" -> ", 1)[0].strip()


def compute_candidates(
    local: Iterable[str],
    remote: Iterable[str],
    exclude: Optional[Union[str, "re.Pattern[str]"]] = None,
) -> List[BranchRow]:
    """
    Find local branches that have no counterpart among the remote branches.

    A local branch has a counterpart when any remote name contains it
    (so "feature/x" is covered by "origin/feature/x"). Branches matching
    ``exclude`` are never returned. Detached HEAD lines such as
    "(HEAD detached at 1a2b3c)" are not branches and are skipped.

    Args:
        local: Raw local branch listing, one name per element
        remote: Raw remote branch listing, one name per element
        exclude: Pattern (or pattern source) of protected branches, None for none

    Returns:
        Candidate rows numbered from 1 in local listing order, without duplicates

    Raises:
        InvalidPatternError: If ``exclude`` is a string that does not compile
    """
    if isinstance(exclude, str):
        exclude = compile_pattern(exclude) if exclude else None

    remote_names = [name for name in (normalize_remote_name(r) for r in remote) if name]

    candidates: List[BranchRow] = []
    seen = set()
    for raw in local:
        name = normalize_branch_name(raw)
        if not name or name.startswith("(") or name in seen:
            continue
        seen.add(name)
        if exclude is not None and exclude.search(name):
            continue
        if any(name in remote_name for remote_name in remote_names):
            continue
        candidates.append(BranchRow(id=len(candidates) + 1, branch=name))
    return candidates
