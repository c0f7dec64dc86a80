"""Branch row model used by the selection session"""
from dataclasses import dataclass


@dataclass
class BranchRow:
    """A local-only branch offered for deletion."""
    id: int
    branch: str
    marked_for_deletion: bool = False

    def toggle(self) -> None:
        """Flip the deletion mark."""
        self.marked_for_deletion = not self.marked_for_deletion
