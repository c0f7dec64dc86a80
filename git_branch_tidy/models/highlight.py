"""Value types for line highlighting"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ColorSpec:
    """Foreground and optional background color (rich color names)."""
    foreground: str
    background: Optional[str] = None

    @property
    def style(self) -> str:
        if self.background:
            return f"{self.foreground} on {self.background}"
        return self.foreground


@dataclass(frozen=True)
class Segment:
    """A slice of a line, flagged when it matched the highlight pattern."""
    text: str
    is_match: bool = False
