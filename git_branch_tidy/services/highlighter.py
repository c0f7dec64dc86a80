"""Pattern-based line highlighting for terminal output.

A line is split into alternating non-matching and matching segments;
matching segments are written in a highlight color, the rest in the
console's default style. Segmentation is pure, rendering is the only
side effect.
"""
import re
from typing import List, Optional, Union

from rich.console import Console
from rich.text import Text

from git_branch_tidy.exceptions import InvalidPatternError
from git_branch_tidy.models.highlight import ColorSpec, Segment
from git_branch_tidy.logging_config import get_logger

logger = get_logger(__name__)

PatternLike = Union[str, "re.Pattern[str]"]

DEFAULT_COLOR = ColorSpec("yellow")


def compile_pattern(pattern: PatternLike, simple_match: bool = False) -> "re.Pattern[str]":
    """Compile a highlight pattern.

    Args:
        pattern: Regular expression source, literal text or an already compiled pattern
        simple_match: If True, treat ``pattern`` as literal text

    Raises:
        InvalidPatternError: If the pattern is empty or is not a valid regular expression
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if not pattern:
        raise InvalidPatternError("", "pattern cannot be empty")

    source = re.escape(pattern) if simple_match else pattern
    try:
        return re.compile(source)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def segment_line(
    line: str,
    pattern: PatternLike,
    whole_line: bool = False,
    simple_match: bool = False,
) -> List[Segment]:
    """Split a single line into non-matching and matching segments.

    With ``whole_line`` the result is one segment covering the line, flagged
    when the pattern has a non-empty match in it. Otherwise the result alternates
    non-match, match, non-match ... and always starts and ends with a
    (possibly empty) non-matching segment, so N matches give 2N+1 segments.
    Empty matches are skipped.

    Raises:
        ValueError: If ``line`` contains a line break
        InvalidPatternError: If ``pattern`` cannot be compiled
    """
    if "\n" in line or "\r" in line:
        raise ValueError("segment_line expects a single line; split multi-line text first")

    regex = compile_pattern(pattern, simple_match)

    if whole_line:
        # Empty matches do not count, same as in the segmented mode
        matched = any(match.end() > match.start() for match in regex.finditer(line))
        return [Segment(line, matched)]

    segments: List[Segment] = []
    position = 0
    for match in regex.finditer(line):
        start, end = match.span()
        if start == end:
            continue
        segments.append(Segment(line[position:start], False))
        segments.append(Segment(line[start:end], True))
        position = end
    segments.append(Segment(line[position:], False))
    return segments


def render_segments(console: Console, segments: List[Segment], color: ColorSpec) -> None:
    """Write the segments of one line, followed by a single line break."""
    text = Text()
    for segment in segments:
        text.append(segment.text, style=color.style if segment.is_match else None)
    console.print(text, soft_wrap=True)


class Highlighter:
    """Writes text to a console with pattern matches colorized."""

    def __init__(self, console: Optional[Console] = None, color: ColorSpec = DEFAULT_COLOR):
        self.console = console or Console()
        self.color = color

    def highlight(
        self,
        text: str,
        pattern: PatternLike,
        color: Optional[ColorSpec] = None,
        simple_match: bool = False,
        whole_line: bool = False,
    ) -> None:
        """Render ``text`` line by line, coloring what ``pattern`` matches.

        The pattern is compiled before anything is written, so an
        InvalidPatternError leaves the console untouched.
        """
        regex = compile_pattern(pattern, simple_match)
        color = color or self.color
        for line in text.splitlines() or [""]:
            render_segments(self.console, segment_line(line, regex, whole_line), color)
