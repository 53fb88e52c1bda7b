"""
Text Normalizer - Cleans pasted text before parsing.

Users paste ranges out of chat logs, task lists and notes, so the raw text
carries bullets, check boxes, full-width colons and assorted dashes. Each
mode is a pure text -> text transform; nothing here reports parse errors.
Lines that do not look like a range are passed through or dropped
depending on the mode.
"""

import re
from typing import Union

from timecalc.domain.models import NormalizeMode

# Two H:MM clusters joined by a dash, tilde, "to" or "至"
TIME_RANGE_PATTERN = re.compile(
    r"([0-9]{1,2})[：:]([0-9]{1,2})\s*(?:-|–|—|~|～|to|至)\s*([0-9]{1,2})[：:]([0-9]{1,2})"
)

# "- [ ] " / "* [x] " task items, or a plain "- " / "• " bullet
LIST_MARKER_PATTERN = re.compile(r"^\s*(?:[-*+•·]\s+\[(?:\s|x|X)\]\s+|[-*+•·]\s+)")

MAX_HOUR = 23
MAX_MINUTE = 59


def _canonical_range(match: re.Match) -> str:
    """Render a range match as ``HH:MM - HH:MM``, clamping out-of-range values."""
    start_hour, start_minute, end_hour, end_minute = (int(g) for g in match.groups())
    return (
        f"{min(MAX_HOUR, start_hour):02d}:{min(MAX_MINUTE, start_minute):02d}"
        f" - "
        f"{min(MAX_HOUR, end_hour):02d}:{min(MAX_MINUTE, end_minute):02d}"
    )


def strip_list_markers(text: str) -> str:
    """Remove one leading bullet or check-box marker from every line."""
    return "\n".join(LIST_MARKER_PATTERN.sub("", line, count=1) for line in text.split("\n"))


def normalize_ranges(text: str) -> str:
    """Rewrite every range on every line to the canonical form, in place."""
    return TIME_RANGE_PATTERN.sub(_canonical_range, text)


def extract_ranges_only(text: str) -> str:
    """
    Keep only the first range of each line.

    Lines without a range are dropped.
    """
    lines = []
    for line in text.split("\n"):
        match = TIME_RANGE_PATTERN.search(line)
        if match:
            lines.append(_canonical_range(match))
    return "\n".join(lines)


def remove_blank_lines(text: str) -> str:
    """Drop lines that are empty after trimming whitespace."""
    return "\n".join(line for line in text.split("\n") if line.strip())


def smart_clean(text: str) -> str:
    """Strip markers, normalize, extract, then drop blank lines."""
    return remove_blank_lines(extract_ranges_only(normalize_ranges(strip_list_markers(text))))


_MODE_HANDLERS = {
    NormalizeMode.SMART: smart_clean,
    NormalizeMode.STRIP_LIST_MARKERS: strip_list_markers,
    NormalizeMode.NORMALIZE_RANGES: normalize_ranges,
    NormalizeMode.EXTRACT_RANGES_ONLY: extract_ranges_only,
    NormalizeMode.REMOVE_BLANK_LINES: remove_blank_lines,
}


def normalize_text(text: str, mode: Union[NormalizeMode, str] = NormalizeMode.SMART) -> str:
    """
    Apply one cleanup mode to the whole text.

    Args:
        text: Raw multi-line input
        mode: A NormalizeMode or its string value

    Returns:
        The transformed text

    Raises:
        ValueError: If mode is not a known cleanup mode
    """
    return _MODE_HANDLERS[NormalizeMode(mode)](text)
