"""
Line Parser - Turns ``HH:MM - HH:MM`` lines into entries.

Parsing never raises: every non-blank line yields exactly one entry, either
valid or tagged with a ParseErrorKind, so one bad line cannot hide the
others.

Known limitation: an end time earlier than the start time is read as the
next day. Only one midnight crossing is expressible, so spans of 24 hours
or more are silently misread rather than rejected.
"""

import logging
import re
from typing import List, Optional

from timecalc.domain.models import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    ParseErrorKind,
    TimeRangeEntry,
)

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})\s*-\s*([0-9]{1,2}):([0-9]{2})$")


def _invalid(raw_input: str, kind: ParseErrorKind) -> TimeRangeEntry:
    return TimeRangeEntry(raw_input=raw_input, is_valid=False, error_kind=kind)


def parse_line(line: str) -> Optional[TimeRangeEntry]:
    """
    Parse a single line.

    Args:
        line: One line of input; surrounding whitespace is ignored

    Returns:
        None for a blank line, otherwise a valid or invalid TimeRangeEntry
    """
    raw_input = line.strip()
    if not raw_input:
        return None

    match = LINE_PATTERN.match(raw_input)
    if not match:
        return _invalid(raw_input, ParseErrorKind.MALFORMED_FORMAT)

    start_hour, start_minute, end_hour, end_minute = (int(g) for g in match.groups())
    if start_hour > 23 or start_minute > 59 or end_hour > 23 or end_minute > 59:
        return _invalid(raw_input, ParseErrorKind.OUT_OF_RANGE)

    start_offset = start_hour * MINUTES_PER_HOUR + start_minute
    end_offset = end_hour * MINUTES_PER_HOUR + end_minute

    next_day = end_offset < start_offset
    if next_day:
        end_offset += MINUTES_PER_DAY

    hours, minutes = divmod(end_offset - start_offset, MINUTES_PER_HOUR)
    return TimeRangeEntry(
        raw_input=raw_input,
        is_valid=True,
        start_label=f"{start_hour:02d}:{start_minute:02d}",
        end_label=f"{end_hour:02d}:{end_minute:02d}",
        next_day=next_day,
        hours=hours,
        minutes=minutes,
    )


def parse_text(text: str) -> List[TimeRangeEntry]:
    """Parse every line of ``text`` in order, skipping blank lines."""
    entries = []
    for line in text.split("\n"):
        entry = parse_line(line)
        if entry is not None:
            entries.append(entry)

    invalid = sum(1 for e in entries if not e.is_valid)
    logger.debug(f"Parsed {len(entries)} entries ({invalid} invalid)")
    return entries
