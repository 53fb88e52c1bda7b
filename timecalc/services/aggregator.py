"""
Duration Aggregator - Holds the entry list and derives the total.

The total is recomputed from scratch on every call. Sessions hold tens of
entries, so there is no incremental bookkeeping to keep in sync.
"""

import logging
from typing import Iterable, List, Tuple

from timecalc.domain.models import AggregateDuration, TimeRangeEntry

logger = logging.getLogger(__name__)


class DurationAggregator:
    """
    Ordered sequence of parsed entries.

    Entry order is input line order, valid or not. Removal by id is the only
    mutation besides replacing or clearing the whole list.
    """

    def __init__(self, entries: Iterable[TimeRangeEntry] = ()):
        self._entries: List[TimeRangeEntry] = list(entries)

    @property
    def entries(self) -> Tuple[TimeRangeEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load(self, entries: Iterable[TimeRangeEntry]) -> None:
        """Replace the current entries with a freshly parsed list."""
        self._entries = list(entries)

    def valid_entries(self) -> List[TimeRangeEntry]:
        return [e for e in self._entries if e.is_valid]

    def valid_count(self) -> int:
        return len(self.valid_entries())

    def total(self) -> AggregateDuration:
        """Sum of all valid entries; invalid ones contribute nothing."""
        return AggregateDuration.from_minutes(sum(e.duration_minutes for e in self._entries))

    def remove(self, entry_id: str) -> bool:
        """
        Remove one entry by id.

        Returns:
            True if an entry was removed, False if the id was unknown
        """
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                logger.debug(f"Removed entry {entry_id} ({entry.raw_input!r})")
                return True
        return False

    def clear(self) -> None:
        self._entries = []
