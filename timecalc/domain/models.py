"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Entries, totals and render results are value objects handed to the UI layer.
Frozen Pydantic models keep them immutable once created and give us free
validation of the numeric invariants (minutes always in 0-59).
"""

import uuid
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

# Current default result template
DEFAULT_TEMPLATE = "总计：{{TotalTime}}（{{totaltime}}），共 {{rangeCount}} 个时间段，{{Points}}"

# Default shipped before the points and range count placeholders existed
LEGACY_DEFAULT_TEMPLATE = "总时间：{{hours}}时{{minutes}}分"


class ParseErrorKind(str, Enum):
    """Why a line could not be turned into a valid time range."""
    MALFORMED_FORMAT = "MalformedFormat"
    OUT_OF_RANGE = "OutOfRange"


class NormalizeMode(str, Enum):
    """Cleanup modes offered for pasted input text."""
    SMART = "smart"
    STRIP_LIST_MARKERS = "strip_list_markers"
    NORMALIZE_RANGES = "normalize_ranges"
    EXTRACT_RANGES_ONLY = "extract_ranges_only"
    REMOVE_BLANK_LINES = "remove_blank_lines"


def _new_entry_id() -> str:
    return uuid.uuid4().hex


class TimeRangeEntry(BaseModel):
    """
    One parsed input line.

    Valid entries carry zero-padded labels and the elapsed duration.
    Invalid entries carry an error kind; their duration fields stay at zero
    and have no meaning.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_entry_id)
    raw_input: str
    is_valid: bool

    start_label: Optional[str] = None
    end_label: Optional[str] = None
    next_day: bool = False
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0, le=59)

    error_kind: Optional[ParseErrorKind] = None

    @property
    def duration_minutes(self) -> int:
        """Contribution of this entry to the total (0 for invalid entries)."""
        if not self.is_valid:
            return 0
        return self.hours * MINUTES_PER_HOUR + self.minutes


class AggregateDuration(BaseModel):
    """Sum of all valid entries, normalized to hours + minutes."""
    model_config = ConfigDict(frozen=True)

    total_hours: int = Field(default=0, ge=0)
    total_minutes: int = Field(default=0, ge=0, le=59)

    @classmethod
    def from_minutes(cls, minutes: int) -> "AggregateDuration":
        if minutes < 0:
            raise ValueError(f"Duration cannot be negative: {minutes}")
        hours, rest = divmod(minutes, MINUTES_PER_HOUR)
        return cls(total_hours=hours, total_minutes=rest)

    @property
    def as_minutes(self) -> int:
        return self.total_hours * MINUTES_PER_HOUR + self.total_minutes

    @property
    def is_zero(self) -> bool:
        return self.as_minutes == 0


class PointsBreakdown(BaseModel):
    """
    Step-by-step composition of a points score.

    Example: 2h30m -> base 6, tiers [8], partial 10 x 0.5 -> 19.
    """
    model_config = ConfigDict(frozen=True)

    total_minutes: int
    base: int
    tier_points: List[int] = Field(default_factory=list)
    partial_rate: Optional[int] = None
    partial_fraction: float = 0.0
    raw_score: float
    score: float

    @property
    def partial_points(self) -> float:
        if self.partial_rate is None:
            return 0.0
        return self.partial_rate * self.partial_fraction

    def describe(self) -> str:
        """Render the calculation as e.g. ``6 + 8 + 10×0.5 = 19``."""
        from timecalc.services.scoring import format_points

        parts = [format_points(self.base)]
        parts.extend(str(p) for p in self.tier_points)
        if self.partial_rate is not None:
            fraction = format_points(round(self.partial_fraction, 2))
            parts.append(f"{self.partial_rate}×{fraction}")
        return f"{' + '.join(parts)} = {format_points(self.score)}"


class RenderResult(BaseModel):
    """Output of a template substitution pass."""
    model_config = ConfigDict(frozen=True)

    text: str
    unknown_placeholders: List[str] = Field(default_factory=list)

    @property
    def has_unknown(self) -> bool:
        return bool(self.unknown_placeholders)


class EntryView(BaseModel):
    """
    Display-ready view of one entry for the result list.

    Labels are already localized; the UI only has to lay them out.
    """
    model_config = ConfigDict(frozen=True)

    index: int
    entry_id: str
    raw_input: str
    is_valid: bool
    start_label: str = ""
    end_label: str = ""
    duration_label: str = ""
    error_message: Optional[str] = None


class CopyResult(BaseModel):
    """Outcome of a copy-to-clipboard attempt."""
    model_config = ConfigDict(frozen=True)

    success: bool
    method: Optional[str] = None
    error: Optional[str] = None


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    This allows users to customize behavior without touching code.
    """
    model_config = ConfigDict(from_attributes=True)

    language: str = Field(default="zh", description="Output language: 'zh', 'en', or 'auto' (detect from system)")
    default_format_mode: NormalizeMode = Field(
        default=NormalizeMode.SMART,
        description="Cleanup mode used when none is chosen explicitly"
    )
    store_backend: str = Field(default="json", description="Template store: 'json' or 'memory'")
    store_path: Optional[str] = Field(default=None, description="Custom path of the JSON template store")
