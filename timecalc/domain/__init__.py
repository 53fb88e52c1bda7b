"""Domain layer - Pure value objects and enums"""

from .models import (
    ParseErrorKind,
    NormalizeMode,
    TimeRangeEntry,
    AggregateDuration,
    PointsBreakdown,
    RenderResult,
    EntryView,
    CopyResult,
    UserPreferences,
)

__all__ = [
    "ParseErrorKind",
    "NormalizeMode",
    "TimeRangeEntry",
    "AggregateDuration",
    "PointsBreakdown",
    "RenderResult",
    "EntryView",
    "CopyResult",
    "UserPreferences",
]
