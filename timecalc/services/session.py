"""
Calculator Session - The single entry point used by the UI layer.

Architecture Decision: Explicit recalculation
The total is derived from the entry list on every read. The score and the
rendered template are only produced when asked for, through plain method
calls, so there are no observers that could leave a stale value on screen.
A score is remembered together with the total it was computed for and is
hidden as soon as that total changes.
"""

import logging
from typing import List, Optional, Union

from timecalc.domain.models import (
    AggregateDuration,
    CopyResult,
    EntryView,
    NormalizeMode,
    ParseErrorKind,
    PointsBreakdown,
    RenderResult,
    TimeRangeEntry,
    UserPreferences,
)
from timecalc.i18n import set_language, tr
from timecalc.infra.config import Settings, get_settings
from timecalc.infra.template_repository import TemplateRepository
from timecalc.services.aggregator import DurationAggregator
from timecalc.services.clipboard import ClipboardWriter, copy_text
from timecalc.services.normalizer import normalize_text
from timecalc.services.parser import parse_text
from timecalc.services.report_service import ReportService
from timecalc.services.scoring import points_breakdown
from timecalc.services.template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)

_ERROR_MESSAGE_KEYS = {
    ParseErrorKind.MALFORMED_FORMAT: "error.malformed_format",
    ParseErrorKind.OUT_OF_RANGE: "error.out_of_range",
}


class CalculatorSession:
    """
    Owns the state of one calculator window: input text, parsed entries,
    the last calculated score and the result template.

    Every action runs to completion before returning; nothing happens in
    the background.
    """

    def __init__(self, template_repository: Optional[TemplateRepository] = None,
                 preferences: Optional[UserPreferences] = None,
                 report_service: Optional[ReportService] = None):
        self.preferences = preferences or UserPreferences()
        self.template_repo = template_repository or TemplateRepository()
        self.report_service = report_service or ReportService()

        self.aggregator = DurationAggregator()
        self.input_text: str = ""

        self._breakdown: Optional[PointsBreakdown] = None
        self._renderer = TemplateRenderer(self.template_repo.load())

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CalculatorSession":
        """
        Build a session from application settings.

        Applies the configured language and opens the configured store.
        """
        settings = settings or get_settings()
        set_language(settings.preferences.language)
        repo = TemplateRepository(settings.create_store())
        return cls(template_repository=repo, preferences=settings.preferences)

    # Input

    def format_input(self, mode: Union[NormalizeMode, str, None] = None) -> str:
        """Clean the input text in place and return the new text."""
        if mode is None:
            mode = self.preferences.default_format_mode
        self.input_text = normalize_text(self.input_text, mode)
        return self.input_text

    def calculate(self) -> List[TimeRangeEntry]:
        """Parse the input text, replacing the current entries."""
        self.aggregator.load(parse_text(self.input_text))
        self._clear_score_if_empty()
        return list(self.aggregator.entries)

    # Entries and total

    @property
    def entries(self) -> List[TimeRangeEntry]:
        return list(self.aggregator.entries)

    @property
    def total(self) -> AggregateDuration:
        return self.aggregator.total()

    @property
    def valid_count(self) -> int:
        return self.aggregator.valid_count()

    def entry_views(self) -> List[EntryView]:
        """Localized, display-ready rows for the result list."""
        views = []
        for index, entry in enumerate(self.aggregator.entries, start=1):
            if entry.is_valid:
                end_label = entry.end_label
                if entry.next_day:
                    end_label = tr("entry.next_day") + end_label
                views.append(EntryView(
                    index=index,
                    entry_id=entry.id,
                    raw_input=entry.raw_input,
                    is_valid=True,
                    start_label=entry.start_label,
                    end_label=end_label,
                    duration_label=tr("entry.duration", hours=entry.hours, minutes=entry.minutes),
                ))
            else:
                views.append(EntryView(
                    index=index,
                    entry_id=entry.id,
                    raw_input=entry.raw_input,
                    is_valid=False,
                    error_message=tr(_ERROR_MESSAGE_KEYS[entry.error_kind]),
                ))
        return views

    def remove_entry(self, entry_id: str) -> bool:
        """Remove one entry; unknown ids are ignored."""
        removed = self.aggregator.remove(entry_id)
        if removed:
            self._clear_score_if_empty()
        return removed

    def clear(self) -> None:
        """Reset input, entries and score. The template is kept."""
        self.input_text = ""
        self.aggregator.clear()
        self._breakdown = None
        logger.info("Session cleared")

    # Points

    def calculate_points(self) -> Optional[float]:
        """Compute the score for the current total."""
        self._breakdown = points_breakdown(self.total.as_minutes)
        return self.points

    @property
    def points(self) -> Optional[float]:
        """The last calculated score, or None if absent or stale."""
        breakdown = self.points_breakdown()
        return breakdown.score if breakdown is not None else None

    def points_breakdown(self) -> Optional[PointsBreakdown]:
        if self._breakdown is None:
            return None
        if self._breakdown.total_minutes != self.total.as_minutes:
            return None
        return self._breakdown

    @property
    def points_stale(self) -> bool:
        """True if a score was calculated for a total that has since changed."""
        return self._breakdown is not None and self.points_breakdown() is None

    def _clear_score_if_empty(self) -> None:
        if self.total.is_zero:
            self._breakdown = None

    # Template

    @property
    def template(self) -> str:
        return self._renderer.template

    @template.setter
    def template(self, value: str) -> None:
        self._renderer.template = value
        self.template_repo.save(value)

    def reset_template(self) -> str:
        self._renderer.template = self.template_repo.reset()
        return self._renderer.template

    def render(self) -> RenderResult:
        """Render the template against the current total and score."""
        return self._renderer.render(self.total, self.valid_count, self.points)

    # Output

    def summary_report(self) -> str:
        """Plain-text summary of entries, total and score."""
        return self.report_service.render_session_report(
            entries=self.entry_views(),
            total=self.total,
            valid_count=self.valid_count,
            points=self.points,
            breakdown=self.points_breakdown(),
        )

    def copy_result(self, primary: ClipboardWriter,
                    fallback: Optional[ClipboardWriter] = None) -> CopyResult:
        """Copy the rendered template text to the clipboard."""
        return copy_text(self.render().text, primary, fallback)
