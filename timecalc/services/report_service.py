"""
Report Generation Service using Jinja2 templates.

Architecture Decision: Template Pattern
The plain-text session summary (entry list, total, points) lives in a
template file, so its layout can change without touching code.
"""

from pathlib import Path
from typing import List, Optional
from jinja2 import Environment, FileSystemLoader

from timecalc.domain.models import AggregateDuration, EntryView, PointsBreakdown
from timecalc.i18n import tr
from timecalc.services.scoring import format_points
from timecalc.utils import get_resource_path

SESSION_SUMMARY_TEMPLATE = "session_summary.txt"


class ReportService:
    """
    Generates text reports from a calculator session using Jinja2 templates.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize the report service.

        Args:
            template_dir: Directory containing Jinja2 templates
        """
        if template_dir is None:
            template_dir = get_resource_path("resources/templates")

        self.template_dir = template_dir

        # Setup Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True
        )

        # Add custom filters
        self.env.filters['format_duration'] = self._format_duration
        self.env.filters['format_points_label'] = self._format_points_label
        self.env.globals['tr'] = tr

    @staticmethod
    def _format_duration(total_minutes: int) -> str:
        """Format minutes as e.g. 2时30分"""
        hours, minutes = divmod(total_minutes, 60)
        return tr("entry.duration", hours=hours, minutes=minutes)

    @staticmethod
    def _format_points_label(points: float) -> str:
        """Format a score with its unit label"""
        return tr("points.label", points=format_points(points))

    def render_session_report(self, entries: List[EntryView],
                              total: AggregateDuration,
                              valid_count: int,
                              points: Optional[float] = None,
                              breakdown: Optional[PointsBreakdown] = None,
                              output_file: Optional[Path] = None) -> str:
        """
        Render the summary of one calculator session.

        Args:
            entries: Entry views in input order
            total: Aggregate duration of the valid entries
            valid_count: Number of valid entries
            points: Current score, if one has been calculated
            breakdown: Score composition shown under the score
            output_file: Optional file path to save the report

        Returns:
            The generated report as a string
        """
        context = {
            'entries': entries,
            'total_minutes': total.as_minutes,
            'valid_count': valid_count,
            'points': points,
            'breakdown': breakdown.describe() if breakdown is not None else None,
        }

        template = self.env.get_template(SESSION_SUMMARY_TEMPLATE)
        report_content = template.render(**context)

        # Save to file if specified
        if output_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write(report_content)

        return report_content

    def render_template_string(self, template_string: str, **context) -> str:
        """
        Render a template from a string instead of a file.

        Args:
            template_string: The template content as a string
            **context: Variables to pass to the template

        Returns:
            The rendered content
        """
        template = self.env.from_string(template_string)
        return template.render(**context)
