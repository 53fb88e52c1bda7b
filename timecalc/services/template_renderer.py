"""
Template Renderer - Fills ``{{name}}`` placeholders in a user template.

Architecture Decision: Why not Jinja2 here?
The result template is typed by end users into a text box. Anything that is
not a known ``{{name}}`` token must come back untouched, including stray
``{%`` or ``{{ a + b }}``, and unknown names are reported instead of raising.
A single regex pass gives exactly that; Jinja2 stays in ReportService for
the fixed summary report.
"""

import re
from typing import Dict, List, Optional

from timecalc.domain.models import DEFAULT_TEMPLATE, AggregateDuration, RenderResult
from timecalc.i18n import tr
from timecalc.services.scoring import format_points

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z][A-Za-z0-9_]*)\}\}")

def format_duration_short(hours: int, minutes: int) -> str:
    """Abbreviated form: ``3h15m``, ``3h``, ``15m``; ``0m`` when empty."""
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    return "".join(parts) or "0m"


def format_duration_full(hours: int, minutes: int) -> str:
    """Full-word form in the current language, e.g. ``3小时15分钟``."""
    parts = []
    if hours:
        parts.append(tr("duration.hours_full", hours=hours))
    if minutes or not hours:
        parts.append(tr("duration.minutes_full", minutes=minutes))
    return tr("duration.separator").join(parts)


def build_variables(total: AggregateDuration, range_count: int,
                    points: Optional[float] = None) -> Dict[str, str]:
    """
    Build the placeholder values for the current session state.

    Args:
        total: Aggregate duration of the valid entries
        range_count: Number of valid entries
        points: Calculated score, or None if no score is available

    Returns:
        Mapping of placeholder name to its rendered string
    """
    variables = {
        "totaltime": format_duration_short(total.total_hours, total.total_minutes),
        "TotalTime": format_duration_full(total.total_hours, total.total_minutes),
        "hours": str(total.total_hours),
        "minutes": str(total.total_minutes),
        "rangeCount": str(range_count),
        "totalMinutes": str(total.as_minutes),
    }
    if points is not None:
        formatted = format_points(points)
        variables["points"] = formatted
        variables["totalPoints"] = formatted
        variables["Points"] = tr("points.label", points=formatted)
    return variables


def render_template(template: str, variables: Dict[str, str]) -> RenderResult:
    """
    Substitute known placeholders in a single pass.

    Unknown placeholders stay in the output verbatim and their names are
    collected, once each, in order of first appearance.
    """
    unknown: List[str] = []

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return variables[name]
        if name not in unknown:
            unknown.append(name)
        return match.group(0)

    text = PLACEHOLDER_PATTERN.sub(_substitute, template)
    return RenderResult(text=text, unknown_placeholders=unknown)


class TemplateRenderer:
    """Renders one template against successive session states."""

    def __init__(self, template: str = DEFAULT_TEMPLATE):
        self.template = template

    def placeholders(self) -> List[str]:
        """Distinct placeholder names used by the template, in order."""
        names: List[str] = []
        for name in PLACEHOLDER_PATTERN.findall(self.template):
            if name not in names:
                names.append(name)
        return names

    def render(self, total: AggregateDuration, range_count: int,
               points: Optional[float] = None) -> RenderResult:
        return render_template(self.template, build_variables(total, range_count, points))
