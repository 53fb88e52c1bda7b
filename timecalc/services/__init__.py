"""Services layer - Parsing, scoring and rendering logic"""

from .normalizer import normalize_text
from .parser import parse_line, parse_text
from .aggregator import DurationAggregator
from .scoring import calculate_points, points_breakdown, format_points
from .template_renderer import TemplateRenderer, render_template, build_variables
from .report_service import ReportService
from .clipboard import copy_text
from .session import CalculatorSession

__all__ = [
    "normalize_text",
    "parse_line",
    "parse_text",
    "DurationAggregator",
    "calculate_points",
    "points_breakdown",
    "format_points",
    "TemplateRenderer",
    "render_template",
    "build_variables",
    "ReportService",
    "copy_text",
    "CalculatorSession",
]
