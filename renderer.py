"""
Rendering of an AnalysisResult: split view, key point groups, clause
accordion and the downloadable plain-text report.
"""
import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from config import DISPLAY_ORIGINAL_LENGTH
from constants import KEY_POINT_ORDER, REPORT_TITLE, REPORT_FILENAME_TEMPLATE
from highlighter import count_highlights, highlight_html

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

_jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


def _label(value, default):
    # Client results are built without validation, so fields may be any JSON value
    return str(value) if value not in (None, "") else default


def group_key_points(key_points):
    """Group key points by type, critical first. Unknown types are kept at the end."""
    groups = {point_type: [] for point_type in KEY_POINT_ORDER}
    for point in key_points:
        groups.setdefault(_label(point.type, "other"), []).append(point)
    return {point_type: points for point_type, points in groups.items() if points}


def truncate_original(text, limit=DISPLAY_ORIGINAL_LENGTH):
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def build_accordion(clauses):
    risks = [_label(clause.risk, "unknown") for clause in clauses]
    return [
        {
            "id": f"item-{index}",
            "title": clause.title,
            "risk": risk,
            "risk_label": f"{risk} risk",
            "simplified": clause.simplified,
            "original": truncate_original(_label(clause.original, "")),
        }
        for index, (clause, risk) in enumerate(zip(clauses, risks))
    ]


def render_analysis(result, content, file_name=None, preferences=None):
    """
    Build the view model for the split view.

    Missing fields on the result are tolerated; an error result renders
    with its message and empty sections.
    """
    return {
        "file_name": file_name,
        "theme": preferences.theme if preferences else "light",
        "language": preferences.language if preferences else "en",
        "word_count": len(content.split()),
        "highlighted_html": Markup(highlight_html(content)),
        "highlight_counts": count_highlights(content),
        "summary": result.summary or "",
        "document_type": result.document_type,
        "error": result.error,
        "key_point_groups": group_key_points(result.key_points or []),
        "accordion": build_accordion(result.clauses or []),
    }


def render_html(result, content, file_name=None, preferences=None):
    """Render the split view as a standalone HTML page."""
    view = render_analysis(result, content, file_name, preferences)
    return _jinja_env.get_template("analysis.html").render(**view)


def build_report(result, file_name=None, generated=None):
    """Assemble the plain-text analysis report."""
    generated = generated or datetime.now()

    lines = [REPORT_TITLE]
    if file_name:
        lines.append(f"Document: {file_name}")
    lines.append(f"Generated: {generated.strftime('%Y-%m-%d')}")
    lines += ["", "SUMMARY:", result.summary or ""]
    if result.error:
        lines += ["", "ERROR:", result.error]

    lines += ["", "KEY POINTS:"]
    lines.append("\n\n".join(
        f"{index}. {point.text}\n   {point.explanation}"
        for index, point in enumerate(result.key_points or [], start=1)
    ))

    lines += ["", "DETAILED CLAUSE ANALYSIS:"]
    for index, clause in enumerate(result.clauses or [], start=1):
        lines += [
            "",
            f"{index}. {clause.title}",
            f"Risk Level: {_label(clause.risk, 'unknown').upper()}",
            f"Simplified: {clause.simplified}",
        ]

    return "\n".join(lines) + "\n"


def report_filename(now=None):
    now = now or datetime.now()
    return REPORT_FILENAME_TEMPLATE.format(timestamp=int(now.timestamp() * 1000))


def save_report(result, directory, file_name=None, now=None):
    """Write the report to ``directory`` and return its path."""
    now = now or datetime.now()
    path = Path(directory) / report_filename(now)
    path.write_text(build_report(result, file_name, now), encoding="utf-8")
    logger.info(f"Saved analysis report to {path}")
    return path
