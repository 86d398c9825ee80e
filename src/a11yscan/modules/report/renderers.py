"""One renderer per report format."""

import csv
import html
import io
import json
from collections.abc import Callable, Sequence

from a11yscan.modules.scan.models import IMPACT_ORDER, Violation

from .models import ReportFormat, ViolationSummary

Renderer = Callable[[ViolationSummary, Sequence[Violation]], str]


def render_default(summary: ViolationSummary, violations: Sequence[Violation]) -> str:
    return json.dumps(summary.to_dict(), indent=2)


def render_detailed(summary: ViolationSummary, violations: Sequence[Violation]) -> str:
    """Default payload with affected selectors and failure summaries per entry."""
    data = summary.to_dict()
    for entry, violation in zip(data["violations"], violations, strict=True):
        entry["nodes"] = [
            {
                "impact": node.impact,
                "target": list(node.target),
                "failureSummary": node.failure_summary,
            }
            for node in violation.nodes
        ]
    return json.dumps(data, indent=2)


def render_simple(summary: ViolationSummary, violations: Sequence[Violation]) -> str:
    lines = [f"Total violations: {summary.total_violations}"]
    for level in reversed(IMPACT_ORDER):
        lines.append(f"  {level.value}: {summary.by_impact.count(level)}")
    for entry in summary.entries:
        impact = (entry.impact or "unknown").upper()
        lines.append(f"- [{impact}] {entry.id}: {entry.description} ({entry.nodes_affected} nodes)")
    return "\n".join(lines) + "\n"


def _md_cell(value: object) -> str:
    return str(value if value is not None else "").replace("|", "\\|").replace("\n", " ")


def render_markdown(summary: ViolationSummary, violations: Sequence[Violation]) -> str:
    lines = [
        "# Accessibility Violations",
        "",
        f"**Total violations:** {summary.total_violations}",
        "",
        "| Impact | Count |",
        "| --- | --- |",
    ]
    for level in reversed(IMPACT_ORDER):
        lines.append(f"| {level.value} | {summary.by_impact.count(level)} |")
    if summary.entries:
        lines += [
            "",
            "## Violations",
            "",
            "| Rule | Impact | Nodes | Description | Help |",
            "| --- | --- | --- | --- | --- |",
        ]
        for entry in summary.entries:
            help_link = f"[docs]({entry.help_url})" if entry.help_url else ""
            lines.append(
                f"| {_md_cell(entry.id)} | {_md_cell(entry.impact)} | {entry.nodes_affected} "
                f"| {_md_cell(entry.description)} | {help_link} |"
            )
    return "\n".join(lines) + "\n"


def render_html(summary: ViolationSummary, violations: Sequence[Violation]) -> str:
    esc = html.escape
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="UTF-8">',
        "<title>Accessibility Violations</title>",
        "<style>",
        "body { font-family: Arial, sans-serif; margin: 20px; }",
        "table { border-collapse: collapse; margin: 16px 0; }",
        "th, td { padding: 8px 12px; text-align: left; border-bottom: 1px solid #ddd; }",
        ".impact-critical { color: #b71c1c; font-weight: bold; }",
        ".impact-serious { color: #e65100; font-weight: bold; }",
        ".impact-moderate { color: #8d6e00; }",
        ".impact-minor { color: #1b5e20; }",
        "</style>",
        "</head>",
        "<body>",
        "<h1>Accessibility Violations</h1>",
        f"<p><strong>Total violations:</strong> {summary.total_violations}</p>",
        "<table>",
        "<tr><th>Impact</th><th>Count</th></tr>",
    ]
    for level in reversed(IMPACT_ORDER):
        parts.append(
            f'<tr><td class="impact-{level.value}">{level.value}</td>'
            f"<td>{summary.by_impact.count(level)}</td></tr>"
        )
    parts.append("</table>")
    if summary.entries:
        parts += [
            "<h2>Violations</h2>",
            "<table>",
            "<tr><th>Rule</th><th>Impact</th><th>Nodes</th><th>Description</th></tr>",
        ]
        for entry in summary.entries:
            impact = esc(entry.impact or "")
            rule = esc(entry.id)
            if entry.help_url:
                rule = f'<a href="{esc(entry.help_url, quote=True)}">{rule}</a>'
            parts.append(
                f'<tr><td>{rule}</td><td class="impact-{impact}">{impact}</td>'
                f"<td>{entry.nodes_affected}</td><td>{esc(entry.description)}</td></tr>"
            )
        parts.append("</table>")
    parts += ["</body>", "</html>"]
    return "\n".join(parts) + "\n"


def render_csv(summary: ViolationSummary, violations: Sequence[Violation]) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(["ID", "Impact", "Description", "Help URL", "Nodes Affected"])
    for entry in summary.entries:
        writer.writerow(
            [entry.id, entry.impact or "", entry.description, entry.help_url or "", entry.nodes_affected]
        )
    return output.getvalue()


RENDERERS: dict[ReportFormat, Renderer] = {
    ReportFormat.DEFAULT: render_default,
    ReportFormat.SIMPLE: render_simple,
    ReportFormat.DETAILED: render_detailed,
    ReportFormat.MARKDOWN: render_markdown,
    ReportFormat.HTML: render_html,
    ReportFormat.CSV: render_csv,
}


def render_summary(
    report_format: ReportFormat, summary: ViolationSummary, violations: Sequence[Violation]
) -> str:
    """Render ``summary`` in ``report_format``."""
    return RENDERERS[report_format](summary, violations)
