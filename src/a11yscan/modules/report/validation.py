"""Validation of caller-supplied violation lists."""

from typing import Any

from a11yscan.errors import ValidationError
from a11yscan.modules.scan.models import Impact, Violation, ViolationNode

from .models import ReportFormat


def _require_impact(value: Any, field: str) -> str:
    if value not in Impact.values():
        raise ValidationError(field, f"must be one of: {', '.join(Impact.values())}")
    return value


def _optional_str(data: dict[str, Any], key: str, field: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    return value


def _parse_node(data: Any, field: str) -> ViolationNode:
    if not isinstance(data, dict):
        raise ValidationError(field, "must be an object")
    target = data.get("target")
    if not isinstance(target, list) or not all(isinstance(item, str) for item in target):
        raise ValidationError(f"{field}.target", "must be an array of selector strings")
    impact = data.get("impact")
    return ViolationNode(
        impact=None if impact is None else _require_impact(impact, f"{field}.impact"),
        target=list(target),
        failure_summary=_optional_str(data, "failureSummary", f"{field}.failureSummary"),
        html=_optional_str(data, "html", f"{field}.html"),
    )


def parse_violation(data: Any, field: str) -> Violation:
    """Validate one violation object."""
    if not isinstance(data, dict):
        raise ValidationError(field, "must be an object")
    violation_id = data.get("id")
    if not isinstance(violation_id, str):
        raise ValidationError(f"{field}.id", "must be a string")
    description = data.get("description")
    if not isinstance(description, str):
        raise ValidationError(f"{field}.description", "must be a string")
    nodes = data.get("nodes")
    if nodes is not None and not isinstance(nodes, list):
        raise ValidationError(f"{field}.nodes", "must be an array")
    return Violation(
        id=violation_id,
        impact=_require_impact(data.get("impact"), f"{field}.impact"),
        description=description,
        help_url=_optional_str(data, "helpUrl", f"{field}.helpUrl"),
        nodes=[_parse_node(node, f"{field}.nodes[{index}]") for index, node in enumerate(nodes or [])],
    )


def parse_violations(value: Any) -> list[Violation]:
    """Validate the ``violations`` tool parameter."""
    if not isinstance(value, list):
        raise ValidationError("violations", "must be an array of violations")
    return [parse_violation(item, f"violations[{index}]") for index, item in enumerate(value)]


def parse_format(value: Any) -> ReportFormat:
    """Validate the optional ``format`` tool parameter."""
    if value is None:
        return ReportFormat.DEFAULT
    if value not in ReportFormat.values():
        raise ValidationError("format", f"must be one of: {', '.join(ReportFormat.values())}")
    return ReportFormat(value)
