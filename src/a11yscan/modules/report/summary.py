"""Aggregate violation lists into impact tallies and condensed entries."""

from collections import Counter
from collections.abc import Sequence

from a11yscan.modules.scan.models import Violation

from .models import ImpactTally, SummaryEntry, ViolationSummary


def tally_by_impact(violations: Sequence[Violation]) -> ImpactTally:
    """Count violations per impact level."""
    counts = Counter(violation.impact for violation in violations if violation.impact)
    return ImpactTally(counts=dict(counts))


def summarize_violations(violations: Sequence[Violation]) -> ViolationSummary:
    """Pure aggregation; the same input always yields an equal summary."""
    return ViolationSummary(
        total_violations=len(violations),
        by_impact=tally_by_impact(violations),
        entries=[
            SummaryEntry(
                id=violation.id,
                description=violation.description,
                impact=violation.impact,
                help_url=violation.help_url,
                nodes_affected=len(violation.nodes),
            )
            for violation in violations
        ],
    )
