"""Aggregate the ranked pool into an ApplicantReport and render it as JSON.

The rendered text is byte-compatible with the legacy report format:
  - members separated by ", " with ": " after each key
  - the surname array rendered compactly (["Doe","Smith"]), non-ASCII text
    kept as is, and the HTML-sensitive characters < > & = ' plus U+2028 and
    U+2029 written as lowercase \\u escapes
  - averageScore always with two decimals, except the empty report, which
    is emitted literally with a bare 0
"""

import json
import logging
import math
from collections.abc import Sequence

from applicants.core.schemas import AdjustedApplicant, ApplicantReport
from applicants.pipeline.ranker import top_half, top_surnames

logger = logging.getLogger(__name__)

EMPTY_REPORT_JSON = '{"uniqueApplicants": 0, "topApplicants": [], "averageScore": 0}'

_HTML_SAFE_ESCAPES = str.maketrans(
    {c: f"\\u{ord(c):04x}" for c in "<>&='\u2028\u2029"}
)


def round_half_up(value: float, digits: int = 2) -> float:
    """Round half up on the scaled value: floor(value * 10**digits + 0.5) / 10**digits."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def average_raw_score(applicants: Sequence[AdjustedApplicant]) -> float:
    """Mean raw score of the given applicants, rounded to 2 decimals (0.0 if empty)."""
    if not applicants:
        return 0.0
    total = sum(a.record.score for a in applicants)
    return round_half_up(total / len(applicants))


def build_report(pool: Sequence[AdjustedApplicant]) -> ApplicantReport:
    """Compute the summary for an adjusted, deduplicated pool."""
    if not pool:
        return ApplicantReport()

    report = ApplicantReport(
        unique_applicants=len(pool),
        top_applicants=top_surnames(pool),
        average_score=average_raw_score(top_half(pool)),
    )
    logger.info(
        "Report: %d unique applicants, top %s, average %.2f",
        report.unique_applicants, report.top_applicants, report.average_score,
    )
    return report


def render_report(report: ApplicantReport) -> str:
    """Render the report in the fixed output format."""
    if report.unique_applicants == 0:
        return EMPTY_REPORT_JSON

    top = json.dumps(
        report.top_applicants, ensure_ascii=False, separators=(",", ":"),
    ).translate(_HTML_SAFE_ESCAPES)
    return (
        f'{{"uniqueApplicants": {report.unique_applicants}, '
        f'"topApplicants": {top}, '
        f'"averageScore": {report.average_score:.2f}}}'
    )
