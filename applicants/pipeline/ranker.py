"""Two independent orderings over the applicant pool.

View A (top applicants), in order until a difference is found:
  1. adjusted score, descending
  2. raw score, descending
  3. delivery timestamp, ascending
  4. email, ascending
View B (average): raw score descending only; ties keep pool order.

Both views return new lists and never reorder the pool itself.
"""

import math
from collections.abc import Sequence

from applicants.core.schemas import AdjustedApplicant

TOP_APPLICANTS_LIMIT = 3


def _adjusted_rank_key(applicant: AdjustedApplicant) -> tuple:
    record = applicant.record
    return (-applicant.adjusted_score, -record.score, record.delivered_at, record.email)


def rank_by_adjusted_score(pool: Sequence[AdjustedApplicant]) -> list[AdjustedApplicant]:
    """Return the pool in View A order."""
    return sorted(pool, key=_adjusted_rank_key)


def top_surnames(
    pool: Sequence[AdjustedApplicant],
    limit: int = TOP_APPLICANTS_LIMIT,
) -> list[str]:
    """Surnames of the first ``limit`` applicants in View A order (no padding)."""
    return [a.record.surname for a in rank_by_adjusted_score(pool)[:limit]]


def rank_by_raw_score(pool: Sequence[AdjustedApplicant]) -> list[AdjustedApplicant]:
    """Return the pool in View B order (raw score descending, stable)."""
    return sorted(pool, key=lambda a: a.record.score, reverse=True)


def top_half(pool: Sequence[AdjustedApplicant]) -> list[AdjustedApplicant]:
    """The first ceil(n / 2) applicants in View B order."""
    half_count = math.ceil(len(pool) / 2)
    return rank_by_raw_score(pool)[:half_count]
