"""Time-window score adjustment.

The window is the earliest and latest delivery *date* in the pool:
  - first day (any time)            -> +1 early-bird bonus
  - last day, after 11:59:59        -> -1 late penalty
  - anything else                   -> unchanged
When the whole pool was delivered on a single date nobody is adjusted.
No clamping is applied.
"""

import logging
from collections.abc import Sequence
from datetime import time

from applicants.core.schemas import AdjustedApplicant, ApplicantRecord, SubmissionWindow

logger = logging.getLogger(__name__)

EARLY_BONUS = 1.0
LATE_PENALTY = 1.0
# Deliveries strictly after this time on the last day are penalised.
LATE_CUTOFF = time(11, 59, 59)


def submission_window(records: Sequence[ApplicantRecord]) -> SubmissionWindow:
    """Return the earliest and latest delivery dates of a non-empty pool."""
    if not records:
        msg = "cannot compute a submission window for an empty pool"
        raise ValueError(msg)
    dates = [r.delivery_date for r in records]
    return SubmissionWindow(first_day=min(dates), last_day=max(dates))


def adjust_score(record: ApplicantRecord, window: SubmissionWindow) -> AdjustedApplicant:
    """Apply at most one of the bonus or the penalty to a single record."""
    adjusted = record.score

    if not window.is_single_day:
        if record.delivery_date == window.first_day:
            adjusted = record.score + EARLY_BONUS
            logger.debug("Early bonus for %s", record.email)
        elif record.delivery_date == window.last_day and record.delivery_time > LATE_CUTOFF:
            adjusted = record.score - LATE_PENALTY
            logger.debug("Late penalty for %s", record.email)

    return AdjustedApplicant(record=record, adjusted_score=adjusted)


def adjust_scores(records: Sequence[ApplicantRecord]) -> list[AdjustedApplicant]:
    """Adjust every record in the pool against the pool's own window."""
    if not records:
        return []
    window = submission_window(records)
    logger.info(
        "Submission window: %s to %s%s",
        window.first_day, window.last_day,
        " (single day, no adjustments)" if window.is_single_day else "",
    )
    return [adjust_score(r, window) for r in records]
