"""Collapse submissions that share an email address.

Last write wins: a later line for the same email replaces the earlier one.
"""

import logging
from collections.abc import Iterable

from applicants.core.schemas import ApplicantRecord

logger = logging.getLogger(__name__)


def deduplicate_by_email(records: Iterable[ApplicantRecord]) -> list[ApplicantRecord]:
    """Return one record per distinct email, keeping the last one seen.

    Emails are compared exactly (case-sensitive). The order of the result is
    not meaningful; ranking happens later.
    """
    latest: dict[str, ApplicantRecord] = {}
    total = 0
    for record in records:
        total += 1
        latest[record.email] = record

    replaced = total - len(latest)
    if replaced:
        logger.debug("Deduplicator: replaced %d earlier submissions", replaced)
    return list(latest.values())
