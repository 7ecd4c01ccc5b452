"""Core data models for the applicant ranking pipeline."""

import re
from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Trimming removes spaces and control characters only; other Unicode
# whitespace (such as a no-break space) is kept as part of the text.
TRIM_CHARS = "".join(chr(c) for c in range(0x21))
_NAME_SEPARATOR_RE = re.compile(r"[ \t\n\x0b\f\r]+")


def name_tokens(name: str) -> list[str]:
    """Split a name on runs of ASCII whitespace, ignoring empty tokens."""
    return [t for t in _NAME_SEPARATOR_RE.split(name) if t]


class ApplicantRecord(BaseModel):
    """One validated submission line.

    Frozen — the adjusted score lives on the AdjustedApplicant wrapper.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    delivered_at: datetime
    score: float = Field(ge=0.0, le=10.0)

    @field_validator("name")
    @classmethod
    def name_has_surname(cls, v: str) -> str:
        if len(name_tokens(v)) < 2:
            msg = "name must contain a first name and at least one surname"
            raise ValueError(msg)
        return v

    @property
    def surname(self) -> str:
        return name_tokens(self.name)[-1]

    @property
    def delivery_date(self) -> date:
        return self.delivered_at.date()

    @property
    def delivery_time(self) -> time:
        return self.delivered_at.time()


class AdjustedApplicant(BaseModel):
    """Wrapper that pairs a frozen ApplicantRecord with its adjusted score.

    No clamping: a first-day 10 becomes 11, a late 0 becomes -1.
    """

    model_config = ConfigDict(frozen=True)

    record: ApplicantRecord
    adjusted_score: float


class SubmissionWindow(BaseModel):
    """Earliest and latest delivery dates present in the pool."""

    model_config = ConfigDict(frozen=True)

    first_day: date
    last_day: date

    @property
    def is_single_day(self) -> bool:
        return self.first_day == self.last_day


class ParseResult(BaseModel):
    """Outcome of parsing a whole input file."""

    records: list[ApplicantRecord] = Field(default_factory=list)
    lines_read: int = 0
    rejected: int = 0
    header_skipped: bool = False


class ApplicantReport(BaseModel):
    """Summary emitted at the end of a run."""

    model_config = ConfigDict(populate_by_name=True)

    unique_applicants: int = Field(default=0, ge=0, alias="uniqueApplicants")
    top_applicants: list[str] = Field(
        default_factory=list, max_length=3, alias="topApplicants",
    )
    average_score: float = Field(default=0.0, alias="averageScore")
