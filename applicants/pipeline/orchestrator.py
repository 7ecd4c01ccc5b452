"""Orchestrator: wires parser, deduplicator, scorer, ranker and report.

Data flow:
  1. Read the whole input file
  2. Parser -> valid records (header and invalid lines dropped)
  3. Deduplicator -> one record per email
  4. Scorer -> adjusted pool
  5. Ranker + report -> ApplicantReport
  6. Render and write the JSON artifact
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from applicants.core.schemas import ApplicantReport
from applicants.pipeline.deduplicator import deduplicate_by_email
from applicants.pipeline.parser import parse_lines
from applicants.pipeline.report import build_report, render_report
from applicants.pipeline.scorer import adjust_scores

logger = logging.getLogger(__name__)


def process_lines(lines: Iterable[str]) -> ApplicantReport:
    """Run the in-memory pipeline over already-read input lines."""
    parsed = parse_lines(lines)
    if not parsed.records:
        logger.info("No valid submissions found")
        return ApplicantReport()

    unique = deduplicate_by_email(parsed.records)
    logger.info("Unique applicants: %d", len(unique))

    pool = adjust_scores(unique)
    return build_report(pool)


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read the whole input file into a list of lines without terminators.

    Raises OSError if the file cannot be opened and UnicodeDecodeError if
    its bytes are not valid in ``encoding``.
    """
    path = Path(path)
    with path.open(encoding=encoding) as handle:
        return [line.rstrip("\n") for line in handle]


def process_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Read an input file, run the pipeline and return the rendered report."""
    lines = read_lines(path, encoding)
    logger.info("Read %d lines from %s", len(lines), path)
    return render_report(process_lines(lines))


def write_report(text: str, path: str | Path, encoding: str = "utf-8") -> Path:
    """Write the rendered report, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding=encoding)
    logger.debug("Wrote %d characters to %s", len(text), path)
    return path
