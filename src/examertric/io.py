import logging
from datetime import datetime
from pathlib import Path
from typing import IO, List, Optional

import pandas as pd

from .models import AssessmentType, StudentScore, timestamp_id
from .notices import Notice, failure, success
from .storage import LocalStore, StorageError, append_scores

SCORE_COLUMNS = ["name", "type", "score"]
CSV_HEADER = "Student Name,Assessment Type,Score"
RADIX_LITERAL = r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+"

logger = logging.getLogger(__name__)


class CsvImportError(ValueError):
    """Raised when an upload cannot be read as CSV text at all."""


def is_csv_filename(name: str) -> bool:
    return str(name or "").endswith(".csv")


def read_text(source: str | Path | IO[str] | IO[bytes]) -> str:
    try:
        if hasattr(source, "read"):
            data = source.read()
        else:
            data = Path(source).read_bytes()
        if isinstance(data, bytes):
            data = data.decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise CsvImportError(f"Unable to read CSV: {exc}") from exc
    return data


def score_rows(text: str) -> pd.DataFrame:
    """Split CSV text into trimmed name/type/score cells.

    Blank lines are dropped before the header, so the first non-blank line is
    always treated as the header. ``row`` keeps each data line's position.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    records = []
    for index, line in enumerate(lines[1:]):
        cells = [cell.strip() for cell in line.split(",")][: len(SCORE_COLUMNS)]
        cells += [""] * (len(SCORE_COLUMNS) - len(cells))
        records.append([index] + cells)
    return pd.DataFrame(records, columns=["row"] + SCORE_COLUMNS)


def _assessment_type(value: str) -> AssessmentType:
    return AssessmentType.ORAL if value.lower() == "oral" else AssessmentType.WRITTEN


def parse_scores_text(text: str, now: Optional[datetime] = None) -> List[StudentScore]:
    rows = score_rows(text)
    if rows.empty:
        return []

    complete = (rows["name"] != "") & (rows["type"] != "") & (rows["score"] != "")
    rows = rows[complete].copy()
    rows["value"] = pd.to_numeric(rows["score"], errors="coerce")
    # unsigned 0x/0o/0b literals are numbers too
    radix = rows["score"].str.fullmatch(RADIX_LITERAL)
    rows.loc[radix, "value"] = rows.loc[radix, "score"].map(lambda text: float(int(text, 0)))
    in_range = rows["value"].notna() & (rows["value"] >= 0) & (rows["value"] <= 100)
    valid = rows[in_range]

    moment = now or datetime.now()
    return [
        StudentScore(
            id=timestamp_id(moment, suffix=int(row.row)),
            student_name=row.name,
            assessment_type=_assessment_type(row.type),
            score=float(row.value),
        )
        for row in valid.itertuples(index=False)
    ]


def parse_scores_csv(source: str | Path | IO[str] | IO[bytes], now: Optional[datetime] = None) -> List[StudentScore]:
    """Read an uploaded score CSV, silently dropping rows that fail validation."""
    text = read_text(source)
    scores = parse_scores_text(text, now=now)
    logger.info("Parsed %d valid score rows from CSV", len(scores))
    return scores


def scores_to_csv(scores: List[StudentScore]) -> str:
    """Render scores in the import format so they can be re-imported."""
    frame = pd.DataFrame(
        [[s.student_name, s.assessment_type.value, s.score] for s in scores],
        columns=CSV_HEADER.split(","),
    )
    return frame.to_csv(index=False)


def import_scores(
    store: LocalStore,
    source: str | Path | IO[str] | IO[bytes],
    label: str = "upload",
    now: Optional[datetime] = None,
) -> Notice:
    """Parse a score CSV, append the valid rows to the store and report the outcome."""
    try:
        new_scores = parse_scores_csv(source, now=now)
    except CsvImportError as exc:
        logger.error(f"Error parsing CSV {label}: {exc}")
        return failure("Upload failed", "Error parsing CSV file")

    if not new_scores:
        return failure("No valid data", "CSV file contains no valid records")

    try:
        append_scores(store, new_scores)
    except StorageError as exc:
        logger.error(f"Error saving imported scores: {exc}")
        return failure("Upload failed", str(exc))

    logger.info(f"Imported {len(new_scores)} scores from {label}")
    return success("Upload successful", f"Added {len(new_scores)} student scores")
