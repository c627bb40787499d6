from datetime import datetime
from typing import Optional, Union

from .models import AssessmentType, Opinion, PreferenceType, StudentScore, timestamp_id


class EntryError(ValueError):
    """Form input rejected before a record is created."""

    def __init__(self, title: str, description: str):
        super().__init__(description)
        self.title = title
        self.description = description


def display_timestamp(moment: datetime) -> str:
    """Format like an en-US locale string, e.g. ``3/7/2025, 4:05:09 PM``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def new_score(
    student_name: str,
    assessment_type: Union[AssessmentType, str],
    score: Optional[Union[float, str]],
    now: Optional[datetime] = None,
) -> StudentScore:
    # Manual entry is not clamped to 0-100; only CSV import filters ranges.
    if not student_name or score is None or score == "":
        raise EntryError("Missing information", "Please fill in all fields")
    try:
        value = float(score)
    except (TypeError, ValueError) as exc:
        raise EntryError("Invalid score", "Score must be a number") from exc
    return StudentScore(
        id=timestamp_id(now),
        student_name=student_name,
        assessment_type=AssessmentType(assessment_type),
        score=value,
    )


def new_opinion(
    preferred_type: Union[PreferenceType, str],
    reason: str,
    now: Optional[datetime] = None,
) -> Opinion:
    if not (reason or "").strip():
        raise EntryError("Missing information", "Please provide a reason for your preference")
    moment = now or datetime.now()
    return Opinion(
        id=timestamp_id(moment),
        preferred_type=PreferenceType(preferred_type),
        reason=reason,
        timestamp=display_timestamp(moment),
    )
