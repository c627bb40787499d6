import pytest

from examertric.entries import EntryError, display_timestamp, new_opinion, new_score
from examertric.models import AssessmentType, PreferenceType


def test_new_score_builds_record(now):
    score = new_score("Ada", "Oral", "88", now=now)
    assert score.student_name == "Ada"
    assert score.assessment_type is AssessmentType.ORAL
    assert score.score == 88.0
    assert score.id == str(int(now.timestamp() * 1000))


@pytest.mark.parametrize("name,value", [("", 50), ("Ada", None), ("Ada", "")])
def test_new_score_requires_all_fields(name, value):
    with pytest.raises(EntryError) as exc_info:
        new_score(name, AssessmentType.WRITTEN, value)
    assert exc_info.value.title == "Missing information"
    assert exc_info.value.description == "Please fill in all fields"


def test_new_score_accepts_zero():
    assert new_score("Ada", AssessmentType.ORAL, 0).score == 0.0


def test_manual_entry_is_not_clamped():
    assert new_score("Ada", AssessmentType.ORAL, 130).score == 130.0


def test_new_score_rejects_non_numeric():
    with pytest.raises(EntryError):
        new_score("Ada", AssessmentType.ORAL, "lots")


def test_new_opinion_requires_reason():
    with pytest.raises(EntryError) as exc_info:
        new_opinion(PreferenceType.BOTH, "   ")
    assert exc_info.value.description == "Please provide a reason for your preference"


def test_new_opinion_keeps_reason_and_formats_timestamp(now):
    opinion = new_opinion("Written", "  More time to think ", now=now)
    assert opinion.preferred_type is PreferenceType.WRITTEN
    assert opinion.reason == "  More time to think "
    assert opinion.timestamp == "3/7/2025, 4:05:09 PM"


def test_display_timestamp_midnight_and_noon():
    from datetime import datetime

    assert display_timestamp(datetime(2024, 12, 31, 0, 0, 5)) == "12/31/2024, 12:00:05 AM"
    assert display_timestamp(datetime(2024, 1, 2, 12, 30, 0)) == "1/2/2024, 12:30:00 PM"
