from datetime import datetime

import pytest

from examertric.models import AssessmentType, Opinion, PreferenceType, StudentScore
from examertric.storage import LocalStore


FIXED_NOW = datetime(2025, 3, 7, 16, 5, 9)


@pytest.fixture()
def now():
    return FIXED_NOW


@pytest.fixture()
def sample_scores():
    return [
        StudentScore(id="1", student_name="Alex Kim", assessment_type=AssessmentType.ORAL, score=80.0),
        StudentScore(id="2", student_name="Alex Kim", assessment_type=AssessmentType.WRITTEN, score=90.0),
        StudentScore(id="3", student_name="Riley Chen", assessment_type=AssessmentType.ORAL, score=71.0),
        StudentScore(id="4", student_name="Riley Chen", assessment_type=AssessmentType.WRITTEN, score=95.5),
    ]


@pytest.fixture()
def sample_opinions():
    return [
        Opinion(id="10", preferred_type=PreferenceType.WRITTEN, reason="Time to think", timestamp="3/7/2025, 4:05:09 PM"),
        Opinion(id="11", preferred_type=PreferenceType.ORAL, reason="I like talking", timestamp="3/7/2025, 4:06:00 PM"),
        Opinion(id="12", preferred_type=PreferenceType.WRITTEN, reason="Less pressure", timestamp="3/7/2025, 4:07:00 PM"),
        Opinion(id="13", preferred_type=PreferenceType.BOTH, reason="Depends on the topic", timestamp="3/7/2025, 4:08:00 PM"),
    ]


@pytest.fixture()
def store(tmp_path):
    return LocalStore(tmp_path / "data" / "local_storage.json")


@pytest.fixture()
def sample_csv_path(tmp_path):
    file_path = tmp_path / "scores.csv"
    file_path.write_text(
        "Student Name,Assessment Type,Score\n"
        "John Doe,Oral,85\n"
        "Jane Smith,Written,92\n"
        "Bad Range,Oral,101\n"
        "Bad Number,Written,abc\n",
        encoding="utf-8",
    )
    return file_path
