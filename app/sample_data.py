from datetime import datetime
from typing import List

from examertric.entries import display_timestamp
from examertric.models import AssessmentType, Opinion, PreferenceType, StudentScore, timestamp_id

SAMPLE_SCORES = [
    ("Alex Kim", AssessmentType.ORAL, 78),
    ("Alex Kim", AssessmentType.WRITTEN, 85),
    ("Riley Chen", AssessmentType.ORAL, 91),
    ("Riley Chen", AssessmentType.WRITTEN, 88),
    ("Jordan Patel", AssessmentType.ORAL, 64),
    ("Jordan Patel", AssessmentType.WRITTEN, 72),
]

SAMPLE_OPINIONS = [
    (PreferenceType.WRITTEN, "I can organize my thoughts before answering."),
    (PreferenceType.ORAL, "Talking it through helps me show what I understand."),
    (PreferenceType.WRITTEN, "Less pressure than answering on the spot."),
    (PreferenceType.BOTH, "A mix lets me play to different strengths."),
]


def load_sample_scores(now: datetime | None = None) -> List[StudentScore]:
    moment = now or datetime.now()
    return [
        StudentScore(id=timestamp_id(moment, suffix=idx), student_name=name, assessment_type=kind, score=float(score))
        for idx, (name, kind, score) in enumerate(SAMPLE_SCORES)
    ]


def load_sample_opinions(now: datetime | None = None) -> List[Opinion]:
    moment = now or datetime.now()
    return [
        Opinion(id=timestamp_id(moment, suffix=idx), preferred_type=kind, reason=reason, timestamp=display_timestamp(moment))
        for idx, (kind, reason) in enumerate(SAMPLE_OPINIONS)
    ]
