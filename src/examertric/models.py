from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Optional


class AssessmentType(str, Enum):
    ORAL = "Oral"
    WRITTEN = "Written"


class PreferenceType(str, Enum):
    ORAL = "Oral"
    WRITTEN = "Written"
    BOTH = "Both"


ASSESSMENT_TYPES = [t.value for t in AssessmentType]
PREFERENCE_TYPES = [t.value for t in PreferenceType]


@dataclass(frozen=True)
class StudentScore:
    """One student's result for one assessment type."""

    id: str
    student_name: str
    assessment_type: AssessmentType
    score: float

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "StudentScore":
        for key in ("id", "studentName", "assessmentType", "score"):
            if key not in data:
                raise ValueError(f"Score record missing '{key}'")
        return cls(
            id=str(data["id"]),
            student_name=str(data["studentName"]),
            assessment_type=AssessmentType(data["assessmentType"]),
            score=float(data["score"]),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "studentName": self.student_name,
            "assessmentType": self.assessment_type.value,
            "score": self.score,
        }


@dataclass(frozen=True)
class Opinion:
    id: str
    preferred_type: PreferenceType
    reason: str
    timestamp: str

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Opinion":
        for key in ("id", "preferredType", "reason", "timestamp"):
            if key not in data:
                raise ValueError(f"Opinion record missing '{key}'")
        return cls(
            id=str(data["id"]),
            preferred_type=PreferenceType(data["preferredType"]),
            reason=str(data["reason"]),
            timestamp=str(data["timestamp"]),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "preferredType": self.preferred_type.value,
            "reason": self.reason,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str

    @classmethod
    def from_provider(cls, uid: str, email: Optional[str], display_name: Optional[str]) -> "User":
        return cls(id=uid, email=email or "", name=display_name or email or "User")


def timestamp_id(now: Optional[datetime] = None, suffix: Optional[int] = None) -> str:
    """Record id from a millisecond timestamp, optionally suffixed with a row index."""
    moment = now or datetime.now()
    stamp = str(int(moment.timestamp() * 1000))
    return stamp if suffix is None else f"{stamp}-{suffix}"
