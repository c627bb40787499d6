from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Optional

import pandas as pd

from .models import ASSESSMENT_TYPES, PREFERENCE_TYPES, AssessmentType, Opinion, StudentScore

SCORE_COLUMNS = ["id", "student_name", "assessment_type", "score"]
OPINION_COLUMNS = ["id", "preferred_type", "reason", "timestamp"]

EMPTY_SUMMARY = "Add some data to see insights!"


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value half away from zero, as JavaScript toFixed does."""
    if pd.isna(value):
        return value
    return float(Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def scores_frame(scores: Iterable[StudentScore]) -> pd.DataFrame:
    rows = [
        {
            "id": s.id,
            "student_name": s.student_name,
            "assessment_type": s.assessment_type.value,
            "score": s.score,
        }
        for s in scores
    ]
    return pd.DataFrame(rows, columns=SCORE_COLUMNS)


def opinions_frame(opinions: Iterable[Opinion]) -> pd.DataFrame:
    rows = [
        {
            "id": o.id,
            "preferred_type": o.preferred_type.value,
            "reason": o.reason,
            "timestamp": o.timestamp,
        }
        for o in opinions
    ]
    return pd.DataFrame(rows, columns=OPINION_COLUMNS)


def average_score(df: pd.DataFrame, assessment_type: AssessmentType | str) -> float:
    """Mean score for one category rounded to 2 decimals, or 0 when it is empty."""
    kind = AssessmentType(assessment_type).value
    subset = pd.to_numeric(df.loc[df["assessment_type"] == kind, "score"], errors="coerce")
    if subset.empty:
        return 0.0
    return round_half_up(sum(subset.dropna().tolist()) / len(subset), 2)


def average_by_type(df: pd.DataFrame) -> pd.DataFrame:
    return pd.DataFrame(
        [{"name": kind, "average": average_score(df, kind)} for kind in ASSESSMENT_TYPES],
        columns=["name", "average"],
    )


def preference_counts(df: pd.DataFrame) -> pd.DataFrame:
    """Count opinions per preferred type, in order of first appearance."""
    if df.empty:
        return pd.DataFrame(columns=["name", "value"])
    counts = df.groupby("preferred_type", sort=False).size()
    return pd.DataFrame({"name": counts.index.tolist(), "value": counts.tolist()})


def preference_percentages(df: pd.DataFrame) -> Dict[str, float]:
    total = len(df) or 1
    counts = df["preferred_type"].value_counts() if not df.empty else pd.Series(dtype=int)
    return {kind: int(counts.get(kind, 0)) / total * 100 for kind in PREFERENCE_TYPES}


def preference_share(percents: Dict[str, float]) -> pd.DataFrame:
    rows = [{"name": name, "value": round_half_up(value, 1)} for name, value in percents.items()]
    share = pd.DataFrame(rows, columns=["name", "value"])
    return share[share["value"] > 0].reset_index(drop=True)


def most_preferred(percents: Dict[str, float]) -> str:
    # Compared at display precision; on a tie the later category wins.
    best_name: Optional[str] = None
    best_value = 0.0
    for name, value in percents.items():
        shown = round_half_up(value, 1)
        if best_name is None or not best_value > shown:
            best_name, best_value = name, shown
    return best_name or PREFERENCE_TYPES[-1]


def key_finding(oral_avg: float, written_avg: float, percents: Dict[str, float], has_data: bool) -> str:
    if not has_data:
        return EMPTY_SUMMARY
    better = "oral" if oral_avg > written_avg else "written"
    preferred = most_preferred(percents).lower()
    return f"Students tend to perform better in {better} assessments but prefer {preferred} assessments."


@dataclass
class InsightStats:
    oral_avg: float
    written_avg: float
    total_scores: int
    total_opinions: int
    preference_percents: Dict[str, float] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return self.total_scores > 0 or self.total_opinions > 0

    @property
    def summary(self) -> str:
        return key_finding(self.oral_avg, self.written_avg, self.preference_percents, self.has_data)

    def chart_rows(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"name": AssessmentType.ORAL.value, "average": self.oral_avg},
                {"name": AssessmentType.WRITTEN.value, "average": self.written_avg},
            ]
        )

    def pie_rows(self) -> pd.DataFrame:
        return preference_share(self.preference_percents)


def compute_insights(scores: Iterable[StudentScore], opinions: Iterable[Opinion]) -> InsightStats:
    score_df = scores_frame(scores)
    opinion_df = opinions_frame(opinions)
    return InsightStats(
        oral_avg=average_score(score_df, AssessmentType.ORAL),
        written_avg=average_score(score_df, AssessmentType.WRITTEN),
        total_scores=len(score_df),
        total_opinions=len(opinion_df),
        preference_percents=preference_percentages(opinion_df),
    )
