from typing import Dict, List

import pandas as pd

REQUIRED_COLUMNS = ["id", "student_name", "assessment_type", "score"]


def check_required_columns(df: pd.DataFrame) -> Dict[str, bool]:
    return {col: col in df.columns for col in REQUIRED_COLUMNS}


def check_missing_identifiers(df: pd.DataFrame) -> int:
    missing_ids = df["id"].astype(str).str.strip() == ""
    missing_names = df["student_name"].astype(str).str.strip() == ""
    return int((missing_ids | missing_names).sum())


def check_numeric_scores(df: pd.DataFrame) -> int:
    numeric_score = pd.to_numeric(df["score"], errors="coerce")
    return int(numeric_score.isna().sum())


def check_score_ranges(df: pd.DataFrame) -> int:
    numeric_score = pd.to_numeric(df["score"], errors="coerce")
    return int(((numeric_score < 0) | (numeric_score > 100)).sum())


def check_duplicate_ids(df: pd.DataFrame) -> int:
    return int(df["id"].duplicated(keep="first").sum())


def run_invariants(df: pd.DataFrame) -> List[Dict[str, object]]:
    results = []

    required = check_required_columns(df)
    missing_required = [col for col, present in required.items() if not present]
    results.append(
        {
            "name": "required_columns",
            "ok": len(missing_required) == 0,
            "detail": ", ".join(missing_required) if missing_required else "all present",
        }
    )
    if missing_required:
        return results

    missing_ids = check_missing_identifiers(df)
    results.append({"name": "missing_identifiers", "ok": missing_ids == 0, "detail": missing_ids})

    non_numeric = check_numeric_scores(df)
    results.append({"name": "non_numeric_scores", "ok": non_numeric == 0, "detail": non_numeric})

    out_of_range = check_score_ranges(df)
    results.append({"name": "score_range_violations", "ok": out_of_range == 0, "detail": out_of_range})

    duplicates = check_duplicate_ids(df)
    results.append({"name": "duplicate_ids", "ok": duplicates == 0, "detail": duplicates})

    return results
