#!/usr/bin/env python3
"""Generate a synthetic class of oral/written scores for demos.

Usage:
    python tools/generate_synthetic.py --output data/synthetic_class.csv --students 40 --seed 42

Each student gets one Oral and one Written score. Written scores are drawn
from a shifted distribution so the two categories differ visibly, and a few
malformed rows can be mixed in to exercise the importer's filtering.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

HEADER = ["Student Name", "Assessment Type", "Score"]
FIRST_NAMES = ["Alex", "Riley", "Jordan", "Sam", "Taylor", "Morgan", "Casey", "Jamie", "Avery", "Quinn"]
LAST_NAMES = ["Kim", "Chen", "Patel", "Garcia", "Okafor", "Novak", "Silva", "Haddad", "Larsen", "Ito"]


def _student_names(n_students: int, rng: np.random.Generator) -> list[str]:
    names = []
    for idx in range(n_students):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        names.append(f"{first} {last} {idx + 1:03d}")
    return names


def generate_synthetic_scores(
    output_path: Path,
    n_students: int = 40,
    seed: int = 42,
    oral_mean: float = 74.0,
    written_mean: float = 79.0,
    invalid_rows: int = 0,
) -> pd.DataFrame:
    if n_students < 1:
        raise ValueError("n_students must be at least 1")

    rng = np.random.default_rng(seed)
    rows = []
    for name in _student_names(n_students, rng):
        ability = rng.normal(0, 6)
        oral = float(np.clip(rng.normal(oral_mean + ability, 9), 0, 100))
        written = float(np.clip(rng.normal(written_mean + ability, 7), 0, 100))
        rows.append({"Student Name": name, "Assessment Type": "Oral", "Score": round(oral)})
        rows.append({"Student Name": name, "Assessment Type": "Written", "Score": round(written)})

    # rows the importer is expected to drop
    bad_templates = [
        {"Student Name": "Out Of Range", "Assessment Type": "Oral", "Score": 140},
        {"Student Name": "Negative", "Assessment Type": "Written", "Score": -5},
        {"Student Name": "Not A Number", "Assessment Type": "Oral", "Score": "absent"},
        {"Student Name": "", "Assessment Type": "Written", "Score": 60},
    ]
    for idx in range(invalid_rows):
        rows.append(bad_templates[idx % len(bad_templates)])

    result = pd.DataFrame(rows, columns=HEADER)
    result = result.sample(frac=1, random_state=seed).reset_index(drop=True)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    result.to_csv(output_path, index=False)
    return result


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a synthetic oral/written score CSV for demos")
    parser.add_argument("--output", type=Path, default=Path("data/synthetic_class.csv"), help="Where to write synthetic CSV")
    parser.add_argument("--students", type=int, default=40, help="Number of synthetic students")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--invalid-rows", type=int, default=0, help="Malformed rows to mix in")
    args = parser.parse_args(list(argv) if argv is not None else None)

    generate_synthetic_scores(args.output, n_students=args.students, seed=args.seed, invalid_rows=args.invalid_rows)
    print(f"Synthetic scores written to {args.output}")


if __name__ == "__main__":
    main()
