from pathlib import Path

import pytest

from examertric.io import parse_scores_csv
from tools.generate_synthetic import generate_synthetic_scores


def test_generate_synthetic_scores_writes_importable_csv(tmp_path: Path):
    output = tmp_path / "synthetic.csv"
    result = generate_synthetic_scores(output, n_students=12, seed=123)

    assert output.exists()
    assert list(result.columns) == ["Student Name", "Assessment Type", "Score"]
    assert len(result) == 24
    assert set(result["Assessment Type"]) == {"Oral", "Written"}
    assert result["Score"].between(0, 100).all()

    scores = parse_scores_csv(output)
    assert len(scores) == 24


def test_invalid_rows_are_dropped_on_import(tmp_path: Path):
    output = tmp_path / "synthetic.csv"
    result = generate_synthetic_scores(output, n_students=5, seed=7, invalid_rows=4)
    assert len(result) == 14

    scores = parse_scores_csv(output)
    assert len(scores) == 10


def test_same_seed_is_reproducible(tmp_path: Path):
    first = generate_synthetic_scores(tmp_path / "a.csv", n_students=8, seed=9)
    second = generate_synthetic_scores(tmp_path / "b.csv", n_students=8, seed=9)
    assert first.equals(second)


def test_rejects_empty_class(tmp_path: Path):
    with pytest.raises(ValueError):
        generate_synthetic_scores(tmp_path / "x.csv", n_students=0)
