from io import BytesIO, StringIO

import pytest

from examertric.io import CsvImportError, import_scores, is_csv_filename, parse_scores_csv, parse_scores_text, scores_to_csv
from examertric.models import AssessmentType
from examertric.notices import failure, success
from examertric.storage import load_scores


def test_parse_scores_from_path_drops_invalid_rows(sample_csv_path, now):
    scores = parse_scores_csv(sample_csv_path, now=now)
    assert [s.student_name for s in scores] == ["John Doe", "Jane Smith"]
    assert scores[0].assessment_type is AssessmentType.ORAL
    assert scores[1].assessment_type is AssessmentType.WRITTEN
    assert scores[1].score == 92.0


def test_out_of_range_and_non_numeric_scores_excluded():
    text = "name,type,score\nA,Oral,-1\nB,Oral,100.5\nC,Written,NaN\nD,Written,ninety\nE,Oral,0\nF,Written,100\n"
    scores = parse_scores_text(text)
    assert [(s.student_name, s.score) for s in scores] == [("E", 0.0), ("F", 100.0)]


def test_header_is_skipped_even_after_blank_lines():
    text = "\n\n  \nStudent Name,Assessment Type,Score\n\nAda,Oral,70\n"
    scores = parse_scores_text(text)
    assert len(scores) == 1
    assert scores[0].student_name == "Ada"


def test_type_mapping_is_case_insensitive_and_defaults_to_written():
    text = "h1,h2,h3\nA,ORAL,50\nB, oral ,60\nC,Practical,70\nD,written,80\n"
    types = [s.assessment_type for s in parse_scores_text(text)]
    assert types == [AssessmentType.ORAL, AssessmentType.ORAL, AssessmentType.WRITTEN, AssessmentType.WRITTEN]


def test_rows_with_missing_fields_are_dropped():
    text = "h1,h2,h3\nOnly Name\nNo Score,Oral,\n,Oral,40\nFull,Written,55,extra\n"
    scores = parse_scores_text(text)
    assert [s.student_name for s in scores] == ["Full"]


def test_ids_carry_timestamp_and_data_line_index(now):
    text = "h1,h2,h3\nskip,Oral,999\nKeep,Oral,10\n"
    scores = parse_scores_text(text, now=now)
    stamp = str(int(now.timestamp() * 1000))
    assert scores[0].id == f"{stamp}-1"


def test_empty_upload_yields_no_scores():
    assert parse_scores_text("") == []
    assert parse_scores_text("Student Name,Assessment Type,Score\n") == []


def test_parse_accepts_uploaded_bytes_with_bom():
    upload = BytesIO("\ufeffname,type,score\nZoe,Oral,77\n".encode("utf-8"))
    scores = parse_scores_csv(upload)
    assert scores[0].student_name == "Zoe"


def test_undecodable_upload_raises_import_error():
    with pytest.raises(CsvImportError):
        parse_scores_csv(BytesIO(b"\xff\xfe\x00garbage\xff"))


def test_missing_file_raises_import_error(tmp_path):
    with pytest.raises(CsvImportError):
        parse_scores_csv(tmp_path / "missing.csv")


def test_is_csv_filename():
    assert is_csv_filename("scores.csv")
    assert not is_csv_filename("scores.xlsx")
    assert not is_csv_filename("")


def test_exported_scores_can_be_reimported(sample_csv_path):
    scores = parse_scores_csv(sample_csv_path)
    reimported = parse_scores_csv(StringIO(scores_to_csv(scores)))
    assert [(s.student_name, s.assessment_type, s.score) for s in reimported] == [
        (s.student_name, s.assessment_type, s.score) for s in scores
    ]


def test_radix_prefixed_scores_are_numbers():
    text = "name,type,score\nA,Oral,0x1A\nB,Written,0b1010\nC,Oral,0o17\nD,Written,0x1G\nE,Oral,-0x10\n"
    scores = parse_scores_text(text)
    assert [(s.student_name, s.score) for s in scores] == [("A", 26.0), ("B", 10.0), ("C", 15.0)]


def test_import_scores_appends_and_reports_count(store, sample_csv_path, now):
    notice = import_scores(store, sample_csv_path, sample_csv_path.name, now=now)
    assert notice == success("Upload successful", "Added 2 student scores")
    assert [s.student_name for s in load_scores(store)] == ["John Doe", "Jane Smith"]


def test_import_scores_without_valid_rows(store):
    notice = import_scores(store, StringIO("Student Name,Assessment Type,Score\nA,Oral,abc\n"))
    assert notice == failure("No valid data", "CSV file contains no valid records")
    assert load_scores(store) == []


def test_import_scores_unreadable_upload(store):
    notice = import_scores(store, BytesIO(b"\xff\xfe\x00bad"))
    assert notice == failure("Upload failed", "Error parsing CSV file")
    assert notice.is_error
