from __future__ import annotations

import pytest

from classbook.constants import COLUMNS
from classbook.exceptions import LoadFailure, SaveFailure
from classbook.models import StudentRecord
from classbook.storage import load_records, save_records


def test_header_is_skipped_without_validation(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text("anything at all\n1,Ana,Cruz,90,85,88,92,95\n", encoding="utf-8")

    assert load_records(str(path)) == [StudentRecord("1", "Ana", "Cruz", "90", "85", "88", "92", "95")]


def test_short_rows_are_padded_and_long_rows_truncated(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text(
        ",".join(COLUMNS) + "\n"
        "1,Ana,Cruz\n"
        "2,Bo,Diaz,70,75,80,85,90,extra,more\n",
        encoding="utf-8",
    )

    records = load_records(str(path))

    assert records[0].to_row() == ["1", "Ana", "Cruz", "", "", "", "", ""]
    assert records[1].to_row() == ["2", "Bo", "Diaz", "70", "75", "80", "85", "90"]


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text(",".join(COLUMNS) + "\n\n1,Ana,Cruz,90,85,88,92,95\n\n", encoding="utf-8")

    assert len(load_records(str(path))) == 1


def test_empty_file_loads_empty(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text("", encoding="utf-8")

    assert load_records(str(path)) == []


def test_missing_file_raises_load_failure(tmp_path):
    with pytest.raises(LoadFailure) as excinfo:
        load_records(str(tmp_path / "nope.csv"))

    assert excinfo.value.filepath.endswith("nope.csv")


def test_save_writes_header_and_plain_lines(tmp_path):
    path = tmp_path / "roster.csv"
    save_records(str(path), [StudentRecord("1", "Ana", "Cruz", "90", "85", "88", "92", "95")])

    assert path.read_text(encoding="utf-8") == (
        "StudentID,First Name,Last Name,LAB WORK 1,LAB WORK 2,LAB WORK 3,PRELIM EXAM,ATTENDANCE GRADE\n"
        "1,Ana,Cruz,90,85,88,92,95\n"
    )


def test_fields_with_commas_survive_a_save(tmp_path):
    path = tmp_path / "roster.csv"
    record = StudentRecord("7", "Cruz, Jr.", 'Say "hi"', "90", "85", "88", "92", "95")

    save_records(str(path), [record])

    assert load_records(str(path)) == [record]


def test_save_creates_missing_folder(tmp_path):
    path = tmp_path / "nested" / "roster.csv"

    save_records(str(path), [])

    assert path.read_text(encoding="utf-8") == ",".join(COLUMNS) + "\n"


def test_save_into_directory_raises_save_failure(tmp_path):
    with pytest.raises(SaveFailure):
        save_records(str(tmp_path), [])


def test_stray_quote_stays_on_its_own_line(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text(
        ",".join(COLUMNS) + "\n"
        "1,Ana,Cruz,90,85,88,92,95\n"
        '2,"Bo,Diaz,70,75,80,85,90\n'
        "3,Cy,Eng,1,2,3,4,5\n",
        encoding="utf-8",
    )

    records = load_records(str(path))

    assert [r.student_id for r in records] == ["1", "2", "3"]
    assert records[1].to_row() == ["2", '"Bo', "Diaz", "70", "75", "80", "85", "90"]
    assert records[2] == StudentRecord("3", "Cy", "Eng", "1", "2", "3", "4", "5")


def test_crlf_file_loads_without_carriage_returns(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_bytes(b"StudentID,First Name\r\n1,Ana,Cruz,90,85,88,92,95\r\n")

    assert load_records(str(path)) == [StudentRecord("1", "Ana", "Cruz", "90", "85", "88", "92", "95")]


@pytest.mark.parametrize("value", ["A\rB", "A\nB", "A\r\nB"])
def test_line_breaks_in_fields_keep_one_record_per_line(tmp_path, value):
    path = tmp_path / "roster.csv"
    record = StudentRecord("1", value, "C", "", "", "", "", "")
    following = StudentRecord("2", "Bo", "Diaz", "70", "75", "80", "85", "90")

    save_records(str(path), [record, following])
    loaded = load_records(str(path))

    assert loaded == [record, following]
    assert loaded[0].first_name == "A B"
    assert len(path.read_text(encoding="utf-8").splitlines()) == 3


def test_undecodable_bytes_load_and_save_unchanged(tmp_path):
    path = tmp_path / "roster.csv"
    original = (
        ",".join(COLUMNS).encode("ascii") + b"\n"
        + "1,Peña,Cruz,90,85,88,92,95\n".encode("cp1252")
        + b"2,Bo,Diaz,70,75,80,85,90\n"
    )
    path.write_bytes(original)

    records = load_records(str(path))
    save_records(str(path), records)

    assert len(records) == 2
    assert path.read_bytes() == original
