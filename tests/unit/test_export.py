import pytest

from bicdir.converter.errors import OutputWriteError
from bicdir.converter.export import write_records_csv
from bicdir.converter.models import HEADERS


def test_writes_header_and_rows(tmp_path):
    out = tmp_path / "out.csv"
    records = [
        ["1997-03-01", "2024-06-06", "AAAAUS33", "XXX", "BANK, N.A.", 'THE "FIRST"', "", "", "", "FIIN"],
    ]
    assert write_records_csv(records, out) == 1
    lines = out.read_text(encoding="utf-8").split("\n")
    assert lines[0] == ",".join(HEADERS)
    assert lines[1] == '1997-03-01,2024-06-06,AAAAUS33,XXX,"BANK, N.A.","THE ""FIRST""",,,,FIIN'
    assert lines[2] == ""


def test_empty_records_still_write_header(tmp_path):
    out = tmp_path / "empty.csv"
    assert write_records_csv([], out) == 0
    assert out.read_text(encoding="utf-8") == ",".join(HEADERS) + "\n"


def test_non_ascii_is_utf8(tmp_path):
    out = tmp_path / "utf8.csv"
    write_records_csv([["2000-01-01", "", "", "", "Société Générale", "", "", "", "", ""]], out)
    assert "Société Générale" in out.read_bytes().decode("utf-8")


def test_unwritable_destination(tmp_path):
    with pytest.raises(OutputWriteError):
        write_records_csv([], tmp_path / "missing" / "out.csv")
