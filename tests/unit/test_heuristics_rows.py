import pytest

from bicdir.converter.heuristics import is_data_row, is_header_row


def test_is_header_row():
    assert is_header_row(["Record creation date"])
    assert is_header_row(["BIC Brch Code"])
    assert not is_header_row(["1997-03-01"])


@pytest.mark.parametrize(
    "cells",
    [
        ["Record", "", "creation"],
        ["", "LAST UPDATE date"],
        ["", "", "", "", "Full legal name"],
        ["Instit. Type"],
        ["Inst. Type"],
        ["ISO BIC Directory - March 2024"],
        ["SWIFT as Registration Authority"],
        ["ISO 9362"],
    ],
)
def test_header_phrases(cells):
    assert is_header_row(cells)


def test_plain_record_is_not_header():
    assert not is_header_row(["1997-03-01", "2024-06-06", "AAAAUS33", "XXX", "FIRST BANK"])


def test_is_data_row():
    assert is_data_row(["1997-03-01", "2024-06-06"])
    assert is_data_row(["2021-05-22"])
    assert is_data_row([" 2021-05-22 "])
    assert not is_data_row(["Record"])
    assert not is_data_row([""])


def test_is_data_row_edge_cases():
    assert not is_data_row(["2021-05"])
    assert not is_data_row(["21-05-2021"])
    assert not is_data_row([])
    assert not is_data_row(["ABCD-05-22"])
    assert not is_data_row(["", "2021-05-22"])


def test_is_data_row_is_shape_only():
    # No calendar validation.
    assert is_data_row(["2021-99-99"])
    assert is_data_row(["2021-05-22 extra"])
