import pytest

from scadaxdf.common import REQUIRED_COLUMNS
from scadaxdf.exceptions import MissingColumnsError
from scadaxdf.xdf.rows import Row, make_rows, validate_columns
from tests.common import HEADERS, STATION_PATH, make_header_map, make_row


def test_validate_columns():
    validate_columns(make_header_map(), REQUIRED_COLUMNS)


def test_validate_columns_lists_all_missing():
    headers = [x for x in HEADERS if x not in ("TYPE", "REGION")]
    with pytest.raises(MissingColumnsError) as exc:
        validate_columns(make_header_map(headers), REQUIRED_COLUMNS)
    assert exc.value.missing == ["TYPE", "REGION"]


def test_row_access():
    header_map = make_header_map(HEADERS + ["SBO", "MHB"])
    row = Row(make_row(" I_S ", "MvMoment", "AI", SBO="", MHB="12"), header_map)
    assert row.element == "I_S"
    assert row.info == "MvMoment"
    assert row.get("SBO") == ""
    assert row.get("MHB") == "12"
    assert row.get("CLB") is None
    assert row.value("CLB") == ""
    assert row.get_or_default("SBO", "0") == "0"
    assert row.get_or_default("MHB", "0") == "12"
    assert row.station_path == STATION_PATH


def test_short_row():
    header_map = make_header_map(HEADERS + ["DASIP"])
    row = Row(["P", "MvMoment"], header_map)
    assert row.value("B3") == ""
    assert row.get("DASIP") is None
    assert row.station_path == "ELECTRICITY/NETWORK/////"


def test_make_rows():
    rows = make_rows([make_row("P", "MvMoment", "AI"), make_row("Q", "MvMoment", "AI")], make_header_map())
    assert [x.element for x in rows] == ["P", "Q"]
