import os
import sys
from datetime import date, datetime

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.exceptions import SecurityError
from county_data import CountyRecord, CountyStore
from export import (
    COUNTY_COLUMNS,
    ExportColumn,
    build_csv,
    by_attribute,
    by_index,
    by_key,
    dated_export_filename,
    export_county_data_csv,
    export_state_data_csv,
    export_to_csv,
    export_watchlist_csv,
    secure_filename,
    table_to_text,
    watchlist_rows,
)

ROWS = [
    {"state": "NY", "county": "Kings", "tier": 1, "pop": 2559903, "growth": 5.1},
    {"state": "NY", "county": "Queens", "tier": 1, "pop": 2253858, "growth": 4.8},
]
COLUMNS = [
    ExportColumn("state", "State"),
    ExportColumn("county", "County"),
    ExportColumn("tier", "Tier"),
    ExportColumn("pop", "Population"),
    ExportColumn("growth", "Growth"),
]


class TestBuildCsv:

    def test_naive_parse_reproduces_labels_and_values(self):
        content = build_csv(ROWS, COLUMNS)
        lines = [line.split(',') for line in content.split('\n')]

        assert lines[0] == ["State", "County", "Tier", "Population", "Growth"]
        assert lines[1] == ["NY", "Kings", "1", "2559903", "5.1"]
        assert lines[2] == ["NY", "Queens", "1", "2253858", "4.8"]
        assert len(lines) == 3

    def test_none_and_missing_become_empty(self):
        rows = [{"state": "NY", "county": None, "tier": 1}]
        content = build_csv(rows, COLUMNS)

        assert content.split('\n')[1] == "NY,,1,,"

    def test_integer_column_with_gap_stays_integer(self):
        rows = [{"county": "A", "tier": 1}, {"county": "B", "tier": None}, {"county": "C", "tier": 3}]
        content = build_csv(rows, [ExportColumn("county", "County"), ExportColumn("tier", "Tier")])

        assert content.split('\n') == ["County,Tier", "A,1", "B,", "C,3"]

    def test_commas_and_quotes_are_escaped(self):
        rows = [{"name": 'Smith, "Jr"'}, {"name": 'The "Big" One'}, {"name": "two\nlines"}]
        content = build_csv(rows, [ExportColumn("name", "Name")])

        assert content == 'Name\n"Smith, ""Jr"""\n"The ""Big"" One"\n"two\nlines"'

    def test_positional_rows(self):
        rows = [["Kings", 2559903], ["Queens", 2253858]]
        columns = [ExportColumn(0, "County"), ExportColumn(1, "Population"), ExportColumn(5, "Missing")]

        content = build_csv(rows, columns, accessor=by_index)

        assert content.split('\n')[1] == "Kings,2559903,"

    def test_county_records_by_attribute(self):
        store = CountyStore.defaults()
        content = build_csv(store["NY"][:1], COUNTY_COLUMNS, accessor=by_attribute)

        header, first = content.split('\n')
        assert header.startswith("County,Tier,Population")
        assert first == "Kings,1,2559903,67000,850000,5.1,25,Brooklyn"

    def test_string_columns_shorthand(self):
        content = build_csv([{"a": 1, "b": 2}], ["a", "b"])
        assert content == "a,b\n1,2"

    def test_empty_rows_give_header_only(self):
        assert build_csv([], COLUMNS) == "State,County,Tier,Population,Growth"


class TestTableToText:

    def test_tab_separated(self):
        text = table_to_text(ROWS, COLUMNS)
        lines = text.split('\n')

        assert lines[0] == "State\tCounty\tTier\tPopulation\tGrowth"
        assert lines[1] == "NY\tKings\t1\t2559903\t5.1"

    def test_commas_are_not_quoted_but_tabs_are(self):
        rows = [{"name": "Palm Beach, FL"}, {"name": "tab\there"}]
        text = table_to_text(rows, [ExportColumn("name", "Name")])

        assert text == 'Name\nPalm Beach, FL\n"tab\there"'


class TestExportToCsv:

    def test_writes_named_file(self, tmp_path):
        path = export_to_csv(ROWS, COLUMNS, "new york counties", export_dir=tmp_path)

        assert path == tmp_path / "new_york_counties.csv"
        assert path.read_text(encoding='utf-8') == build_csv(ROWS, COLUMNS)

    def test_creates_export_dir(self, tmp_path):
        target_dir = tmp_path / "nested" / "exports"
        path = export_to_csv(ROWS, COLUMNS, "x", export_dir=target_dir)
        assert path.parent == target_dir

    def test_no_rows_is_a_noop(self, tmp_path, caplog):
        assert export_to_csv([], COLUMNS, "x", export_dir=tmp_path) is None
        assert list(tmp_path.iterdir()) == []
        assert "No data to export" in caplog.text

    def test_path_traversal_is_stripped(self, tmp_path):
        path = export_to_csv(ROWS, COLUMNS, "../../etc/passwd", export_dir=tmp_path)
        assert path.parent == tmp_path
        assert path.name == "passwd.csv"

    def test_rejected_name_returns_none(self, tmp_path):
        assert export_to_csv(ROWS, COLUMNS, None, export_dir=tmp_path) is None
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_target_returns_none(self, tmp_path):
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")

        assert export_to_csv(ROWS, COLUMNS, "x", export_dir=blocker) is None


class TestWatchlist:

    def test_rows_normalized(self):
        items = [
            {"stateAbbr": "TX", "county": "Travis", "tier": 1, "addedAt": "2025-03-04T10:00:00"},
            {"state": "FL", "county": "Orange", "tier": 1, "added_at": datetime(2025, 1, 2), "notes": "Orlando"},
            {"state": "NY", "county": "Kings", "tier": 1, "added_at": 1735689600000},
        ]
        rows = watchlist_rows(items)

        assert rows[0] == {"state": "TX", "county": "Travis", "tier": 1, "added_date": "03/04/2025", "notes": ""}
        assert rows[1]["added_date"] == "01/02/2025"
        assert rows[1]["notes"] == "Orlando"
        assert rows[2]["added_date"] == "01/01/2025"

    def test_export_watchlist_csv(self, tmp_path):
        items = [{"state": "TX", "county": "Travis", "tier": 1, "added_at": "2025-03-04"}]

        path = export_watchlist_csv(items, export_dir=tmp_path, on=date(2025, 6, 1))

        assert path.name == "watchlist_2025-06-01.csv"
        assert path.read_text(encoding='utf-8').split('\n') == [
            "State,County,Tier,Added Date,Notes",
            "TX,Travis,1,03/04/2025,",
        ]

    def test_unparseable_dates_become_empty(self, tmp_path):
        items = [
            {"state": "TX", "county": "Travis", "tier": 1, "addedAt": "not a date"},
            {"state": "TX", "county": "Harris", "tier": 2, "addedAt": "NaT"},
            {"state": "TX", "county": "Dallas", "tier": 2, "addedAt": float("inf")},
        ]

        assert [row["added_date"] for row in watchlist_rows(items)] == ["", "", ""]

        path = export_watchlist_csv(items, export_dir=tmp_path, on=date(2025, 6, 1))
        assert path.read_text(encoding='utf-8').split('\n')[1] == "TX,Travis,1,,"

    def test_empty_watchlist(self, tmp_path):
        assert export_watchlist_csv([], export_dir=tmp_path) is None


class TestNamedExports:

    def test_state_data_export(self, tmp_path):
        counties = CountyStore.defaults()["NY"]

        path = export_state_data_csv(counties, "New York", export_dir=tmp_path, on=date(2025, 6, 1))

        assert path.name == "New_York_data_2025-06-01.csv"
        lines = path.read_text(encoding='utf-8').split('\n')
        assert lines[0] == "County,Tier,Population,Median Income,ZHVI,YoY Growth %,DOM,Notes"
        assert lines[1] == "Kings,1,2559903,67000,850000,5.1,25,Brooklyn"
        assert len(lines) == len(counties) + 1

    def test_county_data_export(self, tmp_path):
        path = export_county_data_csv(ROWS, COLUMNS, export_dir=tmp_path, on=date(2025, 6, 1))

        assert path.name == "county_data_2025-06-01.csv"
        assert path.read_text(encoding='utf-8') == build_csv(ROWS, COLUMNS)

    def test_empty_state_is_a_noop(self, tmp_path):
        assert export_state_data_csv([], "Nowhere", export_dir=tmp_path) is None


class TestFilenames:

    @pytest.mark.parametrize("raw,expected", [
        ("New York", "New_York"),
        ("../secret", "secret"),
        ("a/b/c.txt", "c.txt"),
        ("weird$$name!", "weird_name"),
        ("", "export"),
        ("...", "export"),
        ("..\\reports\\Palm Beach, FL", "Palm_Beach_FL"),
    ])
    def test_secure_filename(self, raw, expected):
        assert secure_filename(raw) == expected

    def test_long_names_are_truncated(self):
        assert len(secure_filename("a" * 400)) == 255

    def test_non_string_name_is_rejected(self):
        with pytest.raises(SecurityError):
            secure_filename(None)

    def test_dated_export_filename(self):
        assert dated_export_filename("New York", on=date(2025, 2, 3)) == "New_York_2025-02-03"


def test_accessors():
    record = CountyRecord.from_row(["Kings", 1, 2, 3, 4.0, 5, 1, ""])
    assert by_attribute(record, "name") == "Kings"
    assert by_attribute(record, "missing") is None
    assert by_key({"a": 1}, "b") is None
    assert by_index([1, 2], 1) == 2
