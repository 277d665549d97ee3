import os
import sys

import pandas as pd
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.exceptions import DataSourceError, ValidationError
from county_data import (
    COUNTY_TABLE_COLUMNS,
    DEFAULT_COUNTY_ROWS,
    CountyRecord,
    CountyStore,
    get_tier_info,
    load_initial_store,
    state_name,
    state_summary,
)

NY_ROWS = {
    "NY": [
        ["Kings", 2559903, 67000, 850000, 5.1, 25, 1, "Brooklyn"],
        ["Queens", 2253858, 72500, 680000, 4.8, 30, 1, "Queens"],
    ]
}


class TestCountyRecord:

    def test_from_row_keeps_field_order(self):
        record = CountyRecord.from_row(NY_ROWS["NY"][0])

        assert record.name == "Kings"
        assert record.population == 2559903
        assert record.median_income == 67000
        assert record.home_value_index == 850000
        assert record.yoy_growth_pct == 5.1
        assert record.days_on_market == 25
        assert record.tier == 1
        assert record.notes == "Brooklyn"
        assert record.as_row() == tuple(NY_ROWS["NY"][0])

    def test_from_row_notes_optional(self):
        record = CountyRecord.from_row(["Hamilton", 5107, 52000, 190000, 0.5, 120, 5])
        assert record.notes == ''

    def test_from_row_rejects_wrong_length(self):
        with pytest.raises(ValidationError):
            CountyRecord.from_row(["Kings", 1, 2])

    def test_from_row_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            CountyRecord.from_row(["Kings", "lots", 67000, 850000, 5.1, 25, 1, ""])

    def test_unknown_tier_has_no_info(self):
        record = CountyRecord.from_row(["Odd", 1, 1, 1, 0.0, 1, 9, ""])
        assert record.has_known_tier is False
        assert get_tier_info(record.tier) is None
        assert get_tier_info(1).label == "T1"


class TestCountyStore:

    def test_defaults_cover_built_in_table(self):
        store = CountyStore.defaults()

        assert list(store) == list(DEFAULT_COUNTY_ROWS)
        assert store.total_counties() == sum(len(rows) for rows in DEFAULT_COUNTY_ROWS.values())
        assert store.counties("NY")[0].name == "Kings"

    def test_counties_unknown_or_blank_state(self):
        store = CountyStore.from_rows(NY_ROWS)

        assert store.counties("ZZ") == ()
        assert store.counties("") == ()
        assert store.counties(None) == ()
        assert store.counties("ny")[1].name == "Queens"

    def test_store_is_read_only(self):
        store = CountyStore.from_rows(NY_ROWS)

        with pytest.raises(TypeError):
            store["NY"] = ()
        assert isinstance(store["NY"], tuple)

    def test_count_at_or_below(self):
        store = CountyStore.from_rows({
            "WY": [
                ["Laramie", 100512, 58000, 295000, 3.5, 48, 3, "Cheyenne"],
                ["Teton", 23464, 92000, 1250000, 4.0, 55, 2, "Jackson"],
            ]
        })
        assert store.count_at_or_below(2) == 1
        assert store.count_at_or_below(3) == 2

    def test_dataframe_round_trip_preserves_order(self):
        store = CountyStore.defaults()

        df = store.to_dataframe()
        rebuilt = CountyStore.from_dataframe(df)

        assert list(df.columns) == COUNTY_TABLE_COLUMNS
        assert list(rebuilt) == list(store)
        assert rebuilt["TX"] == store["TX"]

    def test_from_dataframe_missing_columns(self):
        df = pd.DataFrame([{"state": "NY", "name": "Kings"}])
        with pytest.raises(ValidationError):
            CountyStore.from_dataframe(df)

    def test_from_records_api_shape(self):
        records = [
            {"state": "ny", "name": "Kings", "pop": 2559903, "income": 67000, "zhvi": 850000,
             "growth": 5.1, "dom": 25, "tier": 1, "notes": None},
            {"state": "NJ", "name": "Bergen", "pop": 955732, "income": 105000, "zhvi": 580000,
             "growth": 3.2, "dom": 32, "tier": 1, "notes": "NYC suburbs"},
        ]
        store = CountyStore.from_records(records)

        assert list(store) == ["NY", "NJ"]
        assert store["NY"][0].notes == ''
        assert store["NJ"][0].notes == "NYC suburbs"

    @pytest.mark.parametrize("missing", ["state", "name"])
    def test_from_records_rejects_missing_state_or_name(self, missing):
        record = {"state": "NY", "name": "Kings", "pop": 2559903, "income": 67000, "zhvi": 850000,
                  "growth": 5.1, "dom": 25, "tier": 1}
        del record[missing]

        with pytest.raises(ValidationError):
            CountyStore.from_records([record])

    def test_from_csv(self, tmp_path):
        csv_path = tmp_path / "counties.csv"
        csv_path.write_text(
            "state,name,pop,income,zhvi,growth,dom,tier,notes\n"
            "NY,Kings,2559903,67000,850000,5.1,25,1,Brooklyn\n"
            "NY,Queens,2253858,72500,680000,4.8,30,1,\n"
        )

        store = load_initial_store(str(csv_path))

        assert [c.name for c in store["NY"]] == ["Kings", "Queens"]
        assert store["NY"][1].notes == ''

    def test_from_csv_missing_file(self, tmp_path):
        with pytest.raises(DataSourceError):
            CountyStore.from_csv(tmp_path / "missing.csv")

    def test_from_csv_bad_rows(self, tmp_path):
        csv_path = tmp_path / "counties.csv"
        csv_path.write_text("state,name,pop,income,zhvi,growth,dom,tier\nNY,Kings,many,1,1,1,1,1\n")
        with pytest.raises(DataSourceError):
            CountyStore.from_csv(csv_path)

    def test_load_initial_store_without_file_uses_defaults(self):
        assert load_initial_store(None) == CountyStore.defaults()


class TestStateSummary:

    def test_summary(self):
        store = CountyStore.defaults()
        summary = state_summary(store, "WY")

        assert summary.best_tier == 2
        assert summary.county_count == 2
        assert summary.tier_1_to_3_count == 2

    def test_summary_empty_state(self):
        summary = state_summary(CountyStore.from_rows(NY_ROWS), "TX")
        assert (summary.best_tier, summary.county_count, summary.tier_1_to_3_count) == (5, 0, 0)

    def test_state_name_fallback(self):
        assert state_name("NY") == "New York"
        assert state_name("PR") == "PR"
