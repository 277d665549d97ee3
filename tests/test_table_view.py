import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from county_data import CountyStore
from search import SORT_FIELDS, view_counties

STORE = CountyStore.from_rows({
    "NY": [
        ["Kings", 2559903, 67000, 850000, 5.1, 25, 1, "Brooklyn"],
        ["Queens", 2253858, 72500, 680000, 4.8, 30, 1, "Queens"],
        ["erie", 954236, 59000, 210000, 3.9, 40, 2, "Buffalo"],
        ["Albany", 314848, 72000, 260000, 3.6, 38, 2, "Capital"],
        ["Hamilton", 5107, 52000, 190000, 0.5, 120, 5, "Adirondacks"],
        ["Allegany", 46456, 47000, 95000, 0.4, 110, 5, "Rural"],
    ]
})


def names(records):
    return [r.name for r in records]


def test_concrete_population_descending():
    store = CountyStore.from_rows({
        "NY": [
            ["Kings", 2559903, 67000, 850000, 5.1, 25, 1, "Brooklyn"],
            ["Queens", 2253858, 72500, 680000, 4.8, 30, 1, "Queens"],
        ]
    })
    assert names(view_counties(store, "NY", 1, "pop", False)) == ["Kings", "Queens"]


def test_tier_ceiling_filters():
    result = view_counties(STORE, "NY", tier_ceiling=2, sort_column='pop', ascending=False)

    assert all(r.tier <= 2 for r in result)
    assert names(result) == ["Kings", "Queens", "erie", "Albany"]


def test_reversing_direction_reverses_untied_keys():
    ascending = view_counties(STORE, "NY", 5, 'pop', True)
    descending = view_counties(STORE, "NY", 5, 'pop', False)

    assert names(descending) == list(reversed(names(ascending)))


def test_ties_keep_store_order_in_both_directions():
    ascending = view_counties(STORE, "NY", 5, 'tier', True)
    descending = view_counties(STORE, "NY", 5, 'tier', False)

    assert names(ascending) == ["Kings", "Queens", "erie", "Albany", "Hamilton", "Allegany"]
    assert names(descending) == ["Hamilton", "Allegany", "erie", "Albany", "Kings", "Queens"]


def test_name_sort_ignores_case():
    result = view_counties(STORE, "NY", 5, 'name', True)
    assert names(result) == ["Albany", "Allegany", "erie", "Hamilton", "Kings", "Queens"]


@pytest.mark.parametrize("column", sorted(SORT_FIELDS))
def test_every_sort_column_is_ordered(column):
    field_name = SORT_FIELDS[column]
    result = view_counties(STORE, "NY", 5, column, True)
    values = [getattr(r, field_name) for r in result]

    if column == 'name':
        values = [v.casefold() for v in values]
    assert values == sorted(values)


def test_unknown_sort_column_uses_tier():
    assert view_counties(STORE, "NY", 5, 'bogus', True) == view_counties(STORE, "NY", 5, 'tier', True)


@pytest.mark.parametrize("state_code", ["", None, "ZZ"])
def test_missing_state_is_empty(state_code):
    assert view_counties(STORE, state_code) == []


def test_view_does_not_touch_store():
    before = STORE["NY"]
    view_counties(STORE, "NY", 1, 'name', False)
    assert STORE["NY"] is before
