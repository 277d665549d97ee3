"""
Tier filter and column sort for the county table.
"""

import locale
from typing import Any, Callable, Dict, List, Optional

from county_data.models import CountyRecord
from county_data.store import CountyStore

SORT_FIELDS: Dict[str, str] = {
    'name': 'name',
    'pop': 'population',
    'income': 'median_income',
    'zhvi': 'home_value_index',
    'growth': 'yoy_growth_pct',
    'dom': 'days_on_market',
    'tier': 'tier',
}
DEFAULT_SORT_COLUMN = 'tier'


def _sort_key(field_name: str) -> Callable[[CountyRecord], Any]:
    def key(record: CountyRecord):
        value = getattr(record, field_name)
        if isinstance(value, str):
            return locale.strxfrm(value.casefold())
        return value
    return key


def view_counties(
    store: CountyStore,
    state_code: Optional[str],
    tier_ceiling: int = 5,
    sort_column: str = DEFAULT_SORT_COLUMN,
    ascending: bool = True
) -> List[CountyRecord]:
    """
    Counties of one state at or better than ``tier_ceiling``, sorted.

    Sorting relies on Python's stable sort, so counties with equal keys keep
    their store order whichever direction is requested. Unknown sort columns
    fall back to tier.
    """
    if not state_code:
        return []

    field_name = SORT_FIELDS.get(sort_column, SORT_FIELDS[DEFAULT_SORT_COLUMN])
    filtered = [record for record in store.counties(state_code) if record.tier <= tier_ceiling]
    return sorted(filtered, key=_sort_key(field_name), reverse=not ascending)
