"""
Column definitions and row accessors shared by every export format.

A row accessor is a callable ``(row, key) -> value``. The caller picks the
accessor that matches its row shape instead of the exporter inspecting rows.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Sequence, Union

RowAccessor = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class ExportColumn:
    key: Union[str, int]
    label: str


def by_key(row: Mapping, key) -> Any:
    """Read a field from a dict-like row; missing keys read as None."""
    return row.get(key)


def by_attribute(row: Any, key: str) -> Any:
    """Read a field from an object row such as ``CountyRecord``."""
    return getattr(row, key, None)


def by_index(row: Sequence, key: int) -> Any:
    """Read a field from a positional row; out-of-range indexes read as None."""
    try:
        return row[key]
    except IndexError:
        return None


def as_columns(columns: Sequence[Union[ExportColumn, str]]) -> List[ExportColumn]:
    """Accept bare strings as shorthand for a column whose key is its label."""
    return [c if isinstance(c, ExportColumn) else ExportColumn(key=c, label=c) for c in columns]


# Standard layout of the county table, read with ``by_attribute``
COUNTY_COLUMNS = [
    ExportColumn('name', 'County'),
    ExportColumn('tier', 'Tier'),
    ExportColumn('population', 'Population'),
    ExportColumn('median_income', 'Median Income'),
    ExportColumn('home_value_index', 'ZHVI'),
    ExportColumn('yoy_growth_pct', 'YoY Growth %'),
    ExportColumn('days_on_market', 'DOM'),
    ExportColumn('notes', 'Notes'),
]

WATCHLIST_COLUMNS = [
    ExportColumn('state', 'State'),
    ExportColumn('county', 'County'),
    ExportColumn('tier', 'Tier'),
    ExportColumn('added_date', 'Added Date'),
    ExportColumn('notes', 'Notes'),
]
