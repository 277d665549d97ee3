"""
In-memory county store for Auction Intel.

A ``CountyStore`` is an immutable snapshot mapping a two-letter state code
to the ordered counties of that state. Refreshing data means building a new
store and swapping it in; stores are never edited in place.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import pandas as pd

from core.exceptions import DataSourceError, ValidationError
from .defaults import DEFAULT_COUNTY_ROWS, STATE_NAMES
from .models import CountyRecord

# Column layout shared by the CSV seed file and the /api/counties payload
COUNTY_TABLE_COLUMNS = ['state', 'name', 'pop', 'income', 'zhvi', 'growth', 'dom', 'tier', 'notes']
REQUIRED_TABLE_COLUMNS = [c for c in COUNTY_TABLE_COLUMNS if c != 'notes']


class CountyStore(Mapping):
    """Read-only mapping of state code -> tuple of CountyRecord."""

    def __init__(self, counties: Optional[Dict[str, Iterable[CountyRecord]]] = None):
        self._counties: Dict[str, Tuple[CountyRecord, ...]] = {
            str(code).upper(): tuple(records)
            for code, records in (counties or {}).items()
        }

    def __getitem__(self, state_code: str) -> Tuple[CountyRecord, ...]:
        return self._counties[state_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counties)

    def __len__(self) -> int:
        return len(self._counties)

    def __repr__(self) -> str:
        return f"CountyStore(states={len(self)}, counties={self.total_counties()})"

    def counties(self, state_code: Optional[str]) -> Tuple[CountyRecord, ...]:
        """Counties of a state in display order; empty for unknown or blank codes."""
        if not state_code:
            return ()
        return self._counties.get(state_code.upper(), ())

    def total_counties(self) -> int:
        return sum(len(records) for records in self._counties.values())

    def count_at_or_below(self, tier: int) -> int:
        """Number of counties whose tier is ``tier`` or better."""
        return sum(
            1 for records in self._counties.values() for record in records if record.tier <= tier
        )

    @classmethod
    def from_rows(cls, rows_by_state: Dict[str, Sequence[Sequence[Any]]]) -> 'CountyStore':
        """Build a store from legacy positional rows."""
        return cls({
            code: [CountyRecord.from_row(row) for row in rows]
            for code, rows in rows_by_state.items()
        })

    @classmethod
    def defaults(cls) -> 'CountyStore':
        """The built-in county table."""
        return cls.from_rows(DEFAULT_COUNTY_ROWS)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> 'CountyStore':
        """
        Build a store from a flat county table.

        Args:
            df: DataFrame with the ``COUNTY_TABLE_COLUMNS`` layout; ``notes`` is optional

        Returns:
            CountyStore with states in order of first appearance

        Raises:
            ValidationError: If required columns are missing or a row is malformed
        """
        missing = [c for c in REQUIRED_TABLE_COLUMNS if c not in df.columns]
        if missing:
            raise ValidationError(f"County table missing required columns: {', '.join(missing)}")

        table = df.copy()
        if 'notes' not in table.columns:
            table['notes'] = ''
        table['notes'] = table['notes'].fillna('')

        grouped: Dict[str, List[CountyRecord]] = {}
        for row in table[COUNTY_TABLE_COLUMNS].itertuples(index=False):
            if pd.isna(row[0]) or pd.isna(row[1]):
                raise ValidationError("County row is missing its state or name", field='state', value=list(row))
            state_code = str(row[0]).strip().upper()
            if not state_code:
                raise ValidationError("County row has an empty state code", field='state')
            grouped.setdefault(state_code, []).append(CountyRecord.from_row(tuple(row[1:])))

        return cls(grouped)

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> 'CountyStore':
        """Build a store from ``/api/counties`` style dictionaries."""
        if not isinstance(records, list):
            raise ValidationError("County payload must be a list", value=type(records).__name__)
        return cls.from_dataframe(pd.DataFrame.from_records(records, columns=COUNTY_TABLE_COLUMNS))

    @classmethod
    def from_csv(cls, path: Union[str, Path]) -> 'CountyStore':
        """
        Load a county table from CSV.

        Raises:
            DataSourceError: If the file cannot be read or parsed
        """
        try:
            df = pd.read_csv(path, dtype={'state': str, 'name': str, 'notes': str})
        except FileNotFoundError:
            raise DataSourceError(f"County file not found: {path}", source=str(path))
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Could not parse county file: {e}", source=str(path))

        try:
            store = cls.from_dataframe(df)
        except ValidationError as e:
            raise DataSourceError(f"Invalid county file: {e}", source=str(path))

        logging.info(f"Loaded {store.total_counties()} counties for {len(store)} states from {path}")
        return store

    def to_dataframe(self) -> pd.DataFrame:
        """Flatten the store into the ``COUNTY_TABLE_COLUMNS`` layout."""
        rows = [
            (state_code,) + record.as_row()
            for state_code, records in self._counties.items()
            for record in records
        ]
        return pd.DataFrame(rows, columns=COUNTY_TABLE_COLUMNS)


@dataclass(frozen=True)
class StateSummary:
    best_tier: int
    county_count: int
    tier_1_to_3_count: int


def state_summary(store: CountyStore, state_code: str) -> StateSummary:
    """Best tier, county count and count of tier 1-3 counties for a state."""
    records = store.counties(state_code)
    if not records:
        return StateSummary(best_tier=5, county_count=0, tier_1_to_3_count=0)
    return StateSummary(
        best_tier=min(record.tier for record in records),
        county_count=len(records),
        tier_1_to_3_count=sum(1 for record in records if record.tier <= 3),
    )


def state_name(state_code: str) -> str:
    """Full state name, falling back to the code itself."""
    return STATE_NAMES.get(state_code, state_code)


def load_initial_store(counties_file: Optional[str] = None) -> CountyStore:
    """Startup store: the configured CSV seed if given, else the built-in table."""
    if counties_file:
        return CountyStore.from_csv(counties_file)
    return CountyStore.defaults()
