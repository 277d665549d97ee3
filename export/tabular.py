"""
CSV and tab-separated exports of tabular data.

Rows go through pandas ``to_csv`` with minimal quoting: a field is quoted
when it contains the delimiter, a double quote, or a line break, and
embedded quotes are doubled. Missing values become empty cells.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import pandas as pd

from core.exceptions import SecurityError
from county_data.models import CountyRecord

from .columns import (
    COUNTY_COLUMNS,
    WATCHLIST_COLUMNS,
    ExportColumn,
    RowAccessor,
    as_columns,
    by_attribute,
    by_key,
)
from .filenames import dated_export_filename, secure_filename

LINE_TERMINATOR = '\n'


def rows_to_dataframe(
    rows: Iterable[Any],
    columns: Sequence[Union[ExportColumn, str]],
    accessor: RowAccessor = by_key
) -> pd.DataFrame:
    """Project rows onto export columns, one DataFrame column per label."""
    export_columns = as_columns(columns)
    data = [[accessor(row, column.key) for column in export_columns] for row in rows]
    # object dtype keeps ints as ints when a column also holds None
    return pd.DataFrame(data, columns=[column.label for column in export_columns], dtype=object)


def _render(df: pd.DataFrame, sep: str) -> str:
    text = df.to_csv(index=False, sep=sep, na_rep='', lineterminator=LINE_TERMINATOR)
    if text.endswith(LINE_TERMINATOR):
        text = text[:-len(LINE_TERMINATOR)]
    return text


def build_csv(
    rows: Iterable[Any],
    columns: Sequence[Union[ExportColumn, str]],
    accessor: RowAccessor = by_key
) -> str:
    """Header line plus one comma-separated line per row."""
    return _render(rows_to_dataframe(rows, columns, accessor), sep=',')


def table_to_text(
    rows: Iterable[Any],
    columns: Sequence[Union[ExportColumn, str]],
    accessor: RowAccessor = by_key
) -> str:
    """Tab-separated text for pasting into a spreadsheet."""
    return _render(rows_to_dataframe(rows, columns, accessor), sep='\t')


def export_to_csv(
    rows: Sequence[Any],
    columns: Sequence[Union[ExportColumn, str]],
    filename: str,
    accessor: RowAccessor = by_key,
    export_dir: Union[str, Path] = 'exports'
) -> Optional[Path]:
    """
    Write rows to ``<export_dir>/<filename>.csv``.

    Args:
        rows: Records to export
        columns: Column definitions (key + header label)
        filename: File name without extension; sanitized before use
        accessor: How to read ``column.key`` from a row
        export_dir: Target directory, created if needed

    Returns:
        Path of the written file, or None when there was nothing to export
        or the file could not be written
    """
    if not rows:
        logging.warning("No data to export")
        return None

    try:
        stem = secure_filename(filename)
    except SecurityError as e:
        logging.error(f"Rejected export name: {e}")
        return None

    content = build_csv(rows, columns, accessor)
    target_dir = Path(export_dir)
    target = target_dir / f"{stem}.csv"

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        with open(target, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        logging.error(f"Could not write export {target}: {e}")
        return None

    logging.info(f"Exported {len(rows)} rows to {target}")
    return target


def _format_added_date(value: Any) -> str:
    if value is None or value == '':
        return ''
    try:
        if isinstance(value, (int, float)):
            timestamp = pd.to_datetime(value, unit='ms')
        else:
            timestamp = pd.Timestamp(value)
    except (ValueError, OverflowError, TypeError) as e:
        logging.debug(f"Unparseable watchlist date {value!r}: {e}")
        return ''
    if pd.isna(timestamp):
        return ''
    return timestamp.strftime('%m/%d/%Y')


def watchlist_rows(items: Iterable[Mapping[str, Any]]) -> List[dict]:
    """Normalize saved watchlist entries into export rows."""
    return [
        {
            'state': item.get('state') or item.get('stateAbbr', ''),
            'county': item.get('county', ''),
            'tier': item.get('tier'),
            'added_date': _format_added_date(item.get('added_at', item.get('addedAt'))),
            'notes': item.get('notes') or '',
        }
        for item in items
    ]


def export_watchlist_csv(
    items: Sequence[Mapping[str, Any]],
    export_dir: Union[str, Path] = 'exports',
    on: Optional[date] = None
) -> Optional[Path]:
    """Export the watchlist as ``watchlist_YYYY-MM-DD.csv``."""
    return export_to_csv(
        watchlist_rows(items),
        WATCHLIST_COLUMNS,
        dated_export_filename('watchlist', on),
        accessor=by_key,
        export_dir=export_dir,
    )


def export_state_data_csv(
    counties: Sequence[CountyRecord],
    state_name: str,
    export_dir: Union[str, Path] = 'exports',
    on: Optional[date] = None
) -> Optional[Path]:
    """Export one state's counties as ``<State_Name>_data_YYYY-MM-DD.csv``."""
    return export_to_csv(
        counties,
        COUNTY_COLUMNS,
        dated_export_filename(f"{state_name}_data", on),
        accessor=by_attribute,
        export_dir=export_dir,
    )


def export_county_data_csv(
    rows: Sequence[Any],
    columns: Sequence[Union[ExportColumn, str]],
    accessor: RowAccessor = by_key,
    export_dir: Union[str, Path] = 'exports',
    on: Optional[date] = None
) -> Optional[Path]:
    """Export an arbitrary county table as ``county_data_YYYY-MM-DD.csv``."""
    return export_to_csv(
        rows,
        columns,
        dated_export_filename('county_data', on),
        accessor=accessor,
        export_dir=export_dir,
    )
