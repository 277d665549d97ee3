"""
Export module for Auction Intel.

This module provides the shared column/row abstraction and the three
export formats built on it: CSV files, tab-separated clipboard text,
and printable HTML reports.
"""

from .clipboard import copy_to_clipboard, system_clipboard_write, tk_clipboard_write
from .columns import (
    COUNTY_COLUMNS,
    WATCHLIST_COLUMNS,
    ExportColumn,
    as_columns,
    by_attribute,
    by_index,
    by_key,
)
from .filenames import dated_export_filename, secure_filename
from .print_report import (
    generate_county_report_html,
    generate_state_report_html,
    print_report,
    to_printable_html,
)
from .tabular import (
    build_csv,
    export_county_data_csv,
    export_state_data_csv,
    export_to_csv,
    export_watchlist_csv,
    rows_to_dataframe,
    table_to_text,
    watchlist_rows,
)

__all__ = [
    # Columns and accessors
    'ExportColumn',
    'COUNTY_COLUMNS',
    'WATCHLIST_COLUMNS',
    'as_columns',
    'by_attribute',
    'by_index',
    'by_key',

    # CSV / text
    'build_csv',
    'export_county_data_csv',
    'export_state_data_csv',
    'export_to_csv',
    'export_watchlist_csv',
    'rows_to_dataframe',
    'table_to_text',
    'watchlist_rows',

    # Clipboard
    'copy_to_clipboard',
    'system_clipboard_write',
    'tk_clipboard_write',

    # Print
    'generate_county_report_html',
    'generate_state_report_html',
    'print_report',
    'to_printable_html',

    # Filenames
    'dated_export_filename',
    'secure_filename',
]
