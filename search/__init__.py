"""
Search module for Auction Intel.

This module provides the search-box query engine (ZIP, abbreviation and
name matching) and the tier-filtered, sortable county table view.
"""

from .query_engine import MAX_SEARCH_RESULTS, MatchType, SearchResult, search
from .table_view import SORT_FIELDS, view_counties
from .zip_ranges import ZIP_PREFIX_RANGES, is_zip_query, state_for_zip

__all__ = [
    # Query engine
    'MAX_SEARCH_RESULTS',
    'MatchType',
    'SearchResult',
    'search',

    # Table view
    'SORT_FIELDS',
    'view_counties',

    # ZIP lookup
    'ZIP_PREFIX_RANGES',
    'is_zip_query',
    'state_for_zip',
]
