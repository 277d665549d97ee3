"""
County data module for Auction Intel.

This module provides county and state auction records, the built-in
default tables, the immutable county store, and the optional live
backend source that can replace the defaults.
"""

from .defaults import DEFAULT_AUCTION_INFO, DEFAULT_COUNTY_ROWS, STATE_NAMES
from .live_source import (
    CountyDataService,
    DataSnapshot,
    DataStatus,
    fetch_snapshot,
    filter_auction_info,
)
from .models import (
    DEFAULT_TIER_COLOR,
    TIERS,
    CountyRecord,
    StateAuctionInfo,
    TierInfo,
    get_tier_info,
)
from .store import (
    COUNTY_TABLE_COLUMNS,
    CountyStore,
    StateSummary,
    load_initial_store,
    state_name,
    state_summary,
)

__all__ = [
    # Static data
    'DEFAULT_AUCTION_INFO',
    'DEFAULT_COUNTY_ROWS',
    'STATE_NAMES',

    # Records
    'CountyRecord',
    'StateAuctionInfo',
    'TierInfo',
    'TIERS',
    'DEFAULT_TIER_COLOR',
    'get_tier_info',

    # Store
    'COUNTY_TABLE_COLUMNS',
    'CountyStore',
    'StateSummary',
    'load_initial_store',
    'state_name',
    'state_summary',

    # Live source
    'CountyDataService',
    'DataSnapshot',
    'DataStatus',
    'fetch_snapshot',
    'filter_auction_info',
]
