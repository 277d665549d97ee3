"""
County search for the dashboard search box.

Match priority is ZIP prefix, then exact state abbreviation, then a
substring scan over state and county names. The first two short-circuit;
results are never re-ranked beyond that.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from county_data.defaults import STATE_NAMES
from county_data.models import CountyRecord
from county_data.store import CountyStore, state_name
from .zip_ranges import is_zip_query, state_for_zip

MAX_SEARCH_RESULTS = 15
MIN_TERM_LENGTH = 2


class MatchType(str, Enum):
    ZIP = 'zip'
    ZIP_COUNTY = 'zip-county'
    ABBREVIATION = 'abbreviation'
    STATE = 'state'


@dataclass(frozen=True)
class SearchResult:
    state_code: str
    state_name: str
    county: Optional[CountyRecord]
    match_type: MatchType

    @property
    def is_state_level(self) -> bool:
        return self.county is None


def _state_with_counties(
    store: CountyStore,
    state_code: str,
    state_match_type: MatchType,
    county_match_type: MatchType,
    limit: int
) -> List[SearchResult]:
    name = state_name(state_code)
    results = [SearchResult(state_code, name, None, state_match_type)]
    results.extend(
        SearchResult(state_code, name, record, county_match_type)
        for record in store.counties(state_code)
    )
    return results[:limit]


def search(
    term: Optional[str],
    store: CountyStore,
    limit: int = MAX_SEARCH_RESULTS,
    min_length: int = MIN_TERM_LENGTH
) -> List[SearchResult]:
    """
    Search states and counties.

    Args:
        term: Raw text from the search box
        store: County snapshot to search
        limit: Maximum number of results
        min_length: Trimmed terms shorter than this return no results

    Returns:
        Results in store order, state-level hits have ``county=None``
    """
    query = (term or '').strip()
    if len(query) < min_length:
        return []

    if is_zip_query(query):
        zip_state = state_for_zip(query)
        if zip_state:
            logging.debug(f"ZIP query {query} resolved to {zip_state}")
            return _state_with_counties(store, zip_state, MatchType.ZIP, MatchType.ZIP_COUNTY, limit)

    upper_query = query.upper()
    if upper_query in store or upper_query in STATE_NAMES:
        return _state_with_counties(
            store, upper_query, MatchType.ABBREVIATION, MatchType.ABBREVIATION, limit
        )

    lower_query = query.lower()
    results: List[SearchResult] = []
    emitted_states = set()

    for state_code, records in store.items():
        name = state_name(state_code)
        state_match = lower_query in name.lower() or state_code == upper_query

        if state_match and state_code not in emitted_states:
            emitted_states.add(state_code)
            results.append(SearchResult(state_code, name, None, MatchType.STATE))

        for record in records:
            if state_match or lower_query in record.name.lower():
                results.append(SearchResult(state_code, name, record, MatchType.STATE))

        if len(results) >= limit:
            break

    return results[:limit]
