"""
Optional live data source backed by the auction backend HTTP API.

The service starts from static defaults and tries to replace them with
``/api/counties`` and ``/api/state-info``. Any failure leaves the defaults
in place and flips the status to ``offline``; nothing is retried.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

import requests

from core.config import ApiConfig
from core.exceptions import DataSourceError, ValidationError
from .defaults import DEFAULT_AUCTION_INFO, STATE_NAMES
from .models import StateAuctionInfo
from .store import CountyStore


class DataStatus(str, Enum):
    CONNECTING = 'connecting'
    LIVE = 'live'
    OFFLINE = 'offline'


@dataclass(frozen=True)
class DataSnapshot:
    """County store and auction rules that are always swapped together."""
    counties: CountyStore
    auction_info: Dict[str, StateAuctionInfo]


def _get_json(session: requests.Session, url: str, timeout: float):
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise DataSourceError(f"Request failed: {e}", source=url)

    if not response.ok:
        raise DataSourceError("Backend returned an error status", source=url, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as e:
        raise DataSourceError(f"Backend returned invalid JSON: {e}", source=url)


def fetch_snapshot(api_config: ApiConfig, session: Optional[requests.Session] = None) -> DataSnapshot:
    """
    Fetch both live tables from the backend.

    Args:
        api_config: Backend location and timeout
        session: Optional requests session (a new one is used otherwise)

    Returns:
        DataSnapshot built entirely from live data

    Raises:
        DataSourceError: On network errors, non-OK responses or malformed payloads
    """
    base_url = api_config.base_url.rstrip('/')
    http = session or requests.Session()

    state_payload = _get_json(http, f"{base_url}/api/state-info", api_config.timeout_seconds)
    county_payload = _get_json(http, f"{base_url}/api/counties", api_config.timeout_seconds)

    if not isinstance(state_payload, list) or not state_payload:
        raise DataSourceError("State info payload is empty or not a list", source=f"{base_url}/api/state-info")
    if not isinstance(county_payload, list) or not county_payload:
        raise DataSourceError("County payload is empty or not a list", source=f"{base_url}/api/counties")

    try:
        auction_info = {}
        for item in state_payload:
            info = StateAuctionInfo.from_api(item)
            auction_info[info.abbr] = info
        counties = CountyStore.from_records(county_payload)
    except (ValidationError, TypeError, AttributeError) as e:
        raise DataSourceError(f"Malformed backend payload: {e}", source=base_url)

    return DataSnapshot(counties=counties, auction_info=auction_info)


class CountyDataService:
    """Holds the current data snapshot and its live/offline status."""

    def __init__(
        self,
        api_config: ApiConfig,
        initial_store: Optional[CountyStore] = None,
        session: Optional[requests.Session] = None
    ):
        self.api_config = api_config
        self._session = session
        self._lock = threading.Lock()
        self._snapshot = DataSnapshot(
            counties=initial_store if initial_store is not None else CountyStore.defaults(),
            auction_info=dict(DEFAULT_AUCTION_INFO),
        )
        self._status = DataStatus.CONNECTING if api_config.enabled else DataStatus.OFFLINE

    @property
    def status(self) -> DataStatus:
        return self._status

    @property
    def snapshot(self) -> DataSnapshot:
        return self._snapshot

    @property
    def store(self) -> CountyStore:
        return self._snapshot.counties

    @property
    def auction_info(self) -> Dict[str, StateAuctionInfo]:
        return self._snapshot.auction_info

    def refresh(self) -> DataStatus:
        """
        Try once to replace the snapshot with live data.

        Refreshes are serialized; status and snapshot change together.
        """
        with self._lock:
            if not self.api_config.enabled:
                logging.info("Live data API disabled; using static county data")
                self._status = DataStatus.OFFLINE
                return self._status

            self._status = DataStatus.CONNECTING
            try:
                snapshot = fetch_snapshot(self.api_config, self._session)
            except DataSourceError as e:
                logging.warning(f"Live data unavailable, keeping static defaults: {e}")
                self._status = DataStatus.OFFLINE
                return self._status

            self._snapshot = snapshot
            self._status = DataStatus.LIVE
            logging.info(
                f"Loaded live data: {snapshot.counties.total_counties()} counties, "
                f"{len(snapshot.auction_info)} states"
            )
            return self._status

    def start_background_refresh(self) -> threading.Thread:
        """Run ``refresh`` on a daemon thread and return the thread."""
        thread = threading.Thread(target=self.refresh, name='county-data-refresh', daemon=True)
        thread.start()
        return thread


def filter_auction_info(
    auction_info: Dict[str, StateAuctionInfo],
    sale_type: Optional[str] = None
) -> List[StateAuctionInfo]:
    """States matching a sale type ('lien'/'deed', any case), ordered by state name."""
    results = list(auction_info.values())
    if sale_type:
        wanted = sale_type.lower()
        results = [info for info in results if info.sale_type.lower() == wanted]
    return sorted(results, key=lambda info: STATE_NAMES.get(info.abbr, info.abbr))
