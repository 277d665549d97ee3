"""
Centralized configuration manager to avoid multiple Config instances.

Besides the shared ``Config`` it provides the entry points that apply
config sections to the library functions, so callers never copy settings
around by hand.
"""
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from core.config import Config
from county_data.live_source import CountyDataService
from county_data.models import CountyRecord
from county_data.store import CountyStore, load_initial_store
from export.columns import ExportColumn, RowAccessor, by_key
from export.print_report import print_report
from export.tabular import export_state_data_csv, export_to_csv, export_watchlist_csv
from search.query_engine import SearchResult, search

# Global config instance - loaded once
_config_instance = None

def get_config() -> Config:
    """Get the global config instance, creating it only once."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance

def refresh_config():
    """Force a refresh of the global config instance."""
    global _config_instance
    _config_instance = None
    return get_config()

def create_data_service(config: Optional[Config] = None) -> CountyDataService:
    """Build the county data service from the [data] and [api] sections."""
    config = config or get_config()
    return CountyDataService(
        api_config=config.api,
        initial_store=load_initial_store(config.data.counties_file)
    )

def search_counties(term: Optional[str], store: CountyStore, config: Optional[Config] = None) -> List[SearchResult]:
    """Run the search box query with the [search] limits."""
    config = config or get_config()
    return search(term, store, limit=config.search.max_results, min_length=config.search.min_term_length)

def export_table(
    rows: Sequence[Any],
    columns: Sequence[Union[ExportColumn, str]],
    filename: str,
    accessor: RowAccessor = by_key,
    config: Optional[Config] = None
) -> Optional[Path]:
    """Write a CSV export into the configured [export] directory."""
    config = config or get_config()
    return export_to_csv(rows, columns, filename, accessor=accessor, export_dir=config.export.export_dir)

def export_state(counties: Sequence[CountyRecord], state_name: str, config: Optional[Config] = None) -> Optional[Path]:
    """Dated state county export into the configured directory."""
    config = config or get_config()
    return export_state_data_csv(counties, state_name, export_dir=config.export.export_dir)

def export_watchlist(items: Iterable[Mapping[str, Any]], config: Optional[Config] = None) -> Optional[Path]:
    """Dated watchlist export into the configured directory."""
    config = config or get_config()
    return export_watchlist_csv(list(items), export_dir=config.export.export_dir)

def print_branded_report(title: str, body_html: str, config: Optional[Config] = None, **kwargs) -> bool:
    """Open a print report footed with the configured brand."""
    config = config or get_config()
    return print_report(title, body_html, brand=config.export.report_brand, **kwargs)
