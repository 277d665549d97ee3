"""
Printable HTML reports.

This module builds standalone HTML documents (fixed print stylesheet plus
a generated-at footer) and the county/state body fragments that go inside
them. ``print_report`` writes the document to a temporary file and opens
it in the browser for printing.
"""

import html
import logging
import tempfile
import webbrowser
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from county_data.models import DEFAULT_TIER_COLOR, CountyRecord, get_tier_info

DEFAULT_BRAND = 'Auction Intel Platform'

PRINT_STYLESHEET = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
        padding: 40px;
        color: #1e293b;
        line-height: 1.5;
    }
    .header { border-bottom: 3px solid #3b82f6; padding-bottom: 20px; margin-bottom: 30px; }
    .header h1 { font-size: 28px; font-weight: 900; color: #0f172a; margin-bottom: 5px; }
    .header .subtitle {
        color: #64748b; font-size: 12px; text-transform: uppercase; letter-spacing: 2px;
    }
    .metrics { display: grid; grid-template-columns: repeat(4, 1fr); gap: 20px; margin-bottom: 30px; }
    .metric { background: #f8fafc; border: 1px solid #e2e8f0; border-radius: 8px; padding: 15px; }
    .metric-label {
        font-size: 10px; text-transform: uppercase; letter-spacing: 1px; color: #64748b; margin-bottom: 5px;
    }
    .metric-value { font-size: 24px; font-weight: 800; color: #0f172a; }
    .metric-sub { font-size: 11px; color: #94a3b8; }
    table { width: 100%; border-collapse: collapse; margin-top: 20px; }
    th {
        background: #f1f5f9; text-align: left; padding: 12px 15px; font-size: 10px;
        text-transform: uppercase; letter-spacing: 1px; color: #64748b; border-bottom: 2px solid #e2e8f0;
    }
    td { padding: 12px 15px; border-bottom: 1px solid #f1f5f9; font-size: 13px; }
    tr:nth-child(even) { background: #f8fafc; }
    .tier-badge {
        display: inline-block; padding: 3px 10px; border-radius: 4px;
        font-size: 10px; font-weight: 800; color: white;
    }
    .footer {
        margin-top: 40px; padding-top: 20px; border-top: 1px solid #e2e8f0;
        font-size: 11px; color: #94a3b8; text-align: center;
    }
    @media print {
        body { padding: 20px; }
        .no-print { display: none; }
    }
"""


def to_printable_html(
    title: str,
    body_html: str,
    generated_at: Optional[datetime] = None,
    brand: str = DEFAULT_BRAND
) -> str:
    """
    Wrap a body fragment in a complete, print-ready HTML document.

    Args:
        title: Document title (escaped)
        body_html: Trusted HTML fragment inserted as-is
        generated_at: Timestamp for the footer (defaults to now)
        brand: Product name shown in the footer

    Returns:
        Standalone HTML document string
    """
    stamp = generated_at or datetime.now()
    footer = (
        f"Generated by {html.escape(brand)} &bull; "
        f"{stamp.strftime('%m/%d/%Y')} at {stamp.strftime('%I:%M:%S %p')}"
    )
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{html.escape(title)}</title>\n"
        f"<style>{PRINT_STYLESHEET}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body_html}\n"
        f'<div class="footer">{footer}</div>\n'
        "</body>\n"
        "</html>\n"
    )


def print_report(
    title: str,
    body_html: str,
    brand: str = DEFAULT_BRAND,
    opener: Callable[[str], Any] = webbrowser.open
) -> bool:
    """
    Open the report in a browser window for printing.

    Returns:
        True if the document was written and handed to the browser
    """
    document = to_printable_html(title, body_html, brand=brand)
    try:
        with tempfile.NamedTemporaryFile(
            'w', suffix='.html', prefix='report_', delete=False, encoding='utf-8'
        ) as f:
            f.write(document)
            report_path = Path(f.name)
    except OSError as e:
        logging.error(f"Could not write print report: {e}")
        return False

    try:
        opened = opener(report_path.as_uri())
    except webbrowser.Error as e:
        logging.error(f"Could not open browser for {report_path}: {e}")
        return False

    if opened is False:
        logging.warning(f"No browser available; report saved to {report_path}")
        return False
    return True


def _thousands(value: float) -> str:
    return f"{value / 1000:.0f}K"


def _tier_badge(tier: int, with_name: bool = False) -> str:
    info = get_tier_info(tier)
    if info is None:
        return f'<span class="tier-badge" style="background: {DEFAULT_TIER_COLOR};">N/A</span>'
    label = f"{info.label} - {info.name}" if with_name else info.label
    return f'<span class="tier-badge" style="background: {info.color};">{html.escape(label)}</span>'


def _metric(label: str, value: str, sub: str) -> str:
    return (
        '<div class="metric">'
        f'<div class="metric-label">{label}</div>'
        f'<div class="metric-value">{value}</div>'
        f'<div class="metric-sub">{sub}</div>'
        '</div>'
    )


def generate_county_report_html(
    county: CountyRecord,
    state_name: str,
    parcels: Iterable[Mapping[str, Any]] = ()
) -> str:
    """Header, four metric cards and an optional tax sale inventory table."""
    subtitle = _tier_badge(county.tier, with_name=True)
    if county.notes:
        subtitle += f" &bull; {html.escape(county.notes)}"

    metrics = "".join([
        _metric("Housing Value (ZHVI)", f"${_thousands(county.home_value_index)}",
                f"{county.yoy_growth_pct}% YoY Growth"),
        _metric("Population", f"{county.population:,}", "Residents"),
        _metric("Median Income", f"${_thousands(county.median_income)}", "Household"),
        _metric("Days on Market", str(county.days_on_market), "Average DOM"),
    ])

    parcel_rows = "".join(
        "<tr>"
        f'<td style="font-weight: 700; color: #3b82f6;">{html.escape(str(p.get("id", "")))}</td>'
        f'<td>{html.escape(str(p.get("parcel_id", "")))}</td>'
        f'<td style="font-size: 11px; text-transform: uppercase;">{html.escape(str(p.get("owner", "")))}</td>'
        f'<td>{html.escape(str(p.get("type", "")))}</td>'
        f'<td style="font-weight: 700;">{html.escape(str(p.get("amount", "")))}</td>'
        f'<td>{html.escape(str(p.get("status", "")))}</td>'
        "</tr>"
        for p in parcels
    )
    inventory = ""
    if parcel_rows:
        inventory = (
            '<h3 style="font-size: 16px; font-weight: 800; margin: 30px 0 15px; color: #0f172a;">'
            'Tax Sale Inventory</h3>'
            '<table><thead><tr>'
            '<th>ID</th><th>Parcel</th><th>Owner</th><th>Type</th><th>Amount</th><th>Status</th>'
            f'</tr></thead><tbody>{parcel_rows}</tbody></table>'
        )

    return (
        '<div class="header">'
        f'<h1>{html.escape(county.name)} County, {html.escape(state_name)}</h1>'
        f'<div class="subtitle">{subtitle}</div>'
        '</div>'
        f'<div class="metrics">{metrics}</div>'
        f'{inventory}'
    )


def generate_state_report_html(counties: Sequence[CountyRecord], state_name: str) -> str:
    """Header plus one table row per county."""
    rows = []
    for county in counties:
        growth = county.yoy_growth_pct
        growth_color = '#16a34a' if growth >= 0 else '#dc2626'
        arrow = '&#9652;' if growth > 0 else '&#9662;'
        rows.append(
            "<tr>"
            f'<td style="font-weight: 700;">{html.escape(county.name)}</td>'
            f"<td>{_tier_badge(county.tier)}</td>"
            f"<td>{_thousands(county.population)}</td>"
            f"<td>${_thousands(county.median_income)}</td>"
            f"<td>${_thousands(county.home_value_index)}</td>"
            f'<td style="color: {growth_color};">{arrow} {abs(growth)}%</td>'
            f"<td>{county.days_on_market}d</td>"
            "</tr>"
        )

    return (
        '<div class="header">'
        f'<h1>{html.escape(state_name)} - County Analysis</h1>'
        f'<div class="subtitle">Investment Tier Assessment &bull; {len(counties)} Counties</div>'
        '</div>'
        '<table><thead><tr>'
        '<th>County</th><th>Tier</th><th>Population</th><th>Income</th>'
        '<th>ZHVI</th><th>Growth</th><th>DOM</th>'
        f'</tr></thead><tbody>{"".join(rows)}</tbody></table>'
    )
