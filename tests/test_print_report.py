import os
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock
from urllib.parse import urlparse
from urllib.request import url2pathname

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from county_data import CountyRecord, CountyStore
from export import generate_county_report_html, generate_state_report_html, print_report, to_printable_html

KINGS = CountyRecord.from_row(["Kings", 2559903, 67000, 850000, 5.1, 25, 1, "Brooklyn"])


class TestPrintableDocument:

    def test_wraps_body_with_stylesheet_and_footer(self):
        document = to_printable_html("NY Report", "<p>body</p>", generated_at=datetime(2025, 3, 4, 15, 6, 7))

        assert document.startswith("<!DOCTYPE html>")
        assert "<title>NY Report</title>" in document
        assert "<p>body</p>" in document
        assert ".tier-badge" in document
        assert "tr:nth-child(even)" in document
        assert "Generated by Auction Intel Platform &bull; 03/04/2025 at 03:06:07 PM" in document

    def test_title_and_brand_are_escaped(self):
        document = to_printable_html("<script>", "", brand="A & B")

        assert "<title>&lt;script&gt;</title>" in document
        assert "Generated by A &amp; B" in document


class TestReportFragments:

    def test_county_report(self):
        parcels = [{"id": "2025-1000", "parcel_id": "12-30", "owner": "Lee <K>", "type": "Vacant Land",
                    "amount": "$1,234.00", "status": "Active"}]
        fragment = generate_county_report_html(KINGS, "New York", parcels)

        assert "<h1>Kings County, New York</h1>" in fragment
        assert "T1 - Prime" in fragment
        assert "#059669" in fragment
        assert "Brooklyn" in fragment
        assert "$850K" in fragment
        assert "2,559,903" in fragment
        assert "$67K" in fragment
        assert "Tax Sale Inventory" in fragment
        assert "Lee &lt;K&gt;" in fragment

    def test_county_report_without_parcels(self):
        fragment = generate_county_report_html(KINGS, "New York")
        assert "Tax Sale Inventory" not in fragment

    def test_state_report(self):
        counties = CountyStore.defaults()["NY"]
        fragment = generate_state_report_html(counties, "New York")

        assert "New York - County Analysis" in fragment
        assert f"{len(counties)} Counties" in fragment
        assert fragment.count("<tr>") == len(counties) + 1
        assert "2560K" in fragment
        assert "#16a34a" in fragment

    def test_negative_growth_and_unknown_tier(self):
        record = CountyRecord.from_row(["Decline", 40000, 35000, 90000, -1.5, 120, 7, ""])
        fragment = generate_state_report_html([record], "Nowhere")

        assert "#dc2626" in fragment
        assert "1.5%" in fragment
        assert "N/A" in fragment


class TestPrintReport:

    def test_opens_written_document(self):
        opener = MagicMock(return_value=True)

        assert print_report("Report", "<p>hi</p>", opener=opener) is True

        uri = opener.call_args[0][0]
        report_path = Path(url2pathname(urlparse(uri).path))
        try:
            assert "<p>hi</p>" in report_path.read_text(encoding='utf-8')
        finally:
            report_path.unlink()

    def test_no_browser_returns_false(self):
        opener = MagicMock(return_value=False)

        assert print_report("Report", "", opener=opener) is False
        report_path = Path(url2pathname(urlparse(opener.call_args[0][0]).path))
        report_path.unlink()
