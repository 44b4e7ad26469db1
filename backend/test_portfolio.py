"""
backend/test_portfolio.py

Tests for dashboard totals and money formatting.

Run:
    pytest backend/test_portfolio.py -v
"""

from backend.identity import IDENTITY_RULESETS
from backend.magic_import import run_magic_import
from backend.portfolio import format_money, summarize_portfolio
from domains.asset.models.scoring import IdentityLevel


PORTFOLIO = [
    # strong + context -> ready
    {
        "title": "Sony headphones",
        "category": [{"name": "Electronics"}],
        "brand": "Sony",
        "model_name": "WH-1000XM5",
        "purchase_price": 350,
        "current_estimated_value": 220,
        "receipt_url": "https://storage.example/receipts/sony.pdf",
    },
    # good, no context -> not ready
    {"title": "Chair", "category": {"name": "Furniture"}, "brand": "Vitra", "purchase_price": 1200},
    # basic
    {"title": "Bike", "brand": "Brompton", "current_estimated_value": 900},
    # unknown
    {"title": "Mystery box"},
]


def test_totals_and_counts():
    summary = summarize_portfolio(PORTFOLIO)
    assert summary.asset_count == 4
    assert summary.total_purchase == 1550
    assert summary.total_current == 1120
    assert summary.total_purchase_display == "£1550"
    assert summary.total_current_display == "£1120"
    assert summary.round_ready_count == 1


def test_identity_stats():
    stats = summarize_portfolio(PORTFOLIO).identity_stats
    assert stats[IdentityLevel.strong] == 1
    assert stats[IdentityLevel.good] == 1
    assert stats[IdentityLevel.basic] == 1
    assert stats[IdentityLevel.unknown] == 1


def test_exact_match_ruleset_changes_stats():
    stats = summarize_portfolio(PORTFOLIO, IDENTITY_RULESETS["exact_match"]).identity_stats
    # three signals is only "good" when all four are required
    assert stats[IdentityLevel.strong] == 0
    assert stats[IdentityLevel.good] == 2


def test_empty_portfolio():
    summary = summarize_portfolio([])
    assert summary.asset_count == 0
    assert summary.total_purchase_display == "£0"
    assert summary.round_ready_count == 0
    assert all(count == 0 for count in summary.identity_stats.values())


def test_none_rows_are_skipped():
    assert summarize_portfolio([None, {"title": "x"}]).asset_count == 1


def test_format_money():
    assert format_money(None) == "—"
    assert format_money(1234.4) == "£1234"
    assert format_money(99.6, "GBP") == "£100"
    assert format_money(500, "USD") == "USD 500"
    assert format_money(0) == "£0"


def test_format_money_rounds_halves_up():
    assert format_money(0.5) == "£1"
    assert format_money(2.5) == "£3"
    assert format_money(1234.5) == "£1235"
    assert format_money(1.005) == "£1"


def test_ready_count_matches_magic_import_gate():
    home_aware = IDENTITY_RULESETS["home_aware"]
    almost = {"title": "4 Mill Lane", "city": "Bristol", "country": "UK", "category": "House", "notes": "Freehold"}
    linked = {"asset_type_id": "cat-1", "category": "House", "notes": "Freehold"}
    summary = summarize_portfolio([almost, linked], home_aware)
    assert run_magic_import(almost, home_aware).readiness.ready is False
    assert run_magic_import(linked, home_aware).readiness.ready is True
    assert summary.round_ready_count == 1
