"""
backend/test_valuation.py

Tests for the rule-based valuation placeholder.

All tests pin `today` so results don't depend on the day the suite runs.

Run:
    pytest backend/test_valuation.py -v
"""

from datetime import date

import pytest

from backend.valuation import (
    SOFT_CONDITION_MULTIPLIERS,
    compute_rule_based_valuation,
    elapsed_years,
    normalise_condition,
    parse_purchase_date,
    years_between,
)
from domains.asset.models.asset import Asset
from domains.asset.models.scoring import ValueProfile


TODAY = date(2026, 10, 18)


class TestDepreciating:

    def test_three_year_old_laptop_in_good_condition(self):
        asset = Asset(
            category="Laptop",
            purchase_price=1000,
            purchase_date="2023-10-18",
            current_condition="good",
        )
        estimate = compute_rule_based_valuation(asset, today=TODAY)

        assert estimate.profile == ValueProfile.DEPRECIATING
        assert estimate.years == 3.0
        # 1000 * 0.75^3 * 0.9
        assert estimate.value == pytest.approx(379.69, abs=0.01)
        assert estimate.currency == "GBP"
        assert "depreciating" in estimate.source

    def test_slower_decay_after_three_years(self):
        asset = Asset(category="Car", purchase_price=10000, purchase_date="2021-10-18", current_condition="like new")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        # 10000 * 0.75^3 * 0.9^2 * 1.0
        assert estimate.value == pytest.approx(10000 * 0.421875 * 0.81, abs=0.01)
        assert estimate.condition == "like_new"

    def test_floor_at_ten_percent(self):
        asset = Asset(category="Phone", purchase_price=800, purchase_date="2000-01-01", current_condition="poor")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.value == pytest.approx(800 * 0.10 * 0.65, abs=0.01)


class TestAppreciating:

    def test_ten_years_is_not_capped(self):
        asset = Asset(category="House", purchase_price=100000, purchase_date="2016-10-18", current_condition="good")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.profile == ValueProfile.APPRECIATING
        assert estimate.value == pytest.approx(100000 * 1.04 ** 10, abs=0.01)
        assert estimate.value == pytest.approx(148024.43, abs=0.01)
        assert estimate.value < 300000

    @pytest.mark.parametrize("condition", ["excellent", "good", "fair", "poor", None])
    def test_fifty_years_is_capped_at_three_times_base(self, condition):
        asset = Asset(
            category="Property",
            purchase_price=100000,
            purchase_date="1976-10-18",
            current_condition=condition,
        )
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        multiplier = SOFT_CONDITION_MULTIPLIERS[normalise_condition(condition)]
        assert estimate.value == pytest.approx(300000 * multiplier, abs=0.01)


class TestNeutral:

    def test_flat_ten_percent_decay(self):
        asset = Asset(category="Furniture", purchase_price=2000, purchase_date="2024-10-18", current_condition="fair")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.profile == ValueProfile.NEUTRAL
        assert estimate.value == pytest.approx(2000 * 0.81 * 0.8, abs=0.01)

    def test_floor_at_thirty_percent(self):
        asset = Asset(category="Artwork", purchase_price=5000, purchase_date="1990-06-01")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.value == pytest.approx(5000 * 0.30 * 0.85, abs=0.01)


class TestFallbacks:

    def test_empty_asset(self):
        estimate = compute_rule_based_valuation(Asset(), today=TODAY)
        # base 100, 1 year, neutral, unknown condition
        assert estimate.value == pytest.approx(100 * 0.9 * 0.85, abs=0.01)
        assert estimate.currency == "GBP"
        assert estimate.years == 1.0

    def test_none_asset_is_valued_like_an_empty_one(self):
        assert compute_rule_based_valuation(None, today=TODAY) == compute_rule_based_valuation(Asset(), today=TODAY)

    def test_current_value_used_when_no_purchase_price(self):
        asset = Asset(current_estimated_value=500, estimate_currency="EUR")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.value == pytest.approx(500 * 0.9 * 0.85, abs=0.01)
        assert estimate.currency == "EUR"

    def test_purchase_currency_wins(self):
        asset = Asset(purchase_price=100, purchase_currency="USD", estimate_currency="EUR")
        assert compute_rule_based_valuation(asset, today=TODAY).currency == "USD"

    def test_invalid_date_counts_as_one_year(self):
        asset = Asset(category="Laptop", purchase_price=1000, purchase_date="last summer")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.years == 1.0
        assert estimate.value == pytest.approx(1000 * 0.75 * 0.85, abs=0.01)

    def test_future_date_counts_as_zero_years(self):
        asset = Asset(category="Laptop", purchase_price=1000, purchase_date="2030-01-01", current_condition="excellent")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.years == 0.0
        assert estimate.value == pytest.approx(1050.0, abs=0.01)

    def test_unrecognised_condition_uses_unknown_multiplier(self):
        asset = Asset(category="Laptop", purchase_price=1000, purchase_date="2025-10-18", current_condition="battered")
        estimate = compute_rule_based_valuation(asset, today=TODAY)
        assert estimate.value == pytest.approx(1000 * 0.75 * 0.85, abs=0.01)
        assert estimate.condition == "battered"

    def test_same_input_same_output(self):
        asset = Asset(category="Camera", purchase_price=650, purchase_date="2022-03-04")
        first = compute_rule_based_valuation(asset, today=TODAY)
        second = compute_rule_based_valuation(asset, today=TODAY)
        assert first.model_dump_json() == second.model_dump_json()


class TestDates:

    def test_parse_variants(self):
        assert parse_purchase_date("2023-10-18") == date(2023, 10, 18)
        assert parse_purchase_date("2023-10-18T09:30:00Z") == date(2023, 10, 18)
        assert parse_purchase_date("18/10/2023") is None
        assert parse_purchase_date(None) is None

    def test_exact_anniversaries(self):
        assert years_between(date(2020, 5, 1), date(2025, 5, 1)) == 5.0

    def test_partial_year(self):
        years = years_between(date(2025, 10, 18), date(2026, 4, 18))
        assert 0.49 < years < 0.51

    def test_leap_day_purchase(self):
        assert years_between(date(2020, 2, 29), date(2021, 2, 28)) == 1.0

    def test_missing_date_defaults_to_one_year(self):
        assert elapsed_years(None, TODAY) == 1.0

    def test_condition_normalisation(self):
        assert normalise_condition("Like New") == "like_new"
        assert normalise_condition("like-new") == "like_new"
        assert normalise_condition("  GOOD ") == "good"
        assert normalise_condition("") == "unknown"
        assert normalise_condition(None) == "unknown"
