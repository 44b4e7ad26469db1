"""
Smoke Test for the Round Scoring API

Tests:
1. Health check responds
2. Identity scoring: unknown / strong / catalog exact match
3. Round-Ready gate flips when a context source is added
4. Rule-based valuation for a 3-year-old laptop
5. Magic Import refuses a not-ready asset (409) and runs for a ready one
6. Portfolio summary totals and readiness stats

Run: python smoke_test_scoring_api.py

Requirements:
- Backend running on localhost:8000 (uvicorn backend.main:app)
"""

import os
import sys
from datetime import date
from typing import Any, Dict, Optional

import requests

BASE_URL = os.environ.get("ROUND_API_URL", "http://localhost:8000").rstrip("/")


class TestResult:
    def __init__(self):
        self.passed = 0
        self.failed = 0
        self.tests = []

    def add_pass(self, name: str, detail: str = ""):
        self.passed += 1
        self.tests.append(("✅ PASS", name, detail))
        print(f"✅ PASS: {name}")
        if detail:
            print(f"  └─ {detail}")

    def add_fail(self, name: str, detail: str = ""):
        self.failed += 1
        self.tests.append(("❌ FAIL", name, detail))
        print(f"❌ FAIL: {name}")
        if detail:
            print(f"  └─ {detail}")

    def check(self, name: str, ok: bool, detail: str = ""):
        if ok:
            self.add_pass(name, detail)
        else:
            self.add_fail(name, detail)

    def summary(self):
        print("\n" + "="*60)
        print(f"SMOKE TEST SUMMARY: {self.passed} passed, {self.failed} failed")
        print("="*60)
        return self.failed == 0


def post(path: str, payload: Dict[str, Any]) -> requests.Response:
    return requests.post(f"{BASE_URL}{path}", json=payload, timeout=10)


def json_field(resp: requests.Response, key: str) -> Optional[Any]:
    if resp.status_code != 200:
        return None
    return resp.json().get(key)


def years_ago(years: int) -> str:
    today = date.today()
    try:
        return today.replace(year=today.year - years).isoformat()
    except ValueError:
        return today.replace(year=today.year - years, day=28).isoformat()


LAPTOP = {
    "title": "Work laptop",
    "category": {"name": "Laptop"},
    "brand": "Apple",
    "model_name": "MacBook Pro 14",
    "purchase_price": 1000,
    "purchase_date": years_ago(3),
    "current_condition": "good",
}


def main():
    result = TestResult()

    print("="*60)
    print(f"SMOKE TEST: Round Scoring API at {BASE_URL}")
    print("="*60)
    print()

    print("📋 TEST 1: Health")
    print("-"*60)
    resp = requests.get(f"{BASE_URL}/health", timeout=10)
    result.check("Health", resp.status_code == 200, f"HTTP {resp.status_code}")
    print()

    print("📋 TEST 2: Identity scoring")
    print("-"*60)
    level = json_field(post("/api/assets/identity", {}), "level")
    result.check("Identity - empty asset", level == "unknown", f"level={level}")
    level = json_field(post("/api/assets/identity", LAPTOP), "level")
    result.check("Identity - category/brand/model", level == "strong", f"level={level}")
    level = json_field(post("/api/assets/identity", {"asset_type_id": "cat-1"}), "level")
    result.check("Identity - catalog link", level == "strong", f"level={level}")
    print()

    print("📋 TEST 3: Round-Ready gate")
    print("-"*60)
    ready = json_field(post("/api/assets/readiness", LAPTOP), "ready")
    result.check("Readiness - no context", ready is False, f"ready={ready}")
    with_notes = dict(LAPTOP, notes_internal="Bought from the Apple store")
    ready = json_field(post("/api/assets/readiness", with_notes), "ready")
    result.check("Readiness - with notes", ready is True, f"ready={ready}")
    print()

    print("📋 TEST 4: Rule-based valuation")
    print("-"*60)
    resp = post("/api/assets/valuation", LAPTOP)
    value = json_field(resp, "value")
    ok = value is not None and abs(value - 379.69) < 0.02 and json_field(resp, "currency") == "GBP"
    result.check("Valuation - 3 year old laptop", ok, f"value={value}")
    print()

    print("📋 TEST 5: Magic Import")
    print("-"*60)
    resp = post("/api/assets/magic-import", LAPTOP)
    result.check("Magic Import - not ready", resp.status_code == 409, f"HTTP {resp.status_code}")
    resp = post("/api/assets/magic-import", with_notes)
    result.check("Magic Import - ready", resp.status_code == 200, f"HTTP {resp.status_code}")
    print()

    print("📋 TEST 6: Portfolio summary")
    print("-"*60)
    resp = post("/api/portfolio/summary", {"assets": [LAPTOP, with_notes, {}]})
    count = json_field(resp, "asset_count")
    ready_count = json_field(resp, "round_ready_count")
    result.check("Portfolio - counts", count == 3 and ready_count == 1, f"assets={count}, ready={ready_count}")
    print()

    success = result.summary()
    return 0 if success else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nTest interrupted by user")
        sys.exit(1)
    except requests.exceptions.ConnectionError:
        print(f"\n\n❌ ERROR: cannot connect to {BASE_URL}; is the backend running?")
        sys.exit(1)
