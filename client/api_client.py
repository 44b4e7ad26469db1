"""
client/api_client.py
Client for the Round scoring API.

This module ensures:
1. One place builds URLs and headers for scoring calls
2. Connection errors and timeouts never raise into the caller
3. Base URL comes from client/config.py (dev/staging/prod rules)

Asset payloads are plain dicts shaped like `assets` rows (optionally with a
joined `category`), exactly what the hosted backend returns.
"""

from typing import Any, Dict, List, Literal, Optional

import requests

# Import config (robust fallback for different run contexts)
try:
    from client.config import DEFAULT_TIMEOUT, IS_DEV, get_api_base_url
except ModuleNotFoundError:
    from config import DEFAULT_TIMEOUT, IS_DEV, get_api_base_url


__all__ = [
    "api_request",
    "classify_category",
    "get_identity",
    "get_readiness",
    "estimate_value",
    "run_magic_import",
    "summarize_portfolio",
    "list_identity_rulesets",
]


def api_request(
    method: Literal["GET", "POST"],
    path: str,
    json: Optional[Dict[str, Any]] = None,
    params: Optional[Dict[str, Any]] = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> Optional[requests.Response]:
    """
    Make a request to the scoring API.

    Args:
        method: HTTP method (GET, POST)
        path: API endpoint path (e.g., "/api/assets/identity")
        json: JSON body for POST requests
        params: Query parameters
        timeout: Request timeout in seconds

    Returns:
        Response object (any status code), None on config/connection error
    """
    try:
        base_url = get_api_base_url()
    except (RuntimeError, ValueError) as e:
        print(f"[API] Configuration error: {e}")
        return None

    url = f"{base_url}{path}"

    headers = {"Accept": "application/json"}
    if json is not None:
        headers["Content-Type"] = "application/json"

    try:
        if method == "GET":
            resp = requests.get(url, headers=headers, params=params, timeout=timeout)
        elif method == "POST":
            resp = requests.post(url, json=json, headers=headers, params=params, timeout=timeout)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if IS_DEV and resp.status_code >= 400:
            print(f"[API] {method} {path} -> HTTP {resp.status_code}")
        return resp

    except requests.exceptions.Timeout:
        print(f"[API] Timeout on {method} {path} after {timeout}s")
        return None

    except requests.exceptions.ConnectionError:
        print(f"[API] Cannot connect to scoring API at {base_url} ({method} {path})")
        return None


def _json_or_none(resp: Optional[requests.Response]) -> Optional[Dict[str, Any]]:
    if resp is None or resp.status_code != 200:
        return None
    return resp.json()


def _rules_params(rules: Optional[str]) -> Optional[Dict[str, str]]:
    return {"rules": rules} if rules else None


def classify_category(category: Optional[str]) -> Optional[Dict[str, Any]]:
    return _json_or_none(api_request("POST", "/api/assets/classify", json={"category": category}))


def get_identity(asset: Dict[str, Any], rules: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Identity level/labels for one asset row, or None on failure."""
    return _json_or_none(
        api_request("POST", "/api/assets/identity", json=asset, params=_rules_params(rules))
    )


def get_readiness(asset: Dict[str, Any], rules: Optional[str] = None) -> Optional[Dict[str, Any]]:
    return _json_or_none(
        api_request("POST", "/api/assets/readiness", json=asset, params=_rules_params(rules))
    )


def estimate_value(asset: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return _json_or_none(api_request("POST", "/api/assets/valuation", json=asset))


def run_magic_import(asset: Dict[str, Any], rules: Optional[str] = None) -> Optional[requests.Response]:
    """
    Returns the raw response: 200 carries the stub result, 409 means the
    asset is not Round-Ready and `detail` says what is missing.
    """
    return api_request("POST", "/api/assets/magic-import", json=asset, params=_rules_params(rules))


def summarize_portfolio(assets: List[Dict[str, Any]], rules: Optional[str] = None) -> Optional[Dict[str, Any]]:
    return _json_or_none(
        api_request("POST", "/api/portfolio/summary", json={"assets": assets}, params=_rules_params(rules))
    )


def list_identity_rulesets() -> Optional[Dict[str, Any]]:
    return _json_or_none(api_request("GET", "/api/identity/rulesets"))
