# client/config.py
# Environment-aware configuration for the Round scoring API client

import os
from typing import Literal
from urllib.parse import urlparse

# Environment detection - normalize to lowercase
_raw_env = os.environ.get("ENV", "production").lower()
ENV: Literal["local", "staging", "production"] = _raw_env if _raw_env in ("local", "staging", "production") else "production"  # type: ignore

# Environment flags (using normalized ENV)
IS_LOCAL = (ENV == "local")
IS_STAGING = (ENV == "staging")
IS_PROD = (ENV == "production")

IS_DEV = IS_LOCAL

LOCAL_API_URL = "http://127.0.0.1:8000"

# Request defaults
DEFAULT_TIMEOUT = int(os.environ.get("ROUND_API_TIMEOUT", "20"))


def validate_api_url(url: str, env: str) -> None:
    """Reject empty URLs, and plain-HTTP or loopback URLs outside local runs."""
    if not url:
        raise ValueError("Round API URL is empty")
    if env == "local":
        return
    if urlparse(url).scheme != "https":
        raise ValueError(f"{env} requires an https Round API URL, got {url}")
    if any(host in url for host in ("localhost", "127.0.0.1")):
        raise ValueError(f"{env} cannot point at a loopback Round API URL, got {url}")


def get_api_base_url(env: str = None) -> str:
    """
    Get API base URL with strict priority and validation.

    Priority:
    1. ROUND_API_URL environment variable
    2. API_BASE_URL environment variable
    3. Local default (http://127.0.0.1:8000) ONLY if ENV == "local"
    4. Raise error if production/staging with no configured URL

    Returns:
        Validated API base URL with trailing slash removed

    Raises:
        RuntimeError: If production/staging environment has no configured URL
    """
    env = env or ENV

    for var in ("ROUND_API_URL", "API_BASE_URL"):
        configured = os.environ.get(var, "").strip()
        if configured:
            url = configured.rstrip("/")
            validate_api_url(url, env)
            return url

    if env == "local":
        return LOCAL_API_URL

    raise RuntimeError(
        f"Round API URL not configured for {env.upper()} environment. "
        f"Set ROUND_API_URL to the scoring service URL. "
        f"Production/staging MUST use HTTPS and cannot fall back to localhost."
    )
