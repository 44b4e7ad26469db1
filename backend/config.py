# backend/config.py
# Environment-aware configuration for the Round scoring backend

import os
from typing import Literal

# Environment detection
ENV: Literal["dev", "staging", "prod"] = os.environ.get("ENV", "dev")  # type: ignore
IS_DEV = (ENV == "dev")
IS_STAGING = (ENV == "staging")
IS_PROD = (ENV == "prod")

# Identity scoring: which ruleset the API uses when a request doesn't name one
# (standard / exact_match / home_aware, see backend/identity.py)
IDENTITY_RULES = os.environ.get("ROUND_IDENTITY_RULES", "standard").strip().lower() or "standard"

# Money
DEFAULT_CURRENCY = os.environ.get("ROUND_DEFAULT_CURRENCY", "GBP").strip().upper() or "GBP"

# Request limits
MAX_PORTFOLIO_ASSETS = int(os.environ.get("MAX_PORTFOLIO_ASSETS", "1000"))

# CORS origins (expand for staging/prod)
CORS_ORIGINS = [
    "http://localhost:3000",  # Next.js dev server
    "http://127.0.0.1:3000",
]

if IS_STAGING:
    staging_url = os.environ.get("CORS_ORIGINS", "")
    if staging_url:
        CORS_ORIGINS.extend(staging_url.split(","))
    else:
        CORS_ORIGINS.append("https://staging.round.app")

if IS_PROD:
    prod_origins = os.environ.get("CORS_ORIGINS", "")
    if prod_origins:
        CORS_ORIGINS.extend(prod_origins.split(","))
    else:
        CORS_ORIGINS.append("https://app.round.app")

print(f"[CONFIG] Environment: {ENV}")
print(f"[CONFIG] Identity rules: {IDENTITY_RULES}")
print(f"[CONFIG] Default currency: {DEFAULT_CURRENCY}")
print(f"[CONFIG] Max portfolio assets per request: {MAX_PORTFOLIO_ASSETS}")
