# ---------------------------------------------------------
# backend/main.py
# Round - asset identity / valuation scoring backend
#
# Run: uvicorn backend.main:app --reload (from repo root)
#
# - FastAPI, stateless (asset rows live in the hosted backend)
# - /health                     : liveness + environment
# - /api/assets/classify        : category -> home-like + value profile
# - /api/assets/identity        : identity level (unknown/basic/good/strong)
# - /api/assets/readiness       : Round-Ready gate
# - /api/assets/valuation       : rule-based placeholder estimate
# - /api/assets/magic-import    : Magic Import stub
# - /api/portfolio/summary      : dashboard totals + readiness stats
# - /api/identity/rulesets      : identity rulesets
# ---------------------------------------------------------

from __future__ import annotations

from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Import local modules (robust fallback for different run contexts)
try:
    from backend.config import CORS_ORIGINS, ENV, IS_PROD
    from backend.identity import get_identity_rules
    from backend.routes_assets import router as assets_router
except ModuleNotFoundError:
    from config import CORS_ORIGINS, ENV, IS_PROD
    from identity import get_identity_rules
    from routes_assets import router as assets_router


app = FastAPI(
    title="Round Scoring API",
    description="Identity, readiness and rule-based valuation heuristics for Round assets.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS if IS_PROD else ["*"],  # Restrict origins in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(assets_router)

print(f"[STARTUP] Round scoring API ready: env={ENV}, identity_rules={get_identity_rules().name}")


# ---------------------------------------------------------
# Routes
# ---------------------------------------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "env": ENV}
