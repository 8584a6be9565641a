# backend/app/mock_data/boltx.py
"""BoltX generators: risk predictions, interventions, personalization and insights."""
import datetime as dt
from typing import Any, Dict, List

from app.mock_data import config
from app.mock_data.helpers import (
    chance, consistent_id, days_between, int_in_range, iso, pick, random_in_range, round2,
)
from app.mock_data.metrics import generate_base_metrics
from app.mock_data.timeframe import params_range
from app.schemas.mock_data import GenerationParams, RiskLevel

# ---------- risk ----------
def risk_level(score: float) -> RiskLevel:
    for threshold, level in config.RISK_THRESHOLDS:
        if score >= threshold:
            return level  # type: ignore[return-value]
    return "low"

def recommendations_for(level: str) -> List[str]:
    return list(config.RISK_RECOMMENDATIONS[level])

def _session_id(account_id: str, index: int) -> str:
    return consistent_id(f"{account_id}-sessions", index, "sess-")

def _spread_over_window(params: GenerationParams, index: int) -> str:
    """Timestamps step one day per row from the window start, wrapping inside the window."""
    rng = params_range(params)
    days = max(1, int(days_between(rng.start, rng.end)))
    return iso(rng.start + dt.timedelta(days=index % days))

def generate_abandonment_predictions(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-abandon"
    abandoned = base.total_sessions - base.total_conversions

    out = []
    for i in range(min(config.MAX_ABANDONMENT_PREDICTIONS, abandoned)):
        score = round2(random_in_range(seed, 0, 100, salt=f"risk-{i}"))
        level = risk_level(score)
        n_factors = int_in_range(seed, 1, 3, salt=f"factors-{i}")
        out.append({
            "sessionId": _session_id(params.account_id, i),
            "riskScore": score,
            "riskLevel": level,
            "factors": config.ABANDONMENT_FACTORS[:n_factors],
            "recommendations": recommendations_for(level),
            "recommendedIntervention": pick(seed, config.INTERVENTION_TYPES, salt=f"intervention-{i}"),
        })
    return out

def generate_boltx_predictions(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    out = []
    for i in range(min(config.MAX_BOLTX_PREDICTIONS, base.total_sessions)):
        seed = f"{params.account_id}-boltx-pred-{i}"
        score = round2(random_in_range(seed, 0, 100, salt="risk"))
        out.append({
            "sessionId": _session_id(params.account_id, i),
            "customerId": consistent_id(f"{params.account_id}-customers", i, "cust-"),
            "riskScore": score,
            "riskLevel": risk_level(score),
            "predictedValue": round2(random_in_range(seed, 50, 300, salt="value")),
            "factors": [
                {"factor": name, "impact": round2(random_in_range(seed, lo, hi, salt=name) * 100)}
                for name, lo, hi in config.PREDICTION_FACTORS
            ],
            "timestamp": _spread_over_window(params, i),
        })
    return out

# ---------- interventions ----------
def generate_interventions(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    count = min(config.MAX_INTERVENTIONS, int(round(base.total_sessions * config.INTERVENTION_RATE)))

    out = []
    for i in range(count):
        seed = f"{params.account_id}-boltx-int-{i}"
        applied = chance(seed, 0.7, salt="applied")
        success = applied and chance(seed, 0.5, salt="success")
        impact = random_in_range(seed, 0.1, 0.3, salt="impact") if success else 0.0
        out.append({
            "id": consistent_id(f"{params.account_id}-interventions", i, "int-"),
            "sessionId": _session_id(params.account_id, i),
            "type": pick(seed, config.INTERVENTION_TYPES, salt="type"),
            "applied": applied,
            "success": success,
            "impact": round2(impact * 100),
            "timestamp": _spread_over_window(params, i),
        })
    return out

# ---------- personalization ----------
def generate_personalization_profiles(params: GenerationParams) -> List[Dict[str, Any]]:
    out = []
    for i, (name, rules) in enumerate(config.PERSONALIZATION_PROFILES):
        seed = f"{params.account_id}-profile-{i}"
        out.append({
            "profileId": consistent_id(f"{params.account_id}-profiles", i, "prof-"),
            "name": name,
            "rules": rules,
            "active": chance(seed, config.ACTIVE_PROFILE_CHANCE, salt="active"),
            "conversionRate": round2(random_in_range(seed, 0.08, 0.15, salt="conversion") * 100),
            "revenue": round2(random_in_range(seed, 5000, 20000, salt="revenue")),
        })
    return out

def generate_personalization_metrics(params: GenerationParams) -> Dict[str, Any]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-personalization"
    profiles = generate_personalization_profiles(params)
    return {
        "profiles": len(profiles),
        "activeProfiles": sum(1 for p in profiles if p["active"]),
        "activeRules": sum(p["rules"] for p in profiles),
        "personalizedSessions": int(round(base.total_sessions * config.PERSONALIZED_SESSION_SHARE)),
        "conversionLift": round2(random_in_range(seed, 0.15, 0.25, salt="conversion-lift") * 100),
        "revenueLift": round2(random_in_range(seed, 0.20, 0.30, salt="revenue-lift") * 100),
    }

# ---------- optimizations / insights ----------
def generate_optimizations(params: GenerationParams) -> List[Dict[str, Any]]:
    rng = params_range(params)
    out = []
    for i, (name, status, impact) in enumerate(config.OPTIMIZATIONS):
        out.append({
            "id": consistent_id(f"{params.account_id}-optimizations", i, "opt-"),
            "name": name,
            "status": status,
            "impact": round2(impact * 100),
            "implemented": status == "implemented",
            "timestamp": iso(rng.start + dt.timedelta(days=i * config.OPTIMIZATION_SPACING_DAYS)),
        })
    return out

def generate_insights(params: GenerationParams) -> List[Dict[str, Any]]:
    return [
        {
            "id": consistent_id(f"{params.account_id}-insights", i, "insight-"),
            "type": kind,
            "title": title,
            "description": description,
            "priority": priority,
            "action": action,
            "impact": round2(impact * 100),
        }
        for i, (kind, title, description, priority, action, impact) in enumerate(config.INSIGHTS)
    ]
