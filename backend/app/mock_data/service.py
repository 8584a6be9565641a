# backend/app/mock_data/service.py
"""
Endpoint dispatcher for demo mode.

`handle` maps an endpoint key to its generators and reshapes their output
into the JSON the live endpoint returns. Money and percentages are rounded
to 2 dp; a few fields keep the live API's fixed-point strings.
"""
import datetime as dt
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from app.mock_data import boltx, breakdowns, config, customers, revenue
from app.mock_data.events import simulate_checkout_events
from app.mock_data.helpers import iso, random_in_range, round2, safe_div
from app.mock_data.metrics import generate_base_metrics, generate_funnel
from app.mock_data.timeframe import params_range, parse_date, parse_period, utc_now
from app.schemas.mock_data import GenerationParams

Shaper = Callable[[GenerationParams, Mapping[str, str]], Dict[str, Any]]

def _avg(values: List[float]) -> float:
    return safe_div(sum(values), len(values))

def _date_range(params: GenerationParams) -> Dict[str, str]:
    rng = params_range(params)
    return {"start": iso(rng.start), "end": iso(rng.end)}

def _int_param(query: Mapping[str, str], key: str, default: int) -> int:
    try:
        return int(query.get(key) or default)
    except (TypeError, ValueError):
        return default

# ---------- overview ----------
def _metrics(params, query):
    return {
        "metrics": generate_base_metrics(params).model_dump(by_alias=True),
        "funnel": generate_funnel(params).model_dump(),
        "period": params.period,
        "dateRange": _date_range(params),
    }

def _revenue(params, query):
    return {**revenue.generate_revenue_data(params), "period": params.period, "dateRange": _date_range(params)}

def _performance(params, query):
    base = generate_base_metrics(params)
    funnel = generate_funnel(params)
    steps = [("cart", "Cart"), ("profile", "Profile"), ("shipping", "Shipping"), ("payment", "Payment")]
    counts = {"cart": funnel.cart, "profile": funnel.profile, "shipping": funnel.shipping, "payment": funnel.payment}

    funnel_rows = [
        {"step": key, "label": label, "count": counts[key],
         "percentage": round2(safe_div(counts[key], funnel.cart) * 100) if key != "cart" else 100}
        for key, label in steps
    ]
    funnel_rows.append({"step": "confirmed", "label": "Confirmed", "count": funnel.confirmed,
                        "percentage": base.conversion_rate})

    step_times = {"cart": 0, "profile": 45, "shipping": 60, "payment": 90}
    step_metrics = []
    for i, (key, label) in enumerate(steps):
        prev = counts[steps[i - 1][0]] if i else counts[key]
        step_metrics.append({
            "step": key,
            "label": label,
            "avgTime": step_times[key],
            "abandonment": round(safe_div(prev - counts[key], prev) * 100, 1),
        })

    return {
        "metrics": {
            "conversionRate": f"{base.conversion_rate:.1f}",
            "abandonmentRate": f"{base.abandonment_rate:.1f}",
            "avgCheckoutTime": base.avg_checkout_time,
            "totalSessions": base.total_sessions,
        },
        "funnel": funnel_rows,
        "stepMetrics": step_metrics,
        "period": params.period,
        "dateRange": _date_range(params),
    }

def _insights(params, query):
    return {"insights": boltx.generate_insights(params)}

# ---------- breakdowns ----------
def _payment(params, query):
    methods = breakdowns.generate_payment_methods(params)
    return {
        "paymentMethods": [
            {"name": m["method"], "value": m["count"], "revenue": m["revenue"], "successRate": m["conversionRate"]}
            for m in methods
        ],
        "totalPayments": sum(m["count"] for m in methods),
        "avgSuccessRate": f"{_avg([m['conversionRate'] for m in methods]):.1f}",
        "period": params.period,
    }

def _shipping(params, query):
    methods = breakdowns.generate_shipping_methods(params)
    total = sum(m["count"] for m in methods)
    # estimated cost is 10 per delivery day
    avg_cost = safe_div(sum(m["avgDeliveryTime"] * 10 * m["count"] for m in methods), total)
    return {
        "shippingMethods": [
            {"method": m["method"], "count": m["count"], "avgDays": m["avgDeliveryTime"],
             "avgCost": round2(m["avgDeliveryTime"] * 10)}
            for m in methods
        ],
        "totalShipments": total,
        "avgShippingCost": f"{avg_cost:.2f}",
        "period": params.period,
    }

def _devices(params, query):
    devices = breakdowns.generate_devices(params)
    return {
        "devices": [
            {"device": d["device"], "sessions": d["sessions"], "conversion": d["conversionRate"], "revenue": d["revenue"]}
            for d in devices
        ],
        "totalSessions": sum(d["sessions"] for d in devices),
        "avgConversion": f"{_avg([d['conversionRate'] for d in devices]):.1f}",
        "period": params.period,
    }

def _browsers(params, query):
    browsers = breakdowns.generate_browsers(params)
    platforms = breakdowns.generate_platforms(params)
    total = sum(b["sessions"] for b in browsers)
    avg_order = generate_base_metrics(params).avg_order_value
    return {
        "browsers": [
            {
                "browser": b["browser"],
                "sessions": b["sessions"],
                "conversion": b["conversionRate"],
                "revenue": round2(b["conversions"] * avg_order),
                "marketShare": round2(safe_div(b["sessions"], total) * 100),
            }
            for b in browsers
        ],
        "platforms": [
            {"platform": p["platform"], "sessions": p["sessions"], "conversion": p["conversion"], "revenue": p["revenue"]}
            for p in platforms
        ],
        "totalSessions": total,
        "avgConversion": f"{_avg([b['conversionRate'] for b in browsers]):.1f}",
        "period": params.period,
    }

def _geography(params, query):
    locations = breakdowns.generate_geography(params)

    def row(loc):
        out = {"country": loc["country"]}
        if loc["state"]:
            out["state"] = loc["state"]
        out.update({
            "sessions": loc["sessions"],
            "orders": loc["conversions"],
            "revenue": loc["revenue"],
            "conversions": loc["conversions"],
            "conversionRate": loc["conversionRate"],
            "avgOrderValue": round2(safe_div(loc["revenue"], loc["conversions"])),
        })
        return out

    sessions = sum(loc["sessions"] for loc in locations)
    orders = sum(loc["conversions"] for loc in locations)
    return {
        "countries": [row(loc) for loc in locations if not loc["state"]],
        "states": [row(loc) for loc in locations if loc["state"]],
        "summary": {
            "totalSessions": sessions,
            "totalOrders": orders,
            "totalRevenue": round2(sum(loc["revenue"] for loc in locations)),
            "overallConversionRate": round2(safe_div(orders, sessions) * 100),
        },
        "period": params.period,
    }

def _coupons(params, query):
    coupons = breakdowns.generate_coupons(params)
    base = generate_base_metrics(params)
    used = sum(c["usage"] for c in coupons)
    discount_amount = sum(c["discount"] * c["usage"] for c in coupons)
    with_discount = round2(sum(c["revenue"] for c in coupons))
    return {
        "coupons": [
            {"code": c["code"], "count": c["usage"], "totalDiscount": c["discount"] * c["usage"],
             "avgDiscount": c["discount"], "revenue": c["revenue"], "orders": c["orders"]}
            for c in coupons
        ],
        "summary": {
            "totalDiscounts": used,
            "totalDiscountAmount": discount_amount,
            "avgDiscountAmount": round2(safe_div(discount_amount, used)),
            "revenueWithDiscount": with_discount,
            "revenueWithoutDiscount": round2(base.total_revenue - with_discount),
            "ordersWithDiscount": used,
            "ordersWithoutDiscount": max(0, base.total_orders - used),
            "couponUsageRate": round2(safe_div(used, base.total_orders) * 100),
        },
        "period": params.period,
    }

# ---------- funnel / customers ----------
def _micro_conversions(params, query):
    steps = customers.generate_micro_conversions(params)
    drop_offs = []
    for i, s in enumerate(steps):
        prev = steps[i - 1]["count"] if i else s["count"]
        drop_offs.append({
            "step": s["step"],
            "dropOff": s["dropoff"],
            "dropOffRate": round2(safe_div(s["dropoff"], prev) * 100),
        })
    return {
        "microConversions": [
            {
                "step": s["step"].lower().replace(" ", "_"),
                "label": s["step"],
                "reached": s["count"],
                "completed": s["count"],
                "conversionRate": s["percentage"],
                "description": f"Users who reached {s['step']}",
            }
            for s in steps
        ],
        "dropOffs": drop_offs,
        "summary": {
            "totalSessions": steps[0]["count"] if steps else 0,
            "overallConversionRate": steps[-1]["percentage"] if steps else 0,
        },
        "period": params.period,
    }

def _ltv(params, query):
    data = customers.generate_ltv(params)
    by_name = {d["segment"]: d for d in data["distribution"]}
    return {
        "summary": {
            "totalCustomers": data["totalCustomers"],
            "totalRevenue": round2(data["totalCustomers"] * data["averageLTV"]),
            "avgLTV": data["averageLTV"],
            "avgOrdersPerCustomer": data["avgOrdersPerCustomer"],
            "recurringRate": data["recurringRate"],
            "ltvSegments": {
                key: by_name.get(f"{key.title()} LTV", {}).get("count", 0) for key in ("high", "medium", "low")
            },
        },
        "customers": data["topCustomers"],
        "ltvBySegment": {
            d["segment"].lower().replace(" ", "_"): {
                "customers": d["count"],
                "totalRevenue": round2(d["count"] * d["avgLTV"]),
                "avgLTV": d["avgLTV"],
            }
            for d in data["distribution"]
        },
        "period": params.period,
    }

def _cohorts(params, query):
    cohorts = customers.generate_cohorts(params)
    n = len(cohorts)
    total = sum(c["customers"] for c in cohorts)
    avg_by_period: Dict[int, float] = {}
    for c in cohorts:
        for cell in c["retentionMatrix"]:
            avg_by_period[cell["period"]] = avg_by_period.get(cell["period"], 0.0) + cell["retentionRate"]
    return {
        "summary": {
            "totalCohorts": n,
            "totalCustomers": total,
            "avgCohortSize": round2(safe_div(total, n)),
            "avgLTV": round2(_avg([c["avgLTV"] for c in cohorts])),
            "avgRetentionByPeriod": {str(p): round2(safe_div(v, n)) for p, v in avg_by_period.items()},
        },
        "cohorts": [
            {
                "cohort": c["cohort"],
                "cohortStart": c["cohortStart"],
                "cohortSize": c["customers"],
                "totalRevenue": c["revenue"],
                "avgLTV": c["avgLTV"],
                "retentionMatrix": c["retentionMatrix"],
            }
            for c in cohorts
        ],
        "period": params.period,
    }

def _retention(params, query):
    rows = customers.generate_retention(params)
    seed = f"{params.account_id}-retention-summary"
    total = sum(r["customers"] for r in rows)
    returning = int(round(total * 0.35))
    churned = int(round(total * 0.25))

    cohort_rows = []
    for i, r in enumerate(rows):
        months_back = len(rows) - i
        year, month = divmod(params.now.year * 12 + params.now.month - 1 - months_back, 12)
        cohort_rows.append({
            "cohort": f"{year}-{month + 1:02d}",
            "customers": r["customers"],
            "retentionByPeriod": {
                "d30": round2(r["retentionRate"] * 0.8),
                "d60": round2(r["retentionRate"] * 0.6),
                "d90": round2(r["retentionRate"] * 0.4),
            },
        })

    return {
        "summary": {
            "totalCustomers": total,
            "newCustomers": int(round(total * 0.4)),
            "returningCustomers": returning,
            "churnedCustomers": churned,
            "retentionRate": round2(safe_div(returning, total) * 100),
            "churnRate": round2(safe_div(churned, total) * 100),
            "avgPurchaseFrequency": round2(random_in_range(seed, 1.5, 2.5, salt="frequency")),
            "avgDaysBetweenPurchases": int(round(random_in_range(seed, 25, 45, salt="days"))),
            # non-increasing d1 >= d7 >= d30 >= d90
            "retentionRates": {
                "d1": round2(random_in_range(seed, 25, 30, salt="d1")),
                "d7": round2(random_in_range(seed, 20, 25, salt="d7")),
                "d30": round2(random_in_range(seed, 12, 20, salt="d30")),
                "d90": round2(random_in_range(seed, 5, 12, salt="d90")),
            },
        },
        "cohorts": cohort_rows[-12:],
        "period": params.period,
    }

# ---------- optimization ----------
def _friction(params, query):
    data = revenue.generate_friction_score(params)
    seed = f"{params.account_id}-friction-summary"
    total = data["totalSessions"]
    scores = [s["score"]["score"] for s in data["sessions"]]

    def scaled(count: int) -> int:
        return int(round(total * safe_div(count, len(scores))))

    high_conv = random_in_range(seed, 5, 10, salt="high")
    low_conv = random_in_range(seed, 15, 25, salt="low")
    factor_keys = ["formFactor", "errorFactor", "navigationFactor", "timeFactor"]
    return {
        "summary": {
            "totalSessions": total,
            "avgFrictionScore": data["score"],
            "frictionDistribution": {
                "low": scaled(sum(1 for s in scores if s < 40)),
                "medium": scaled(sum(1 for s in scores if 40 <= s < 60)),
                "high": scaled(sum(1 for s in scores if s >= 60)),
            },
            "frictionBreakdown": {
                key: round2(f["impact"] / 100) for key, f in zip(factor_keys, data["factors"])
            },
            "factors": data["factors"],
            "recommendations": data["recommendations"],
            "highFrictionConversionRate": round2(high_conv),
            "lowFrictionConversionRate": round2(low_conv),
            "correlation": round2(low_conv - high_conv),
        },
        "frictionScores": data["sessions"],
        "frictionTrend": data["trend"],
        "period": params.period,
    }

def _cac(params, query):
    data = breakdowns.generate_cac(params)
    channels = data["channels"]
    new_customers = sum(c["customers"] for c in channels)
    spend = sum(c["cac"] * c["customers"] for c in channels)
    avg_cac = safe_div(spend, new_customers, data["cac"])
    avg_ltv = customers.generate_ltv(params)["averageLTV"]
    ratio = safe_div(avg_ltv, avg_cac)
    avg_order = generate_base_metrics(params).avg_order_value
    return {
        "summary": {
            "totalNewCustomers": new_customers,
            "avgCAC": round2(avg_cac),
            "avgLTV": round2(avg_ltv),
            "ltvCacRatio": round2(ratio),
            "totalEstimatedMarketingSpend": round2(spend),
            "acquisitionEfficiency": {
                "excellent": ratio >= 3,
                "good": 2 <= ratio < 3,
                "needsImprovement": ratio < 2,
                "ratio": round2(ratio),
            },
        },
        "channels": [
            {
                "channel": c["channel"],
                "sessions": c["customers"] * 3,
                "conversions": c["customers"],
                "revenue": round2(c["customers"] * avg_order),
                "conversionRate": round2(safe_div(1, 3) * 100),
                "avgOrderValue": avg_order,
                "estimatedCAC": c["cac"],
                "ltvCacRatio": round2(safe_div(avg_ltv, c["cac"])),
                "percentage": c["percentage"],
            }
            for c in channels
        ],
        "trend": data["trend"],
        "period": params.period,
        "note": "CAC values are estimated. For accurate CAC, integrate with your marketing platform to get actual spend data.",
    }

def _optimization_roi(params, query):
    projects = revenue.generate_optimization_roi(params)
    rng = params_range(params)
    mid = rng.start + (rng.end - rng.start) / 2

    before_revenue = sum(safe_div(p["revenue"], 1 + p["impact"] / 100) for p in projects)
    after_revenue = sum(p["revenue"] for p in projects)
    change = after_revenue - before_revenue

    def window(start: dt.datetime, end: dt.datetime, total: float, conversion: float) -> Dict[str, Any]:
        sessions = int(round(total / 100))
        conversions = int(round(sessions * conversion))
        return {
            "start": iso(start),
            "end": iso(end),
            "sessions": sessions,
            "conversions": conversions,
            "conversionRate": round2(safe_div(conversions, sessions) * 100),
            "revenue": round2(total),
            "orders": conversions,
            "aov": round2(safe_div(total, conversions)),
        }

    before = window(rng.start, mid, before_revenue, 0.08)
    after = window(mid, rng.end, after_revenue, 0.12)

    def pct_change(new: float, old: float) -> Optional[float]:
        return round2((new - old) / old * 100) if old > 0 else None

    cost = sum(p["investment"] for p in projects)
    roi = revenue.compute_roi(change, cost)
    return {
        "summary": {
            "beforePeriod": before,
            "afterPeriod": after,
            "changes": {
                "revenueChange": round2(change),
                "revenueChangePercent": pct_change(after_revenue, before_revenue),
                "conversionRateChange": round2(after["conversionRate"] - before["conversionRate"]),
                "conversionRateChangePercent": pct_change(after["conversionRate"], before["conversionRate"]),
                "aovChange": round2(after["aov"] - before["aov"]),
                "aovChangePercent": pct_change(after["aov"], before["aov"]),
                "additionalOrders": after["orders"] - before["orders"],
                "additionalRevenue": round2(change),
            },
            "roi": {
                "optimizationCost": cost,
                "additionalRevenue": round2(change),
                "roi": round2(roi) if roi is not None else None,
                "roiFormatted": revenue.format_roi(change, cost),
            },
        },
        "optimizations": projects,
        "period": params.period,
        "optimizationDate": iso(mid),
    }

def _segments(params, query):
    segments = breakdowns.generate_segments(params)
    total_customers = sum(s["customers"] for s in segments)
    total_revenue = sum(s["revenue"] for s in segments)
    return {
        "summary": {
            "totalCustomers": total_customers,
            "totalRevenue": round2(total_revenue),
            "overallAvgLTV": round2(safe_div(total_revenue, total_customers)),
            "avgAOV": round2(_avg([s["avgOrderValue"] for s in segments])),
            "avgOrders": 1.5 if segments else 0,
        },
        "segments": [
            {
                "name": s["segment"],
                "description": f"Customers in {s['segment']} segment",
                "metrics": {
                    "count": s["customers"],
                    "totalRevenue": s["revenue"],
                    "avgLTV": round2(safe_div(s["revenue"], s["customers"])),
                    "avgAOV": s["avgOrderValue"],
                    "avgOrders": 1.5,
                    "conversionRate": s["conversionRate"],
                    "percentage": s["percentage"],
                },
            }
            for s in segments
        ],
        "period": params.period,
    }

def _revenue_forecast(params, query):
    data = revenue.generate_revenue_forecast(params)
    points = data["forecast"]
    growth = data["growthRate"]
    next_month = data["nextMonth"]
    trend = "increasing" if growth > 0.01 else "decreasing" if growth < -0.01 else "stable"
    return {
        "summary": {
            "totalHistoricalRevenue": round2(sum(h["revenue"] for h in data["historical"])),
            "avgDailyRevenue": data["baseDaily"],
            "totalForecastRevenue": next_month,
            "avgForecastRevenue": round2(safe_div(next_month, len(points))),
            "forecast7Revenue": round2(sum(p["predicted"] for p in points[:7])),
            "forecast30Revenue": next_month,
            "forecast90Revenue": round2(next_month * 3),
            "trend": trend,
            "avgGrowth": growth,
        },
        "historical": data["historical"],
        "forecast": [
            {"date": p["date"], "forecast": p["predicted"], "lowerBound": p["lowerBound"],
             "upperBound": p["upperBound"], "confidence": p["confidence"]}
            for p in points
        ],
        "accuracy": None,
        "period": params.period,
        "forecastDays": config.FORECAST_DAYS,
    }

def _abandonment_prediction(params, query):
    predictions = boltx.generate_abandonment_predictions(params)
    base = generate_base_metrics(params)
    distribution = {level: 0 for level in ("low", "medium", "high", "critical")}
    for p in predictions:
        distribution[p["riskLevel"]] += 1

    rows = [
        {
            "sessionId": p["sessionId"],
            "prediction": {
                "riskScore": p["riskScore"],
                "riskLevel": p["riskLevel"],
                "confidence": int(round((1 - p["riskScore"] / 100 * 0.2) * 100)),
                "factors": p["factors"],
                "recommendations": p["recommendations"],
                "interventionSuggested": p["riskScore"] > config.INTERVENTION_THRESHOLD,
                "interventionType": "discount" if p["riskScore"] > config.INTERVENTION_THRESHOLD else None,
            },
            "isActive": False,
            "isAbandoned": p["riskScore"] > config.INTERVENTION_THRESHOLD,
            "isCompleted": p["riskScore"] < 30,
        }
        for p in predictions
    ]
    rows.sort(key=lambda r: r["prediction"]["riskScore"], reverse=True)

    return {
        "summary": {
            "totalSessions": base.total_sessions,
            "highRiskSessions": sum(1 for p in predictions if p["riskScore"] > config.INTERVENTION_THRESHOLD),
            "avgRiskScore": round2(_avg([p["riskScore"] for p in predictions])),
            "typicalCheckoutDuration": 300,
            "avgCheckoutTime": base.avg_checkout_time,
            "riskDistribution": distribution,
            "abandonmentByRisk": {
                level: {
                    "total": n,
                    "abandoned": int(round(n * config.RISK_ABANDONMENT_RATES[level])),
                    "rate": int(config.RISK_ABANDONMENT_RATES[level] * 100),
                }
                for level, n in distribution.items()
            },
        },
        "predictions": rows,
        "period": params.period,
    }

# ---------- boltx ----------
def _boltx_predictions(params, query):
    predictions = boltx.generate_boltx_predictions(params)
    if not predictions:
        return {
            "riskScore": 50,
            "riskLevel": "medium",
            "confidence": 75,
            "factors": [],
            "recommendations": [],
            "interventionSuggested": False,
            "interventionType": None,
        }
    pred = predictions[0]
    suggested = pred["riskScore"] > config.INTERVENTION_THRESHOLD
    return {
        "riskScore": pred["riskScore"],
        "riskLevel": pred["riskLevel"],
        "confidence": int(round((1 - pred["riskScore"] / 100 * 0.2) * 100)),
        "factors": pred["factors"],
        "recommendations": boltx.recommendations_for(pred["riskLevel"]),
        "interventionSuggested": suggested,
        "interventionType": "discount" if suggested else None,
    }

def _boltx_interventions(params, query):
    interventions = boltx.generate_interventions(params)
    by_type: Dict[str, Dict[str, Any]] = {}
    for i in interventions:
        stats = by_type.setdefault(i["type"], {"total": 0, "applied": 0, "converted": 0, "abandoned": 0,
                                               "conversionRate": 0})
        stats["total"] += 1
        if i["applied"]:
            stats["applied"] += 1
        if i["success"]:
            stats["converted"] += 1
        elif i["applied"]:
            stats["abandoned"] += 1
    for stats in by_type.values():
        stats["conversionRate"] = round2(safe_div(stats["converted"], stats["applied"]) * 100)

    return {
        "interventions": [
            {
                "id": i["id"],
                "sessionId": i["sessionId"],
                "intervention_type": i["type"],
                "applied": i["applied"],
                "applied_at": i["timestamp"] if i["applied"] else None,
                "result": "converted" if i["success"] else ("abandoned" if i["applied"] else "pending"),
                "metadata": {"impact": i["impact"]},
                "created_at": i["timestamp"],
            }
            for i in interventions
        ],
        "effectivenessByType": by_type,
        "period": params.period,
        "total": len(interventions),
    }

def _personalization_metrics(params, query):
    metrics = boltx.generate_personalization_metrics(params)
    base = generate_base_metrics(params)
    devices = breakdowns.generate_devices(params)
    return {
        "totalProfiles": metrics["profiles"],
        "activeProfiles": metrics["activeProfiles"],
        "activeRules": metrics["activeRules"],
        "personalizationRate": round2(safe_div(metrics["personalizedSessions"], base.total_sessions) * 100),
        "personalizedConversionRate": round2(config.BASE_PERSONALIZED_CONVERSION + metrics["conversionLift"]),
        "nonPersonalizedConversionRate": config.BASE_PERSONALIZED_CONVERSION,
        "revenueLift": metrics["revenueLift"],
        "deviceDistribution": {d["device"].lower(): round2(d["percentage"] / 100) for d in devices},
        "conversionByDevice": {
            d["device"].lower(): {"total": d["sessions"], "converted": d["conversions"],
                                  "conversionRate": d["conversionRate"]}
            for d in devices
        },
        "period": params.period,
    }

def _personalization_profiles(params, query):
    profiles = boltx.generate_personalization_profiles(params)
    created = iso(params.now - dt.timedelta(days=1))
    updated = iso(params.now)

    def device(p):
        return "mobile" if "Mobile" in p["name"] else "desktop"

    distribution: Dict[str, int] = {}
    for p in profiles:
        distribution[device(p)] = distribution.get(device(p), 0) + 1

    return {
        "profiles": [
            {
                "id": p["profileId"],
                "session_id": f"sess-{p['profileId']}",
                "device_type": device(p),
                "browser": "Chrome",
                "location": "BR",
                "behavior": {},
                "preferences": {},
                "metadata": {"name": p["name"], "rules": p["rules"], "active": p["active"]},
                "created_at": created,
                "updated_at": updated,
            }
            for p in profiles
        ],
        "deviceDistribution": distribution,
        "activeProfiles": sum(1 for p in profiles if p["active"]),
        "totalProfiles": len(profiles),
        "period": params.period,
    }

def _boltx_optimization(params, query):
    return {"optimizations": boltx.generate_optimizations(params)}

# ---------- events ----------
def _events(params, query):
    page = max(1, _int_param(query, "page", config.DEFAULT_EVENTS_PAGE))
    limit = min(config.MAX_EVENTS_LIMIT,
                max(config.MIN_EVENTS_LIMIT, _int_param(query, "limit", config.DEFAULT_EVENTS_LIMIT)))
    sim = simulate_checkout_events(
        params, page=page, limit=limit,
        event_type=query.get("event_type") or None,
        category=query.get("category") or None,
        step=query.get("step") or None,
    )
    total_pages = -(-sim.filtered_total // limit)
    return {
        "summary": sim.summary.model_dump(by_alias=True),
        "events": [e.model_dump() for e in sim.events],
        "pagination": {
            "page": page,
            "limit": limit,
            "totalEvents": sim.filtered_total,
            "totalPages": total_pages,
            "hasMore": page < total_pages,
        },
        "period": params.period,
        "dateRange": {"start": iso(sim.date_range.start), "end": iso(sim.date_range.end)},
    }

ENDPOINT_HANDLERS: Dict[str, Shaper] = {
    "metrics": _metrics,
    "revenue": _revenue,
    "performance": _performance,
    "insights": _insights,
    "analytics-payment": _payment,
    "analytics-shipping": _shipping,
    "analytics-devices": _devices,
    "analytics-browsers": _browsers,
    "analytics-geography": _geography,
    "analytics-coupons": _coupons,
    "analytics-micro-conversions": _micro_conversions,
    "analytics-ltv": _ltv,
    "analytics-cohorts": _cohorts,
    "analytics-retention": _retention,
    "analytics-friction-score": _friction,
    "analytics-cac": _cac,
    "analytics-optimization-roi": _optimization_roi,
    "analytics-segments": _segments,
    "analytics-revenue-forecast": _revenue_forecast,
    "analytics-abandonment-prediction": _abandonment_prediction,
    "boltx-predictions": _boltx_predictions,
    "boltx-interventions": _boltx_interventions,
    "boltx-personalization-metrics": _personalization_metrics,
    "boltx-personalization-profiles": _personalization_profiles,
    "boltx-optimization": _boltx_optimization,
    "analytics-events": _events,
}
ENDPOINT_KEYS = sorted(ENDPOINT_HANDLERS)

def handle(
    endpoint_key: str,
    account_id: str,
    period: Optional[str] = None,
    start_date: Any = None,
    end_date: Any = None,
    query_params: Optional[Mapping[str, str]] = None,
    clock: Callable[[], dt.datetime] = utc_now,
) -> Dict[str, Any]:
    """
    Demo-mode response for one endpoint.

    Dates may be datetimes or ISO strings. Raises InvalidDateRangeError for a
    bad custom window; unknown keys log a warning and return {}.
    """
    shaper = ENDPOINT_HANDLERS.get(endpoint_key)
    if shaper is None:
        logging.warning("Unknown mock data endpoint: %s", endpoint_key)
        return {}

    params = GenerationParams(
        account_id=account_id,
        period=parse_period(period),
        start_date=parse_date(start_date),
        end_date=parse_date(end_date),
        now=clock(),
    )
    # fail fast on a bad window before any generator runs
    params_range(params)
    logging.debug("Mock data %s for account=%s period=%s", endpoint_key, account_id, params.period)
    return shaper(params, query_params or {})
