# backend/app/mock_data/config.py
"""
Constants and weight tables for the demo-mode analytics engine.
Weight tables are plain rows; the generators turn them into breakdowns.
"""
import os
from typing import Dict, List, Optional, Tuple

# ---------- baseline ----------
ANNUAL_REVENUE = float(os.getenv("MOCK_ANNUAL_REVENUE", "387000000"))

# (min, max) per month
REVENUE_GROWTH_RANGE = (0.05, 0.10)
SESSIONS_GROWTH_RANGE = (0.03, 0.07)
CONVERSION_IMPROVEMENT_RANGE = (0.001, 0.003)

BASE_CONVERSION = 0.08
MAX_CONVERSION = 0.15
AOV_RANGE = (120.0, 150.0)
CHECKOUT_TIME_RANGE = (120, 300)  # seconds

PERIOD_DAYS: Dict[str, int] = {"today": 1, "week": 7, "month": 30, "year": 365}

# custom windows are rejected past this length or outside these years
MAX_CUSTOM_RANGE_DAYS = 366 * 5
CUSTOM_YEAR_RANGE = (1970, 2999)

# cart -> profile -> shipping -> payment
FUNNEL_RATIOS = (0.85, 0.75, 0.65)

# ---------- geography ----------
COUNTRY_DISTRIBUTION: Dict[str, float] = {
    "BRA": 0.35,
    "USA": 0.30,
    "CAN": 0.08,
    "GBR": 0.06,
    "ESP": 0.05,
    "ARG": 0.03,
    "CHL": 0.025,
    "PRT": 0.02,
    "CHE": 0.02,
    "SGP": 0.015,
    "NOR": 0.01,
}

REGIONS: Dict[str, List[str]] = {
    "brazil": ["BRA"],
    "north_america": ["USA", "CAN"],
    "europe": ["GBR", "ESP", "PRT", "CHE", "NOR"],
    "latin_america": ["ARG", "CHL"],
    "asia": ["SGP"],
}

# (country, state, weight); state None means country-level traffic
GEOGRAPHY_WEIGHTS: List[Tuple[str, Optional[str], float]] = [
    ("BRA", "SP", 0.15),
    ("BRA", "RJ", 0.08),
    ("BRA", "MG", 0.05),
    ("BRA", "RS", 0.03),
    ("BRA", "PR", 0.02),
    ("BRA", "SC", 0.01),
    ("BRA", None, 0.01),
    ("USA", "CA", 0.10),
    ("USA", "NY", 0.07),
    ("USA", "TX", 0.05),
    ("USA", "FL", 0.04),
    ("USA", "IL", 0.02),
    ("USA", None, 0.02),
    ("CAN", "ON", 0.04),
    ("CAN", "QC", 0.025),
    ("CAN", "BC", 0.01),
    ("CAN", None, 0.005),
    ("GBR", None, 0.06),
    ("ESP", None, 0.05),
    ("ARG", None, 0.03),
    ("CHL", None, 0.025),
    ("PRT", None, 0.02),
    ("CHE", None, 0.02),
    ("SGP", None, 0.015),
    ("NOR", None, 0.01),
]
GEO_CONVERSION_RANGE = (0.06, 0.12)

# ---------- payment ----------
PAYMENT_MIX: Dict[str, Dict[str, float]] = {
    "brazil": {"PIX": 0.40, "Visa": 0.25, "MasterCard": 0.10, "Debit Card": 0.15, "PayPal": 0.10},
    "north_america": {"Visa": 0.35, "MasterCard": 0.20, "AMEX": 0.05, "Debit Card": 0.10, "PayPal": 0.25, "Wire Transfer": 0.05},
    "europe": {"Visa": 0.30, "MasterCard": 0.20, "Debit Card": 0.15, "PayPal": 0.30, "Wire Transfer": 0.05},
    "latin_america": {"Visa": 0.30, "MasterCard": 0.20, "PayPal": 0.30, "Wire Transfer": 0.20},
    "asia": {"Visa": 0.25, "MasterCard": 0.20, "PayPal": 0.35, "Wire Transfer": 0.20},
}
PAYMENT_CONVERSION_RANGE = (0.05, 0.15)

# ---------- shipping: (carrier, share, avg delivery days) ----------
SHIPPING_MIX: Dict[str, List[Tuple[str, float, int]]] = {
    "brazil": [("Correios", 0.50, 7), ("Loggi", 0.30, 3), ("DHL", 0.15, 5), ("UPS", 0.05, 6)],
    "north_america": [("UPS", 0.40, 3), ("FedEx", 0.30, 2), ("DHL", 0.25, 4), ("TNT", 0.05, 5)],
    "uk": [("Royal Mail", 0.45, 4), ("DHL", 0.30, 3), ("UPS", 0.15, 4), ("TNT", 0.10, 5)],
    "europe": [("DHL", 0.40, 4), ("PostNL", 0.25, 5), ("UPS", 0.20, 4), ("TNT", 0.15, 6)],
    "asia": [("SingPost", 0.50, 3), ("DHL", 0.30, 2), ("FedEx", 0.20, 3)],
}
SHIPPING_REGIONS: Dict[str, List[str]] = {
    "brazil": ["BRA"],
    "north_america": ["USA", "CAN"],
    "uk": ["GBR"],
    "europe": ["ESP", "PRT", "CHE", "NOR"],
    "asia": ["SGP"],
}

# ---------- devices / browsers / platforms ----------
DEVICE_WEIGHTS: List[Tuple[str, float, float]] = [
    ("Mobile", 0.60, 0.08),
    ("Desktop", 0.35, 0.12),
    ("Tablet", 0.05, 0.06),
]
BROWSER_WEIGHTS: Dict[str, float] = {
    "Chrome": 0.50,
    "Safari": 0.30,
    "Firefox": 0.10,
    "Edge": 0.08,
    "Other": 0.02,
}
BROWSER_CONVERSION_RANGE = (0.07, 0.13)
PLATFORM_WEIGHTS: Dict[str, float] = {
    "Windows": 0.50,
    "macOS": 0.30,
    "Linux": 0.10,
    "Mobile": 0.10,
}
PLATFORM_CONVERSION_RANGE = (0.07, 0.13)

# ---------- coupons: (code, usage share, discount %) ----------
COUPONS: List[Tuple[str, float, int]] = [
    ("WELCOME10", 0.15, 10),
    ("FREESHIP", 0.25, 0),
    ("SAVE20", 0.10, 20),
    ("BLACKFRIDAY", 0.05, 30),
]

# ---------- customers ----------
LTV_SEGMENTS: List[Tuple[str, float, float]] = [
    ("High LTV", 0.20, 2.5),
    ("Medium LTV", 0.50, 1.0),
    ("Low LTV", 0.30, 0.5),
]
TOP_CUSTOMERS = 10
COHORT_COUNT = 3
COHORT_PERIODS = 12

RETENTION_CURVE: List[Tuple[str, float]] = [
    ("Week 1", 0.40),
    ("Week 2", 0.30),
    ("Week 4", 0.25),
    ("Month 2", 0.20),
    ("Month 3", 0.15),
]
RETENTION_JITTER = 0.05

# (segment, share of customers, conversion rate)
CUSTOMER_SEGMENTS: List[Tuple[str, float, float]] = [
    ("New Customers", 0.40, 0.06),
    ("Returning Customers", 0.35, 0.12),
    ("VIP Customers", 0.15, 0.18),
    ("At-Risk Customers", 0.10, 0.04),
]

# ---------- acquisition ----------
CAC_RANGE = (20.0, 50.0)
# (channel, CAC multiplier, share of customers)
CAC_CHANNELS: List[Tuple[str, float, float]] = [
    ("Organic Search", 0.5, 0.40),
    ("Social Media", 1.2, 0.30),
    ("Paid Ads", 2.0, 0.20),
    ("Direct", 0.3, 0.10),
]
CAC_DAILY_TREND = -0.005

# ---------- optimization ----------
FRICTION_SCORE_RANGE = (60.0, 85.0)  # lower is better
# (factor, min impact, max impact)
FRICTION_FACTORS: List[Tuple[str, float, float]] = [
    ("Form Complexity", 0.10, 0.30),
    ("Payment Steps", 0.05, 0.20),
    ("Shipping Options", 0.05, 0.15),
    ("Mobile Experience", 0.10, 0.25),
]
FRICTION_RECOMMENDATIONS = [
    "Simplify checkout form fields",
    "Reduce payment steps",
    "Improve mobile checkout experience",
    "Add guest checkout option",
]
FRICTION_SESSION_SAMPLE = 100
FRICTION_TREND_DAYS = 30

# (name, investment, revenue impact)
OPTIMIZATION_PROJECTS: List[Tuple[str, float, float]] = [
    ("One-Click Checkout", 5000.0, 0.15),
    ("Mobile Optimization", 3000.0, 0.10),
    ("Payment Method Expansion", 2000.0, 0.08),
    ("Shipping Options", 1500.0, 0.05),
]

FORECAST_DAYS = 30
FORECAST_MIN_CONFIDENCE = 0.70
FORECAST_BASE_SPREAD = 0.05
FORECAST_SPREAD_PER_DAY = 0.005

# ---------- boltx ----------
MAX_ABANDONMENT_PREDICTIONS = 50
MAX_BOLTX_PREDICTIONS = 100
MAX_INTERVENTIONS = 50
INTERVENTION_RATE = 0.10
INTERVENTION_TYPES = ["Discount", "Free Shipping", "Payment Reminder", "Cart Recovery"]

ABANDONMENT_FACTORS = [
    "High cart value",
    "Multiple shipping options",
    "Payment method not available",
    "Mobile device",
]

# (factor, min impact, max impact)
PREDICTION_FACTORS: List[Tuple[str, float, float]] = [
    ("Cart Value", 0.10, 0.40),
    ("Device Type", 0.05, 0.30),
    ("Time on Site", 0.10, 0.35),
]

# checked top-down; first threshold the score reaches wins
RISK_THRESHOLDS: List[Tuple[float, str]] = [
    (85.0, "critical"),
    (70.0, "high"),
    (40.0, "medium"),
    (0.0, "low"),
]
# share of sessions in each bucket that end up abandoned
RISK_ABANDONMENT_RATES: Dict[str, float] = {"low": 0.1, "medium": 0.3, "high": 0.6, "critical": 0.9}
INTERVENTION_THRESHOLD = 70.0

RISK_RECOMMENDATIONS: Dict[str, List[str]] = {
    "critical": [
        "Offer an immediate discount",
        "Open live chat assistance",
        "Send cart recovery email",
    ],
    "high": [
        "Consider offering a discount",
        "Add trust indicators",
        "Send payment reminder",
    ],
    "medium": [
        "Simplify checkout process",
        "Highlight free shipping threshold",
    ],
    "low": [
        "Keep default checkout flow",
    ],
}

PERSONALIZATION_PROFILES: List[Tuple[str, int]] = [
    ("First-Time Visitors", 3),
    ("Returning Customers", 5),
    ("High-Value Shoppers", 4),
    ("Mobile Users", 2),
]
PERSONALIZED_SESSION_SHARE = 0.40
ACTIVE_PROFILE_CHANCE = 0.70
BASE_PERSONALIZED_CONVERSION = 10.0

# (name, status, impact)
OPTIMIZATIONS: List[Tuple[str, str, float]] = [
    ("Simplified Checkout Form", "implemented", 0.12),
    ("One-Click Payment", "testing", 0.08),
    ("Mobile Optimization", "planned", 0.15),
    ("Shipping Calculator", "implemented", 0.05),
]
OPTIMIZATION_SPACING_DAYS = 20

# (type, title, description, priority, action, impact)
INSIGHTS: List[Tuple[str, str, str, str, str, float]] = [
    ("conversion", "Mobile checkout conversion is 40% lower than desktop",
     "Consider optimizing mobile checkout experience to improve conversion rates",
     "high", "Optimize mobile checkout", 0.15),
    ("revenue", "Payment method PIX shows highest conversion rate",
     "PIX has 18% conversion rate vs 10% for credit cards",
     "high", "Promote PIX payment option", 0.12),
    ("abandonment", "Shipping step has highest dropoff rate",
     "35% of users abandon at shipping step",
     "medium", "Review shipping options and costs", 0.10),
    ("optimization", "One-click checkout could increase conversions by 25%",
     "Based on similar stores, implementing one-click checkout could significantly improve conversion",
     "medium", "Implement one-click checkout", 0.20),
    ("customer", "Returning customers convert 2x more than new customers",
     "Focus on customer retention strategies",
     "low", "Create customer retention program", 0.08),
]

# ---------- event simulator ----------
MAX_SIMULATED_SESSIONS = 500
MIN_SIMULATED_SESSIONS = 50
EVENTS_PER_SESSION = 12
SUMMARY_SAMPLE_SIZE = 200
FILTER_REDUCTION_FACTOR = 0.3
UNIQUE_SESSION_RATIO = 0.95
TOP_EVENT_TYPES = 10

CHECKOUT_STEPS = ["cart", "profile", "shipping", "payment"]
EVENT_PAYMENT_METHODS = ["Visa", "MasterCard", "PIX", "PayPal"]

DEFAULT_EVENTS_PAGE = 1
DEFAULT_EVENTS_LIMIT = 50
MIN_EVENTS_LIMIT = 10
MAX_EVENTS_LIMIT = 100
