"""
Budget Optimizer Service
Splits an event budget into categories and line items by event type,
keeps a contingency buffer and suggests savings and alternative plans
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Tuple

import structlog

from stagehand.models.event import EventType

logger = structlog.get_logger(__name__)

CENT = Decimal("0.01")
BUFFER_RATE = Decimal("0.10")
LUXURY_FACTOR = Decimal("1.2")

# Category shares of the allocatable budget (total minus buffer)
CATEGORY_SHARES: Dict[EventType, Dict[str, Decimal]] = {
    EventType.CORPORATE: {
        "venue": Decimal("0.25"),
        "catering": Decimal("0.30"),
        "entertainment": Decimal("0.20"),
        "technology": Decimal("0.15"),
        "decor": Decimal("0.10"),
    },
    EventType.WEDDING: {
        "venue": Decimal("0.20"),
        "catering": Decimal("0.35"),
        "entertainment": Decimal("0.15"),
        "technology": Decimal("0.10"),
        "decor": Decimal("0.20"),
    },
    EventType.FESTIVAL: {
        "venue": Decimal("0.15"),
        "entertainment": Decimal("0.40"),
        "catering": Decimal("0.20"),
        "technology": Decimal("0.15"),
        "decor": Decimal("0.10"),
    },
    EventType.GALA: {
        "venue": Decimal("0.25"),
        "catering": Decimal("0.30"),
        "entertainment": Decimal("0.20"),
        "decor": Decimal("0.15"),
        "technology": Decimal("0.10"),
    },
}

# Plans always list categories in this order
CATEGORY_ORDER = ("venue", "entertainment", "catering", "technology", "decor")

CATEGORY_NAMES = {
    "venue": "Venue",
    "entertainment": "Entertainment",
    "catering": "Catering",
    "technology": "Technology",
    "decor": "Decor",
}

# (item, share of category, priority, notes)
CATEGORY_ITEMS: Dict[str, List[Tuple[str, Decimal, str, Optional[str]]]] = {
    "venue": [
        ("Venue rental", Decimal("0.7"), "essential", "Main venue space"),
        ("Setup & breakdown", Decimal("0.3"), "essential", None),
    ],
    "entertainment": [
        ("Main performers", Decimal("0.7"), "essential", None),
        ("Background entertainment", Decimal("0.3"), "recommended", None),
    ],
    "catering": [
        ("Food service", Decimal("0.6"), "essential", None),
        ("Beverage service", Decimal("0.3"), "essential", None),
        ("Bar staff & setup", Decimal("0.1"), "recommended", None),
    ],
    "technology": [
        ("Sound system", Decimal("0.4"), "essential", None),
        ("Lighting", Decimal("0.4"), "recommended", None),
        ("AV technician", Decimal("0.2"), "recommended", None),
    ],
    "decor": [
        ("Floral arrangements", Decimal("0.5"), "recommended", None),
        ("Centerpieces", Decimal("0.3"), "optional", None),
        ("Signage & branding", Decimal("0.2"), "optional", None),
    ],
}

# (category, suggestion, share of total budget saved)
RECOMMENDATIONS: List[Tuple[str, str, Decimal]] = [
    ("Entertainment", "Book performers 3+ months in advance for better rates", Decimal("0.05")),
    ("Catering", "Consider buffet style for 150+ guests to reduce service costs", Decimal("0.08")),
    ("Technology", "Bundle sound and lighting with single vendor for discount", Decimal("0.03")),
]


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def category_shares(event_type: EventType) -> Dict[str, Decimal]:
    """Shares for the event type; types without their own profile use the corporate one"""
    return CATEGORY_SHARES.get(event_type, CATEGORY_SHARES[EventType.CORPORATE])


def optimize_budget(
    total_budget: Decimal,
    event_type: EventType,
    guest_count: int,
    event_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a budget plan

    Args:
        total_budget: Total money available, must be positive
        event_type: Selects the category split
        guest_count: Number of guests, must be positive
        event_name: Only used for logging

    Returns:
        Dict with allocation, summary, recommendations and alternatives

    Raises:
        ValueError: If total_budget or guest_count is not positive
    """
    total_budget = Decimal(total_budget)
    if total_budget <= 0:
        raise ValueError("total_budget must be greater than zero")
    if guest_count is None or guest_count <= 0:
        raise ValueError("guest_count must be greater than zero")

    allocatable = total_budget * (1 - BUFFER_RATE)
    allocation = []

    shares = category_shares(event_type)
    for key in CATEGORY_ORDER:
        share = shares[key]
        allocated = _money(allocatable * share)
        allocation.append({
            "category": CATEGORY_NAMES[key],
            "allocated": allocated,
            "percentage": _money(share * 100),
            "items": [
                {
                    "name": name,
                    "estimated_cost": _money(allocated * item_share),
                    "priority": priority,
                    "notes": notes,
                }
                for name, item_share, priority, notes in CATEGORY_ITEMS[key]
            ],
        })

    total_allocated = sum((a["allocated"] for a in allocation), Decimal("0.00"))

    logger.info(
        "budget_plan_generated",
        event_name=event_name,
        event_type=event_type.value,
        total_budget=str(total_budget),
        total_allocated=str(total_allocated),
    )

    return {
        "allocation": allocation,
        "summary": {
            "total_budget": _money(total_budget),
            "total_allocated": total_allocated,
            "remaining_buffer": _money(total_budget - total_allocated),
            "cost_per_guest": _money(total_allocated / guest_count),
        },
        "recommendations": [
            {
                "category": category,
                "suggestion": suggestion,
                "potential_savings": _money(total_budget * rate),
            }
            for category, suggestion, rate in RECOMMENDATIONS
        ],
        "alternatives": [
            {
                "scenario": "Premium Entertainment Focus",
                "changes": [
                    "Increase entertainment budget by 10%",
                    "Reduce decor by 5%",
                    "Optimize catering to buffet style",
                ],
                "new_total": _money(total_budget),
            },
            {
                "scenario": "Luxury Experience",
                "changes": [
                    "Upgrade venue tier",
                    "Premium catering with plated service",
                    "Extended entertainment lineup",
                ],
                "new_total": _money(total_budget * LUXURY_FACTOR),
            },
        ],
    }
