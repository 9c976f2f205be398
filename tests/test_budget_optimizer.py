"""
Unit tests for the budget optimizer
"""

import pytest
from decimal import Decimal
from structlog.testing import capture_logs

from stagehand.models import EventType
from stagehand.services.budget_optimizer import category_shares, optimize_budget


def _by_category(plan):
    return {a["category"]: a for a in plan["allocation"]}


def test_corporate_allocation():
    plan = optimize_budget(Decimal("100000"), EventType.CORPORATE, 100)
    allocation = _by_category(plan)

    assert {name: a["allocated"] for name, a in allocation.items()} == {
        "Venue": Decimal("22500.00"),
        "Catering": Decimal("27000.00"),
        "Entertainment": Decimal("18000.00"),
        "Technology": Decimal("13500.00"),
        "Decor": Decimal("9000.00"),
    }
    assert allocation["Venue"]["percentage"] == Decimal("25.00")

    summary = plan["summary"]
    assert summary["total_allocated"] == Decimal("90000.00")
    assert summary["remaining_buffer"] == Decimal("10000.00")
    assert summary["cost_per_guest"] == Decimal("900.00")


def test_line_items():
    allocation = _by_category(optimize_budget(Decimal("100000"), EventType.CORPORATE, 100))

    venue_items = allocation["Venue"]["items"]
    assert venue_items == [
        {"name": "Venue rental", "estimated_cost": Decimal("15750.00"), "priority": "essential", "notes": "Main venue space"},
        {"name": "Setup & breakdown", "estimated_cost": Decimal("6750.00"), "priority": "essential", "notes": None},
    ]
    assert [i["name"] for i in allocation["Entertainment"]["items"]] == ["Main performers", "Background entertainment"]
    assert [i["name"] for i in allocation["Catering"]["items"]][-1] == "Bar staff & setup"
    decor = {i["name"]: i for i in allocation["Decor"]["items"]}
    assert decor["Signage & branding"]["priority"] == "optional"
    assert decor["Centerpieces"]["estimated_cost"] == Decimal("2700.00")
    assert decor["Floral arrangements"]["estimated_cost"] == Decimal("4500.00")


@pytest.mark.parametrize("event_type, category, share", [
    (EventType.WEDDING, "catering", Decimal("0.35")),
    (EventType.WEDDING, "decor", Decimal("0.20")),
    (EventType.FESTIVAL, "entertainment", Decimal("0.40")),
    (EventType.GALA, "decor", Decimal("0.15")),
    (EventType.GALA, "technology", Decimal("0.10")),
])
def test_event_type_profiles(event_type, category, share):
    assert category_shares(event_type)[category] == share


@pytest.mark.parametrize("event_type", list(EventType))
def test_shares_add_up(event_type):
    assert sum(category_shares(event_type).values()) == Decimal("1.00")


def test_other_types_use_corporate_profile():
    assert category_shares(EventType.CONCERT) == category_shares(EventType.CORPORATE)
    assert category_shares(EventType.PRIVATE_PARTY) == category_shares(EventType.CORPORATE)


def test_amounts_are_rounded_to_cents():
    plan = optimize_budget(Decimal("1000.01"), EventType.FESTIVAL, 3)
    for allocation in plan["allocation"]:
        assert allocation["allocated"] == allocation["allocated"].quantize(Decimal("0.01"))
    assert plan["summary"]["cost_per_guest"] == Decimal("300.00")


def test_category_order_is_fixed():
    expected = ["Venue", "Entertainment", "Catering", "Technology", "Decor"]
    for event_type in (EventType.CORPORATE, EventType.WEDDING, EventType.FESTIVAL, EventType.GALA):
        plan = optimize_budget(Decimal("10000"), event_type, 10)
        assert [a["category"] for a in plan["allocation"]] == expected


def test_recommendations_and_alternatives():
    plan = optimize_budget(Decimal("50000"), EventType.WEDDING, 80)

    assert [(r["category"], r["potential_savings"]) for r in plan["recommendations"]] == [
        ("Entertainment", Decimal("2500.00")),
        ("Catering", Decimal("4000.00")),
        ("Technology", Decimal("1500.00")),
    ]
    assert plan["recommendations"][0]["suggestion"] == "Book performers 3+ months in advance for better rates"

    premium, luxury = plan["alternatives"]
    assert premium["scenario"] == "Premium Entertainment Focus"
    assert premium["changes"][0] == "Increase entertainment budget by 10%"
    assert premium["new_total"] == Decimal("50000.00")
    assert luxury["scenario"] == "Luxury Experience"
    assert luxury["new_total"] == Decimal("60000.00")


def test_logs_event_name():
    with capture_logs() as logs:
        optimize_budget(Decimal("20000"), EventType.GALA, 100, event_name="Winter Gala")

    entry = next(log for log in logs if log["event"] == "budget_plan_generated")
    assert entry["event_name"] == "Winter Gala"
    assert entry["event_type"] == "gala"


@pytest.mark.parametrize("total_budget, guest_count", [
    (Decimal("0"), 10),
    (Decimal("-5"), 10),
    (Decimal("1000"), 0),
])
def test_invalid_input(total_budget, guest_count):
    with pytest.raises(ValueError):
        optimize_budget(total_budget, EventType.GALA, guest_count)
