"""
Timeline Optimizer Service
Builds an event run sheet: running order, performer call times,
guest-facing schedule, contingency plans and a staffing summary
"""

import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field
import structlog

from stagehand.models.booking import Booking
from stagehand.models.event import Event
from stagehand.models.performer import PerformerType
from stagehand.models.venue import Venue, VenueType

logger = structlog.get_logger(__name__)

MINUTES_PER_DAY = 24 * 60
VENUE_SETUP_LEAD = 60        # venue setup starts an hour before doors
ENTERTAINMENT_OFFSET = 15    # first act 15 min after doors
CALL_TIME_LEAD = 30          # performers called 30 min before their setup
DEFAULT_MILESTONE_DURATION = 15
LONG_EVENT_MINUTES = 300


class TimelineEvent(BaseModel):
    name: str
    type: str
    date: str
    start_time: str
    end_time: str
    guest_count: int = 0


class TimelineVenue(BaseModel):
    name: str
    type: VenueType = VenueType.INDOOR
    capacity: Optional[int] = None
    setup_access_time: Optional[str] = None
    curfew: Optional[str] = None
    restrictions: List[str] = []


class TimelinePerformer(BaseModel):
    id: str
    name: str
    type: PerformerType = PerformerType.OTHER
    setup_time: int = Field(ge=0)
    performance_time: int = Field(ge=0)
    breakdown_time: int = Field(ge=0)
    safety_distance: Optional[float] = None
    booking_id: Optional[str] = None


class Milestone(BaseModel):
    name: str
    time: str
    duration: Optional[int] = None
    is_flexible: bool = False


class TimelineConstraints(BaseModel):
    breaks_between_acts: int = 10
    simultaneous_performers_max: int = 2
    weather_sensitive: bool = False


class TimelineInput(BaseModel):
    event: TimelineEvent
    venue: TimelineVenue
    performers: List[TimelinePerformer]
    milestones: List[Milestone] = []
    constraints: TimelineConstraints = TimelineConstraints()


def parse_time(time_str: str) -> int:
    """'HH:MM' -> minutes after midnight"""
    hours, minutes = time_str.split(":")
    return int(hours) * 60 + int(minutes)


def format_time(minutes: int) -> str:
    """Minutes (any sign, any size) -> 'HH:MM' on a 24h clock"""
    minutes = int(minutes)
    return f"{(minutes // 60) % 24:02d}:{minutes % 60:02d}"


def _runtime(start: int, end: int) -> int:
    # An end before the start means the event runs past midnight
    return end - start if end > start else end + MINUTES_PER_DAY - start


def _default_order(performers: List[TimelinePerformer]) -> List[TimelinePerformer]:
    # Fire acts go last (after dark), otherwise longer acts first
    return sorted(performers, key=lambda p: (p.type == PerformerType.FIRE, -p.performance_time))


def optimize_performer_order(performers: Iterable[TimelinePerformer], event_type: str = "") -> List[str]:
    """
    Greedy running order: best opener first, best closer last,
    remaining acts in between by how well they hold the middle.

    Returns:
        Performer ids in running order
    """
    scored = []
    for p in performers:
        scored.append({
            "id": p.id,
            "opening": 80 if p.type == PerformerType.INTERACTIVE else 70 if p.type == PerformerType.MUSIC else 50,
            "middle": 90 if p.type == PerformerType.CIRCUS else 85 if p.type == PerformerType.MAGIC else 60,
            "closing": 95 if p.type == PerformerType.FIRE else 80 if p.performance_time > 20 else 60,
        })

    result: List[str] = []
    if not scored:
        return result

    opener = max(scored, key=lambda s: s["opening"])
    result.append(opener["id"])
    remaining = [s for s in scored if s["id"] != opener["id"]]

    closer = max(remaining, key=lambda s: s["closing"]) if remaining else None
    middle = [s for s in remaining if closer is None or s["id"] != closer["id"]]
    for s in sorted(middle, key=lambda s: s["middle"], reverse=True):
        result.append(s["id"])

    if closer is not None:
        result.append(closer["id"])
    return result


def _schedule_item(
    time: int,
    end_time: int,
    item_type: str,
    title: str,
    description: Optional[str] = None,
    performer_id: Optional[str] = None,
    staff_notes: Optional[str] = None,
    guest_facing: bool = True,
) -> Dict[str, Any]:
    return {
        "time": format_time(time),
        "end_time": format_time(end_time),
        "type": item_type,
        "title": title,
        "description": description,
        "performer_id": performer_id,
        "staff_notes": staff_notes,
        "guest_facing": guest_facing,
    }


def generate_timeline(data: TimelineInput, order: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Generate an event timeline

    Args:
        data: Event, venue, performers, milestones and constraints
        order: Optional running order as performer ids; performers not
            listed keep the default order after the listed ones

    Returns:
        Dict with schedule, performer_call_times, guest_experience,
        contingency_plans and summary
    """
    event_start = parse_time(data.event.start_time)
    event_end = parse_time(data.event.end_time)
    total_runtime = _runtime(event_start, event_end)
    break_duration = data.constraints.breaks_between_acts

    performers = _default_order(data.performers)
    if order:
        rank = {performer_id: i for i, performer_id in enumerate(order)}
        performers = sorted(performers, key=lambda p: rank.get(p.id, len(rank)))

    crosses_midnight = event_end <= event_start

    # (start minute, item); minutes keep counting past midnight so the sort holds
    timed: List[Tuple[int, Dict[str, Any]]] = []
    timed.append((
        event_start - VENUE_SETUP_LEAD,
        _schedule_item(
            event_start - VENUE_SETUP_LEAD,
            event_start,
            "setup",
            "Venue setup and sound check",
            description="All vendors and performers setup",
            staff_notes="Confirm all performers have arrived",
            guest_facing=False,
        ),
    ))

    for milestone in data.milestones:
        start = parse_time(milestone.time)
        if crosses_midnight and start <= event_end:
            start += MINUTES_PER_DAY
        timed.append((start, _schedule_item(
            start,
            start + (milestone.duration or DEFAULT_MILESTONE_DURATION),
            "milestone",
            milestone.name,
        )))

    call_times: List[Dict[str, Any]] = []
    cursor = event_start + ENTERTAINMENT_OFFSET
    last_load_out = cursor

    for performer in performers:
        setup_start = cursor - performer.setup_time
        performance_end = cursor + performer.performance_time
        load_out = performance_end + performer.breakdown_time

        staff_notes = None
        if performer.safety_distance:
            staff_notes = f"Maintain {performer.safety_distance:g}m safety distance"

        timed.append((cursor, _schedule_item(
            cursor,
            performance_end,
            "performance",
            performer.name,
            description=f"{performer.type.value} performance",
            performer_id=performer.id,
            staff_notes=staff_notes,
        )))
        call_times.append({
            "performer_id": performer.id,
            "performer_name": performer.name,
            "booking_id": performer.booking_id,
            "call_time": format_time(setup_start - CALL_TIME_LEAD),
            "setup_start": format_time(setup_start),
            "performance_start": format_time(cursor),
            "performance_end": format_time(performance_end),
            "load_out": format_time(load_out),
        })

        last_load_out = max(last_load_out, load_out)
        cursor = performance_end + break_duration

    schedule = [item for _, item in sorted(timed, key=lambda pair: pair[0])]

    summary = {
        "total_runtime": total_runtime,
        "number_of_performances": len(performers),
        "setup_time_required": sum(p.setup_time for p in performers) + VENUE_SETUP_LEAD,
        "peak_staff_needed": math.ceil(len(performers) / 2) + 2,
        "potential_issues": _potential_issues(data, event_start, total_runtime, last_load_out),
    }

    logger.info(
        "timeline_generated",
        event_name=data.event.name,
        performances=len(performers),
        issues=len(summary["potential_issues"]),
    )

    return {
        "schedule": schedule,
        "performer_call_times": call_times,
        "guest_experience": {
            "peak_moments": [
                {
                    "time": format_time(event_start + math.floor(total_runtime * 0.3 + 0.5)),
                    "description": "First major performance peak",
                },
                {
                    "time": format_time(event_start + math.floor(total_runtime * 0.7 + 0.5)),
                    "description": "Climactic entertainment moment",
                },
            ],
            "flow_description": (
                "Gradual build from welcoming entertainment to peak excitement, "
                "with recovery moments between acts"
            ),
            "energy_arc": "Start medium, build, peak at 70%, sustain, memorable finale",
        },
        "contingency_plans": [
            {
                "scenario": "Performer no-show",
                "trigger": "Performer not present 30 min before call time",
                "plan": "Extend adjacent acts, add roaming entertainment",
                "affected_items": ["Schedule adjustment", "Guest communication"],
            },
            {
                "scenario": "Weather deterioration (outdoor)",
                "trigger": "Rain or high winds detected",
                "plan": "Move to backup indoor location or covered area",
                "affected_items": ["All outdoor performances", "Guest seating"],
            },
            {
                "scenario": "Technical failure",
                "trigger": "Sound or lighting malfunction",
                "plan": "Switch to acoustic/unplugged acts while resolving",
                "affected_items": ["Power-dependent performances"],
            },
        ],
        "summary": summary,
    }


def _potential_issues(data: TimelineInput, event_start: int, total_runtime: int, last_load_out: int) -> List[str]:
    issues = []
    has_fire = any(p.type == PerformerType.FIRE for p in data.performers)
    if has_fire and data.venue.type == VenueType.INDOOR:
        issues.append("Fire act in indoor venue - verify safety clearance")
    if total_runtime > LONG_EVENT_MINUTES:
        issues.append("Long event - ensure staff rotation")
    if data.venue.curfew and data.performers:
        curfew = parse_time(data.venue.curfew)
        if curfew <= event_start:
            curfew += MINUTES_PER_DAY
        if last_load_out > curfew:
            issues.append(f"Load-out at {format_time(last_load_out)} runs past venue curfew {data.venue.curfew}")
    return issues


def build_timeline_input(
    event: Event,
    venue: Optional[Venue],
    bookings: List[Booking],
    milestones: Optional[List[Milestone]] = None,
    constraints: Optional[TimelineConstraints] = None,
) -> TimelineInput:
    """
    Assemble optimizer input from stored rows

    Args:
        event: The event being planned
        venue: Catalog venue, or None when the event uses a custom location
        bookings: Active bookings; each call time carries its booking_id
    """
    if venue is not None:
        timeline_venue = TimelineVenue(
            name=venue.name,
            type=venue.type,
            capacity=venue.capacity,
            setup_access_time=venue.setup_access_time,
            curfew=venue.curfew,
            restrictions=venue.restrictions or [],
        )
    else:
        timeline_venue = TimelineVenue(name=event.venue_custom or "TBD")

    return TimelineInput(
        event=TimelineEvent(
            name=event.name,
            type=event.type.value,
            date=event.date.date().isoformat(),
            start_time=event.start_time,
            end_time=event.end_time,
            guest_count=event.guest_count or 0,
        ),
        venue=timeline_venue,
        performers=[
            TimelinePerformer(
                id=str(booking.performer.id),
                name=booking.performer.display_name,
                type=booking.performer.type,
                setup_time=booking.performer.setup_time,
                performance_time=booking.performer.performance_time,
                breakdown_time=booking.performer.breakdown_time,
                safety_distance=booking.performer.safety_distance(),
                booking_id=str(booking.id),
            )
            for booking in bookings
        ],
        milestones=milestones or [],
        constraints=constraints or TimelineConstraints(),
    )
