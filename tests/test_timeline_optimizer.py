"""
Unit tests for the timeline optimizer
"""

import pytest
from structlog.testing import capture_logs

from stagehand.models import PerformerType, VenueType
from stagehand.services.timeline_optimizer import (
    Milestone,
    TimelineConstraints,
    TimelineEvent,
    TimelineInput,
    TimelinePerformer,
    TimelineVenue,
    format_time,
    generate_timeline,
    optimize_performer_order,
    parse_time,
)


def _performer(pid, type, setup=20, perf=30, breakdown=10, **kwargs):
    return TimelinePerformer(
        id=pid,
        name=pid.title(),
        type=type,
        setup_time=setup,
        performance_time=perf,
        breakdown_time=breakdown,
        **kwargs,
    )


def _input(performers, start="19:00", end="23:00", venue_type=VenueType.INDOOR, curfew=None, **kwargs):
    return TimelineInput(
        event=TimelineEvent(name="Gala", type="corporate", date="2026-12-05", start_time=start, end_time=end),
        venue=TimelineVenue(name="The Foundry", type=venue_type, curfew=curfew),
        performers=performers,
        **kwargs,
    )


@pytest.fixture
def magic_and_fire():
    return [
        _performer("blaze", PerformerType.FIRE, setup=30, perf=20, breakdown=15, safety_distance=3),
        _performer("marvel", PerformerType.MAGIC, setup=20, perf=40, breakdown=10),
    ]


class TestTimeHelpers:

    def test_parse_time(self):
        assert parse_time("00:00") == 0
        assert parse_time("19:45") == 1185

    @pytest.mark.parametrize("minutes, expected", [
        (0, "00:00"),
        (1185, "19:45"),
        (1440, "00:00"),
        (1530, "01:30"),
        (-30, "23:30"),
    ])
    def test_format_time_wraps_the_clock(self, minutes, expected):
        assert format_time(minutes) == expected


class TestGenerateTimeline:

    def test_call_times(self, magic_and_fire):
        result = generate_timeline(_input(magic_and_fire))
        calls = {c["performer_id"]: c for c in result["performer_call_times"]}

        # Magic goes first, fire closes
        assert [c["performer_id"] for c in result["performer_call_times"]] == ["marvel", "blaze"]
        assert calls["marvel"] == {
            "performer_id": "marvel",
            "performer_name": "Marvel",
            "booking_id": None,
            "call_time": "18:25",
            "setup_start": "18:55",
            "performance_start": "19:15",
            "performance_end": "19:55",
            "load_out": "20:05",
        }
        assert calls["blaze"]["call_time"] == "19:05"
        assert calls["blaze"]["setup_start"] == "19:35"
        assert calls["blaze"]["performance_start"] == "20:05"
        assert calls["blaze"]["performance_end"] == "20:25"
        assert calls["blaze"]["load_out"] == "20:40"

    def test_schedule_is_sorted_and_marks_setup(self, magic_and_fire):
        result = generate_timeline(_input(
            magic_and_fire,
            milestones=[Milestone(name="Welcome speech", time="19:05")],
        ))
        schedule = result["schedule"]

        assert [item["time"] for item in schedule] == ["18:00", "19:05", "19:15", "20:05"]
        setup, speech = schedule[0], schedule[1]
        assert setup["type"] == "setup"
        assert setup["guest_facing"] is False
        assert speech["type"] == "milestone"
        assert speech["end_time"] == "19:20"
        assert schedule[3]["staff_notes"] == "Maintain 3m safety distance"
        assert schedule[2]["staff_notes"] is None

    def test_breaks_between_acts(self, magic_and_fire):
        result = generate_timeline(_input(
            magic_and_fire,
            constraints=TimelineConstraints(breaks_between_acts=25),
        ))
        assert result["performer_call_times"][1]["performance_start"] == "20:20"

    def test_summary(self, magic_and_fire):
        summary = generate_timeline(_input(magic_and_fire))["summary"]

        assert summary["total_runtime"] == 240
        assert summary["number_of_performances"] == 2
        assert summary["setup_time_required"] == 110
        assert summary["peak_staff_needed"] == 3
        assert summary["potential_issues"] == ["Fire act in indoor venue - verify safety clearance"]

    def test_outdoor_fire_and_long_event(self, magic_and_fire):
        summary = generate_timeline(_input(
            magic_and_fire, start="18:00", end="00:00", venue_type=VenueType.OUTDOOR,
        ))["summary"]
        assert summary["total_runtime"] == 360
        assert summary["potential_issues"] == ["Long event - ensure staff rotation"]

    def test_curfew_warning(self, magic_and_fire):
        issues = generate_timeline(_input(magic_and_fire, curfew="20:00"))["summary"]["potential_issues"]
        assert "Load-out at 20:40 runs past venue curfew 20:00" in issues

    def test_event_past_midnight(self):
        result = generate_timeline(_input(
            [_performer("dj", PerformerType.MUSIC, setup=45, perf=90)],
            start="22:30",
            end="02:30",
        ))
        assert result["summary"]["total_runtime"] == 240
        assert result["schedule"][0]["time"] == "21:30"
        call = result["performer_call_times"][0]
        assert call["call_time"] == "21:30"
        assert call["performance_end"] == "00:15"

    def test_acts_after_midnight_stay_in_running_order(self):
        result = generate_timeline(_input(
            [_performer(pid, PerformerType.MUSIC, perf=60) for pid in ("opener", "headliner", "closer")],
            start="22:30",
            end="03:00",
            milestones=[Milestone(name="Midnight toast", time="00:00")],
        ))
        schedule = result["schedule"]

        assert schedule[0]["type"] == "setup"
        assert [item["time"] for item in schedule] == ["21:30", "22:45", "23:55", "00:00", "01:05"]
        assert [item["title"] for item in schedule[1:]] == ["Opener", "Headliner", "Midnight toast", "Closer"]
        assert schedule[-1]["end_time"] == "02:05"

    def test_logs_event_name(self, magic_and_fire):
        with capture_logs() as logs:
            generate_timeline(_input(magic_and_fire))

        entry = next(log for log in logs if log["event"] == "timeline_generated")
        assert entry["event_name"] == "Gala"
        assert entry["performances"] == 2
        assert entry["issues"] == 1

    def test_peak_moments_and_contingencies(self, magic_and_fire):
        result = generate_timeline(_input(magic_and_fire))
        peaks = result["guest_experience"]["peak_moments"]
        assert [p["time"] for p in peaks] == ["20:12", "21:48"]
        assert [c["scenario"] for c in result["contingency_plans"]] == [
            "Performer no-show",
            "Weather deterioration (outdoor)",
            "Technical failure",
        ]

    def test_no_performers(self):
        result = generate_timeline(_input([]))
        assert result["performer_call_times"] == []
        assert result["summary"]["peak_staff_needed"] == 2
        assert result["summary"]["setup_time_required"] == 60

    def test_explicit_order(self, magic_and_fire):
        result = generate_timeline(_input(magic_and_fire), order=["blaze", "marvel"])
        assert [c["performer_id"] for c in result["performer_call_times"]] == ["blaze", "marvel"]
        assert result["performer_call_times"][0]["performance_start"] == "19:15"


class TestOptimizePerformerOrder:

    def test_opener_middle_closer(self):
        performers = [
            _performer("blaze", PerformerType.FIRE),
            _performer("marvel", PerformerType.MAGIC),
            _performer("strings", PerformerType.MUSIC),
            _performer("jester", PerformerType.INTERACTIVE),
        ]
        assert optimize_performer_order(performers, "gala") == ["jester", "marvel", "strings", "blaze"]

    def test_long_act_closes_without_fire(self):
        performers = [
            _performer("strings", PerformerType.MUSIC, perf=15),
            _performer("troupe", PerformerType.CIRCUS, perf=45),
            _performer("funny", PerformerType.COMEDY, perf=10),
        ]
        assert optimize_performer_order(performers) == ["strings", "funny", "troupe"]

    def test_single_and_empty(self):
        assert optimize_performer_order([_performer("solo", PerformerType.DANCE)]) == ["solo"]
        assert optimize_performer_order([]) == []
