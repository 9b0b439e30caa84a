"""Tests for data models."""

from datetime import datetime, timedelta, timezone

import pytest

from gymtopia_stats.models.limits import (
    DEFAULT_LIMIT_TABLE,
    ExperienceLevel,
    LimitTier,
    MuscleCategory,
    Range,
    ValidationResult,
)
from gymtopia_stats.models.sessions import (
    ExerciseEntry,
    SessionRecord,
    SetRecord,
    coerce_number,
    parse_timestamp,
)
from gymtopia_stats.models.statistics import StatisticsSnapshot, Weekday


class TestParseTimestamp:
    """Tests for parse_timestamp function."""

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-03-15T09:00:00Z") == datetime(
            2024, 3, 15, 9, tzinfo=timezone.utc
        )

    def test_offset_converted_to_utc(self):
        parsed = parse_timestamp("2024-03-15T09:00:00+09:00")
        assert parsed == datetime(2024, 3, 15, 0, tzinfo=timezone.utc)
        assert parsed.tzinfo == timezone.utc

    def test_naive_assumed_utc(self):
        assert parse_timestamp(datetime(2024, 1, 1)).tzinfo == timezone.utc

    def test_epoch_seconds(self):
        assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [1e20, -1e20])
    def test_epoch_out_of_range(self, value):
        with pytest.raises(ValueError, match="Cannot parse timestamp"):
            parse_timestamp(value)

    @pytest.mark.parametrize("value", ["yesterday", "", None, True, []])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_timestamp(value)


class TestSetRecord:
    """Tests for SetRecord model."""

    @pytest.mark.parametrize(
        "value, expected",
        [(60, 60.0), ("62.5", 62.5), (" 8 ", 8.0), (None, None), ("heavy", None),
         (True, None), (float("nan"), None), ([1], None)],
    )
    def test_coerce_number(self, value, expected):
        assert coerce_number(value) == expected

    def test_from_dict_tolerates_garbage(self):
        record = SetRecord.from_dict({"weight": "abc", "reps": 10})
        assert record.weight is None
        assert record.reps == 10
        assert record.volume == 0

    def test_from_non_dict(self):
        assert SetRecord.from_dict("5x5") == SetRecord()

    def test_volume(self):
        assert SetRecord(weight=60, reps=10).volume == 600
        assert SetRecord(weight=-60, reps=10).volume == 0

    @pytest.mark.parametrize(
        "weight, reps",
        [(float("nan"), 10), (60, float("inf")), (True, 10), ("60", 10)],
    )
    def test_volume_ignores_unusable_values(self, weight, reps):
        assert SetRecord(weight=weight, reps=reps).volume == 0


class TestSessionRecord:
    """Tests for SessionRecord model."""

    def test_from_dict(self):
        session = SessionRecord.from_dict(
            {
                "id": 42,
                "user_id": "u1",
                "gym_id": 7,
                "started_at": "2024-03-15T09:00:00Z",
                "ended_at": "2024-03-15T10:15:00Z",
                "mood": "good",
            }
        )
        assert session.id == "42"
        assert session.gym_id == "7"
        assert session.duration_minutes == 75
        assert session.is_timed
        assert session.mood == "good"

    def test_missing_started_at(self):
        with pytest.raises(ValueError):
            SessionRecord.from_dict({"id": "x", "started_at": None})

    def test_missing_id(self):
        with pytest.raises(ValueError):
            SessionRecord.from_dict({"started_at": "2024-03-15T09:00:00Z"})

    def test_unparseable_end_is_dropped(self):
        session = SessionRecord.from_dict(
            {"id": "x", "started_at": "2024-03-15T09:00:00Z", "ended_at": "soon"}
        )
        assert session.ended_at is None
        assert not session.is_timed

    def test_inverted_duration_is_zero(self):
        start = datetime(2024, 3, 15, 9, tzinfo=timezone.utc)
        session = SessionRecord(id="x", started_at=start, ended_at=start - timedelta(minutes=5))
        assert session.duration_minutes == 0
        assert not session.is_timed

    def test_duration_mixes_naive_and_aware(self):
        start = datetime(2024, 3, 15, 9)
        end = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)
        session = SessionRecord(id="x", started_at=start, ended_at=end)
        assert session.is_timed
        assert session.duration_minutes == 90

    def test_round_trip(self):
        start = datetime(2024, 3, 15, 9, tzinfo=timezone.utc)
        session = SessionRecord(id="x", started_at=start, gym_id="g")
        assert SessionRecord.from_dict(session.to_dict()) == session


class TestExerciseEntry:
    """Tests for ExerciseEntry model."""

    def test_from_dict(self):
        entry = ExerciseEntry.from_dict(
            {
                "session_id": "s1",
                "exercise_name": "Squat",
                "muscle_group": "legs",
                "sets": [{"weight": 100, "reps": 5}, {"reps": 5}, "junk"],
                "order_index": 2,
            }
        )
        assert entry.session_id == "s1"
        assert len(entry.sets) == 3
        assert entry.volume == 500
        assert entry.order_index == 2

    def test_sets_not_a_list(self):
        entry = ExerciseEntry.from_dict({"session_id": "s1", "sets": "3x10"})
        assert entry.sets == []
        assert entry.exercise_name == ""

    @pytest.mark.parametrize("raw, expected", [("3", 3), (2.0, 2), ("first", 0), (None, 0)])
    def test_order_index_is_int(self, raw, expected):
        entry = ExerciseEntry.from_dict({"session_id": "s1", "order_index": raw})
        assert entry.order_index == expected
        assert isinstance(entry.order_index, int)

    def test_requires_session(self):
        with pytest.raises(ValueError):
            ExerciseEntry.from_dict({"exercise_name": "Squat"})


class TestLimitProfiles:
    """Tests for the built-in limit table."""

    def test_exercise_tier(self):
        profile, tier = DEFAULT_LIMIT_TABLE.resolve_with_tier("Bench Press", "back")
        assert tier is LimitTier.EXERCISE
        assert profile.max_weight == 300
        assert profile.advanced_weight_ceiling == 200

    def test_category_tier_accepts_enum(self):
        profile, tier = DEFAULT_LIMIT_TABLE.resolve_with_tier("Leg Press", MuscleCategory.LEGS)
        assert tier is LimitTier.CATEGORY
        assert profile.max_weight == 500

    def test_fallback_tier(self):
        profile, tier = DEFAULT_LIMIT_TABLE.resolve_with_tier(None, None)
        assert tier is LimitTier.FALLBACK
        assert profile is DEFAULT_LIMIT_TABLE.categories["chest"]

    def test_every_category_has_profile(self):
        for category in MuscleCategory:
            assert DEFAULT_LIMIT_TABLE.resolve_with_tier("x", category.value)[1] is LimitTier.CATEGORY

    def test_typical_bands_per_level(self):
        profile, _ = DEFAULT_LIMIT_TABLE.resolve_with_tier("Squat", None)
        assert profile.typical_weight[ExperienceLevel.BEGINNER] == Range(30, 80)
        assert profile.advanced_weight_ceiling == 300


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_warnings_do_not_invalidate(self):
        result = ValidationResult()
        result.warn("check this")
        assert result.is_valid

    def test_errors_invalidate(self):
        result = ValidationResult()
        result.fail("nope")
        assert not result.is_valid
        assert result.to_dict() == {"isValid": False, "warnings": [], "errors": ["nope"]}


class TestStatisticsModels:
    """Tests for statistics models."""

    def test_snapshot_keys(self):
        assert list(StatisticsSnapshot().to_dict()) == [
            "totalVisits",
            "weeklyVisits",
            "monthlyVisits",
            "yearlyVisits",
            "currentStreak",
            "longestStreak",
            "totalWeight",
            "totalDurationHours",
            "avgDurationMinutes",
        ]

    @pytest.mark.parametrize(
        "value, expected",
        [("sunday", Weekday.SUNDAY), ("MON", Weekday.MONDAY), (2, Weekday.WEDNESDAY),
         (Weekday.FRIDAY, Weekday.FRIDAY)],
    )
    def test_weekday_parse(self, value, expected):
        assert Weekday.parse(value) is expected

    def test_weekday_parse_invalid(self):
        with pytest.raises(ValueError):
            Weekday.parse("someday")
