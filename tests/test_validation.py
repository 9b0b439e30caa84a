"""Tests for exercise validation."""

import math

import pytest

from gymtopia_stats.models.limits import (
    CATEGORY_LIMITS,
    ExerciseLimitProfile,
    ExperienceLevel,
    LimitTable,
    Range,
)
from gymtopia_stats.services.validation import validate_cardio, validate_exercise


class TestValidateExercise:
    """Tests for validate_exercise function."""

    def test_typical_entry_is_clean(self):
        """Test an ordinary bench press set passes silently."""
        result = validate_exercise("Bench Press", "chest", 80, 8, 4)
        assert result.is_valid
        assert result.warnings == []
        assert result.errors == []

    def test_weight_over_hard_maximum(self):
        """Test a 350kg bench press is rejected."""
        result = validate_exercise("Bench Press", "chest", 350, 1, 1)
        assert not result.is_valid
        assert len(result.errors) == 1
        assert "300kg" in result.errors[0]

    def test_weight_over_advanced_band(self):
        """Test a 250kg bench press warns but is accepted."""
        result = validate_exercise("Bench Press", "chest", 250, 1, 1)
        assert result.is_valid
        assert len(result.warnings) == 1
        assert result.errors == []

    def test_volume_warning_without_field_errors(self):
        """Test 90kg x 12 reps x 10 sets trips only the volume check."""
        result = validate_exercise("Bench Press", "chest", 90, 12, 10)
        assert result.is_valid
        assert result.errors == []
        assert any("10800" in w for w in result.warnings)

    def test_reps_error_and_warning(self):
        """Test bench press reps: 20 warns, 31 fails."""
        warned = validate_exercise("Bench Press", "chest", 40, 20, 1)
        assert warned.is_valid
        assert len(warned.warnings) == 1

        failed = validate_exercise("Bench Press", "chest", 40, 31, 1)
        assert not failed.is_valid
        assert len(failed.errors) == 1

    def test_sets_warning_is_flat_threshold(self):
        """Test 11 sets warns for a category whose hard limit is 20."""
        result = validate_exercise("Cable Fly", "chest", 10, 10, 11)
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_sets_over_exercise_maximum(self):
        """Test deadlift sets are capped at 8."""
        result = validate_exercise("Deadlift", "back", 100, 5, 9)
        assert not result.is_valid
        assert any("8" in e for e in result.errors)

    def test_all_rules_evaluated(self):
        """Test one entry can fail every field at once."""
        result = validate_exercise("Bench Press", "chest", 400, 40, 12)
        assert not result.is_valid
        assert len(result.errors) == 3
        # volume warning still reported
        assert len(result.warnings) == 1

    def test_category_fallback(self):
        """Test an unknown name uses its category's profile."""
        # 450kg is fine for legs (max 500) but not for the chest fallback (max 300)
        result = validate_exercise("Hack Squat", "legs", 450, 1, 1)
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_unknown_category_falls_back_to_chest(self):
        result = validate_exercise("Mystery Lift", "wings", 310, 1, 1)
        assert not result.is_valid

    def test_missing_category_falls_back(self):
        result = validate_exercise("Mystery Lift", None, 250, 1, 1)
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_japanese_exercise_name(self):
        """Test the Japanese picker names resolve to the same limits."""
        result = validate_exercise("デッドリフト", "back", 460, 1, 1)
        assert not result.is_valid

    def test_injected_limit_table(self):
        """Test a custom table replaces the built-in limits."""
        tiny = ExerciseLimitProfile(
            max_weight=10,
            typical_weight={level: Range(0, 5) for level in ExperienceLevel},
            max_reps=5,
            typical_reps=Range(1, 3),
            max_sets=2,
        )
        table = LimitTable(exercises={}, categories={"rehab": tiny}, fallback_category="rehab")
        result = validate_exercise("Band Pull", "rehab", 11, 1, 1, limits=table)
        assert not result.is_valid

    def test_never_raises_on_junk(self):
        """Test non-numeric values are skipped rather than raising."""
        result = validate_exercise("Bench Press", "chest", None, "ten", 3)
        assert result.is_valid

    @pytest.mark.parametrize("weight", [math.nan, math.inf, -math.inf])
    def test_non_finite_weight_warns(self, weight):
        """Test NaN and infinity are flagged instead of passing silently."""
        result = validate_exercise("Bench Press", "chest", weight, 10, 3)
        assert result.is_valid
        assert result.warnings == ["Weight is not a finite number. Please verify the input."]


class TestLimitTable:
    """Tests for LimitTable resolution."""

    def test_fallback_must_exist(self):
        with pytest.raises(ValueError):
            LimitTable(exercises={}, categories=dict(CATEGORY_LIMITS), fallback_category="tail")

    def test_table_is_read_only(self):
        table = LimitTable(exercises={}, categories=dict(CATEGORY_LIMITS))
        with pytest.raises(TypeError):
            table.categories["chest"] = None


class TestValidateCardio:
    """Tests for validate_cardio function."""

    def test_normal_run(self):
        result = validate_cardio("Running", 45, 10, 13.3)
        assert result.is_valid
        assert result.warnings == []

    def test_running_speed_error(self):
        """Test 30 km/h running is rejected."""
        result = validate_cardio("Running", 20, 10, 30)
        assert not result.is_valid
        assert len(result.errors) == 1

    def test_running_speed_error_without_distance(self):
        result = validate_cardio("Treadmill Run", 20, speed_kmh=30)
        assert not result.is_valid

    def test_ultra_distance_warns(self):
        result = validate_cardio("Jogging", 290, 50, 10)
        assert result.is_valid
        # long duration + beyond marathon
        assert len(result.warnings) == 2

    def test_duration_tiers(self):
        """Test only one duration warning fires per entry."""
        long = validate_cardio("Rowing", 200)
        very_long = validate_cardio("Rowing", 301)
        assert len(long.warnings) == 1
        assert "hydrated" in long.warnings[0]
        assert len(very_long.warnings) == 1
        assert "verify" in very_long.warnings[0]

    def test_fast_cycling_only_warns(self):
        """Test elite cycling speeds warn instead of failing."""
        result = validate_cardio("Cycling", 60, 70, 65)
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_long_ride_warns(self):
        result = validate_cardio("Road Bike", 170, 210, 35)
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_other_cardio_ignores_speed(self):
        """Test speed rules only apply to running and cycling."""
        result = validate_cardio("Swimming", 30, 2, 90)
        assert result.is_valid
        assert result.warnings == []

    def test_crunch_is_not_running(self):
        result = validate_cardio("Cable Crunch", 10, speed_kmh=40)
        assert result.is_valid

    def test_japanese_running_name(self):
        result = validate_cardio("ランニング", 30, 5, 26)
        assert not result.is_valid

    def test_non_finite_speed_warns(self):
        result = validate_cardio("Running", 30, 5, math.inf)
        assert result.is_valid
        assert result.warnings == ["Speed is not a finite number. Please verify the input."]
