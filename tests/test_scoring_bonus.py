"""Tests for fitscore.scoring.bonus -- bonus rule and fitness levels."""

import pytest

from fitscore.scoring.bonus import (
    calculate_bonus_points,
    create_bonus_history_item,
    determine_fitness_level,
    BonusResult,
    FitnessLevel,
    BONUS_POINTS_BY_COUNT,
    FITNESS_LEVEL_THRESHOLDS,
)


class TestBonusPoints:
    def test_none_qualify(self):
        result = calculate_bonus_points(0, 0, 0)
        assert result.points == 0
        assert result.excellent_categories == ()
        assert "No category" in result.detailed_explanation

    def test_one_qualifies(self):
        result = calculate_bonus_points(0, 29, 20)
        assert result.points == 1
        assert result.excellent_categories == ("Recovery",)
        assert "1 bonus point)" in result.detailed_explanation

    def test_two_qualify(self):
        result = calculate_bonus_points(30, 35, 0)
        assert result.points == 3
        assert result.excellent_categories == ("Cardiovascular", "Recovery")
        assert "Cardiovascular and Recovery" in result.detailed_explanation

    def test_all_three(self):
        result = calculate_bonus_points(30, 35, 30)
        assert result.points == 5
        assert result.excellent_categories == ("Cardiovascular", "Recovery", "Activity")
        assert "all three" in result.detailed_explanation

    def test_threshold_is_inclusive(self):
        # 22.5 / 30 is exactly 75 %
        assert calculate_bonus_points(22.5, 0, 0).qualifying["Cardiovascular"]
        assert not calculate_bonus_points(22, 0, 0).qualifying["Cardiovascular"]
        assert calculate_bonus_points(0, 26.25, 0).points == 1

    def test_percentages(self):
        result = calculate_bonus_points(15, 35, 0)
        assert result.percentages["Cardiovascular"] == pytest.approx(50.0)
        assert result.percentages["Recovery"] == pytest.approx(100.0)
        assert result.percentages["Activity"] == 0.0

    def test_nan_total_does_not_qualify(self):
        result = calculate_bonus_points(float("nan"), 0, 0)
        assert result.points == 0

    def test_points_table(self):
        assert set(BONUS_POINTS_BY_COUNT.values()) == {0, 1, 3, 5}

    def test_repr(self):
        assert "points=5" in repr(calculate_bonus_points(30, 35, 30))


class TestBonusHistoryItem:
    def test_item_fields(self):
        bonus = calculate_bonus_points(30, 35, 0)
        item = create_bonus_history_item(bonus)
        assert item.category == "Bonus"
        assert item.points == 3
        assert item.max_points == 5
        assert item.value == 2.0
        assert item.explanation == bonus.detailed_explanation


class TestFitnessLevel:
    @pytest.mark.parametrize(
        "score,level",
        [
            (0, FitnessLevel.POOR),
            (39, FitnessLevel.POOR),
            (40, FitnessLevel.FAIR),
            (59, FitnessLevel.FAIR),
            (60, FitnessLevel.GOOD),
            (74.9, FitnessLevel.GOOD),
            (75, FitnessLevel.VERY_GOOD),
            (89, FitnessLevel.VERY_GOOD),
            (90, FitnessLevel.EXCELLENT),
            (100, FitnessLevel.EXCELLENT),
        ],
    )
    def test_boundaries(self, score, level):
        assert determine_fitness_level(score) == level

    def test_negative_and_nan_are_lowest(self):
        assert determine_fitness_level(-10) == FitnessLevel.POOR
        assert determine_fitness_level(float("nan")) == FitnessLevel.POOR

    def test_thresholds_strictly_descending(self):
        minimums = [m for m, _ in FITNESS_LEVEL_THRESHOLDS]
        assert minimums == sorted(minimums, reverse=True)
        assert len(set(minimums)) == len(minimums)
        assert minimums[-1] == 0

    def test_every_integer_score_has_a_level(self):
        levels = [determine_fitness_level(s) for s in range(0, 101)]
        order = list(FitnessLevel)
        indices = [order.index(lv) for lv in levels]
        assert indices == sorted(indices)
