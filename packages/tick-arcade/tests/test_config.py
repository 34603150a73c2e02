"""Tests for presets, reward tiers and config validation."""
import random
from collections import Counter

import pytest

from tick_arcade import (
    DEFAULT_REWARDS,
    PRESETS,
    Difficulty,
    PuzzleConfig,
    RewardTier,
    SnakeConfig,
    draw_tier,
    preset_for,
    validate_rewards,
)


class TestPresets:
    @pytest.mark.parametrize("difficulty,size,base", [
        ("easy", 10, 2),
        ("medium", 15, 4),
        ("hard", 30, 6),
    ])
    def test_preset_values(self, difficulty, size, base):
        preset = preset_for(difficulty)
        assert preset.width == size
        assert preset.height == size
        assert preset.obstacle_base == base

    def test_every_difficulty_has_a_preset(self):
        assert set(PRESETS) == set(Difficulty)

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            preset_for("nightmare")


class TestPuzzleConfig:
    def test_defaults(self):
        config = PuzzleConfig()
        assert config.difficulty is Difficulty.EASY
        assert config.step_seconds == 0.5
        assert config.points_per_round == 100
        assert config.preset is PRESETS[Difficulty.EASY]

    def test_string_difficulty_coerced(self):
        assert PuzzleConfig(difficulty="hard").difficulty is Difficulty.HARD

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            PuzzleConfig(step_seconds=-1)
        with pytest.raises(ValueError):
            PuzzleConfig(points_per_round=-5)


class TestRewards:
    def test_default_tiers_valid(self):
        validate_rewards(DEFAULT_REWARDS)
        rare = min(DEFAULT_REWARDS, key=lambda t: t.weight)
        common = max(DEFAULT_REWARDS, key=lambda t: t.weight)
        assert rare.points > common.points

    def test_single_tier_rejected(self):
        with pytest.raises(ValueError):
            validate_rewards((RewardTier("apple", 10, 1.0),))

    def test_rarer_tier_must_pay_more(self):
        with pytest.raises(ValueError):
            validate_rewards((
                RewardTier("apple", 10, 0.9),
                RewardTier("golden", 10, 0.1),
            ))

    def test_zero_points_or_weight_rejected(self):
        with pytest.raises(ValueError):
            validate_rewards((RewardTier("a", 0, 0.9), RewardTier("b", 5, 0.1)))
        with pytest.raises(ValueError):
            validate_rewards((RewardTier("a", 1, 0.0), RewardTier("b", 5, 0.1)))

    def test_snake_config_validates_rewards(self):
        with pytest.raises(ValueError):
            SnakeConfig(rewards=(RewardTier("apple", 10, 1.0),))

    def test_draw_tier_respects_weights(self):
        rng = random.Random(42)
        counts = Counter(draw_tier(rng, DEFAULT_REWARDS).name for _ in range(5000))
        assert counts["apple"] > counts["golden"] > 0
