import pytest

from lightsout.config import GameConfig


class TestGameConfig:
    """Tests for GameConfig dataclass."""

    def test_defaults(self):
        config = GameConfig()

        assert config.rows == 5
        assert config.cols == 5
        assert config.chance_light_starts_on == 0.25
        assert config.seed is None

    def test_custom_values(self):
        config = GameConfig(rows=3, cols=7, chance_light_starts_on=1.0, seed=9)

        assert (config.rows, config.cols) == (3, 7)
        assert config.chance_light_starts_on == 1.0
        assert config.seed == 9

    def test_invalid_rows(self):
        with pytest.raises(ValueError, match="rows"):
            GameConfig(rows=0)

    def test_invalid_cols(self):
        with pytest.raises(ValueError, match="cols"):
            GameConfig(cols=-2)

    def test_invalid_chance(self):
        with pytest.raises(ValueError, match="chance_light_starts_on"):
            GameConfig(chance_light_starts_on=1.5)
        with pytest.raises(ValueError, match="chance_light_starts_on"):
            GameConfig(chance_light_starts_on=-0.1)

    def test_chance_bounds_are_inclusive(self):
        GameConfig(chance_light_starts_on=0.0)
        GameConfig(chance_light_starts_on=1.0)

    def test_serialization_roundtrip(self):
        config = GameConfig(rows=4, cols=6, chance_light_starts_on=0.5, seed=3)
        assert GameConfig.from_dict(config.to_dict()) == config

    def test_from_args_skips_unknown_and_unset(self):
        import argparse

        args = argparse.Namespace(rows=3, cols=None, seed=None, log_level="INFO")
        config = GameConfig.from_args(args)

        assert config.rows == 3
        assert config.cols == 5
        assert config.seed is None
