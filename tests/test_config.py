import pytest

from minesweeper.board import ConfigurationError
from minesweeper.config import GameConfig


def test_defaults():
    config = GameConfig()
    assert (config.width, config.height, config.num_mines) == (10, 10, 10)
    assert config.max_mines == 99
    assert config.is_valid
    assert config.validation_message() is None


@pytest.mark.parametrize('mines', [0, 100, -3])
def test_mine_count_out_of_range(mines):
    config = GameConfig(10, 10, mines)
    assert not config.is_valid
    assert config.validation_message() == 'Number of mines must be between 1 and 99'
    with pytest.raises(ConfigurationError):
        config.validate()


def test_bad_dimensions():
    config = GameConfig(0, 5, 1)
    assert config.validation_message() == 'Width and height must be at least 1'
    with pytest.raises(ConfigurationError):
        config.validate()


@pytest.mark.parametrize('mines,label', [
    (5, 'trivial'),
    (6, 'easy'),
    (12, 'easy'),
    (16, 'medium'),
    (20, 'hard'),
    (21, 'deadly'),
    (99, 'deadly'),
])
def test_difficulty_label(mines, label):
    assert GameConfig(10, 10, mines).difficulty_label() == label


def test_dangerous_above_twenty_percent():
    assert not GameConfig(10, 10, 20).is_dangerous
    assert GameConfig(10, 10, 21).is_dangerous


def test_clamp_one_by_one_stays_invalid():
    config = GameConfig.clamp(1, 1, 5)
    assert config == GameConfig(1, 1, 1)
    assert not config.is_valid
    assert config.validation_message() == 'Number of mines must be between 1 and 0'


def test_clamp_pulls_values_into_range():
    assert GameConfig.clamp(0, -2, 0) == GameConfig(1, 1, 1)
    assert GameConfig.clamp(3, 3, 50) == GameConfig(3, 3, 8)
    assert GameConfig.clamp('4', '2', '3') == GameConfig(4, 2, 3)
