import textwrap

import pytest

from fogmaze.config import loader
from fogmaze.config.loader import DifficultyTier, default_difficulty_tiers, load_difficulty_tiers
from fogmaze.config.settings import MazeSettings
from fogmaze.exceptions import ConfigError


def test_default_tiers_load():
    tiers = load_difficulty_tiers()
    assert set(tiers) == {"easy", "normal", "hard"}
    assert tiers["normal"] == DifficultyTier("normal", 20, 20, 32, 32, 2)


@pytest.mark.parametrize(
    "tier,level,expected",
    [
        ("normal", 1, (20, 20)),
        ("normal", 2, (20, 20)),
        ("normal", 3, (21, 21)),
        ("normal", 100, (32, 32)),
        ("easy", 3, (12, 12)),
        ("easy", 4, (13, 13)),
        ("hard", 2, (31, 31)),
        ("hard", 16, (45, 45)),
        ("hard", 40, (45, 45)),
    ],
)
def test_dimensions_grow_with_level(tier, level, expected):
    assert load_difficulty_tiers()[tier].dimensions_for_level(level) == expected


def test_level_must_be_positive():
    with pytest.raises(ValueError):
        load_difficulty_tiers()["easy"].dimensions_for_level(0)


def test_custom_file(tmp_path):
    path = tmp_path / "tiers.yaml"
    path.write_text(
        textwrap.dedent(
            """
            tiers:
              tiny:
                start_width: 2
                start_height: 3
                max_width: 4
                max_height: 3
                growth_rate: 1
            """
        ),
        encoding="utf-8",
    )
    tiers = load_difficulty_tiers(str(path))
    assert list(tiers) == ["tiny"]
    assert tiers["tiny"].dimensions_for_level(5) == (4, 3)


def test_schema_violation_lists_errors(tmp_path):
    path = tmp_path / "tiers.yaml"
    path.write_text(
        "tiers:\n  easy:\n    start_width: 5\n    start_height: 5\n    max_width: 8\n    max_height: 8\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigError) as excinfo:
        load_difficulty_tiers(str(path))
    assert excinfo.value.errors
    assert "growth_rate" in excinfo.value.to_human()


@pytest.mark.parametrize(
    "body",
    [
        "tiers: {}\n",
        "tiers:\n  x: {start_width: 0, start_height: 5, max_width: 5, max_height: 5, growth_rate: 1}\n",
        "tiers:\n  x: {start_width: 5, start_height: 5, max_width: 5, max_height: 5, growth_rate: 0}\n",
        "tiers:\n  x: {start_width: 9, start_height: 5, max_width: 5, max_height: 5, growth_rate: 1}\n",
        "levels: []\n",
        "tiers: [1, 2\n",
    ],
)
def test_invalid_documents_rejected(tmp_path, body):
    path = tmp_path / "tiers.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_difficulty_tiers(str(path))


def test_default_tiers_are_read_once(monkeypatch):
    first = default_difficulty_tiers()
    assert first == load_difficulty_tiers()

    def fail(path=None):
        raise AssertionError("packaged tiers reloaded")

    monkeypatch.setattr(loader, "load_difficulty_tiers", fail)
    second = default_difficulty_tiers()
    assert second == first
    MazeSettings(difficulty="easy").validate()

    # callers get their own mapping
    second.pop("easy")
    assert "easy" in default_difficulty_tiers()
