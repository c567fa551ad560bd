from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from delve.config import Settings
from delve.encounters import DEFAULT_CANDIDATES
from delve.errors import ConfigError


def test_defaults():
    s = Settings.load(env={})
    assert s.tile_size == 10
    assert s.seed is None
    assert s.open_probability == 0.5
    assert s.origin == (0, 0)
    assert [c.template_id for c in s.encounter_candidates()] == [c.template_id for c in DEFAULT_CANDIDATES]


def test_yaml_file_overrides_defaults(tmp_path: Path):
    path = tmp_path / "delve.yaml"
    path.write_text(
        textwrap.dedent(
            """
            tile_size: 4
            seed: 77
            origin: [8, -4]
            encounters:
              - template: bat
                chance: 12.5
            """
        ),
        encoding="utf-8",
    )
    s = Settings.load(path, env={})
    assert s.tile_size == 4
    assert s.seed == 77
    assert s.origin == (8, -4)
    assert s.open_probability == 0.5
    candidates = s.encounter_candidates()
    assert len(candidates) == 1
    assert candidates[0].template_id == "bat"
    assert candidates[0].spawn_chance == 12.5


def test_env_overrides_file(tmp_path: Path):
    path = tmp_path / "delve.yaml"
    path.write_text("seed: 1\ntile_size: 4\n", encoding="utf-8")
    env = {
        "DELVE_SETTINGS_FILE": str(path),
        "DELVE_SEED": "99",
        "DELVE_OPEN_PROBABILITY": "0.25",
    }
    s = Settings.load(env=env)
    assert s.seed == 99
    assert s.tile_size == 4
    assert s.open_probability == 0.25


def test_bad_env_value_raises():
    with pytest.raises(ConfigError):
        Settings.load(env={"DELVE_TILE_SIZE": "ten"})


def test_schema_violations_reported(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text(
        "tile_size: 0\nencounters:\n  - template: slime\n    chance: 150\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigError) as info:
        Settings.load(path, env={})
    text = info.value.to_human()
    assert "tile_size" in text
    assert "encounters/0/chance" in text


def test_unknown_key_rejected():
    with pytest.raises(ConfigError):
        Settings.from_dict({"tile_size": 10, "fog": True})


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        Settings.load(tmp_path / "nope.yaml", env={})


def test_validate_catches_mutation():
    s = Settings()
    s.open_probability = 2.0
    with pytest.raises(ConfigError):
        s.validate()


def test_save_then_load(tmp_path: Path):
    s = Settings(tile_size=6, seed=3, origin=(1, 2))
    out = tmp_path / "nested" / "settings.yaml"
    s.save(out)
    loaded = Settings.load(out, env={})
    assert loaded == s
