from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml
from jsonschema import Draft7Validator

from .encounters.provider import DEFAULT_CANDIDATES
from .encounters.registry import EncounterCandidate
from .errors import ConfigError

logger = logging.getLogger(__name__)


ENV_SETTINGS_FILE = "DELVE_SETTINGS_FILE"

SETTINGS_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "tile_size": {"type": "integer", "minimum": 1},
        "seed": {"type": ["integer", "null"]},
        "open_probability": {"type": "number", "minimum": 0, "maximum": 1},
        "origin": {
            "type": "array",
            "items": {"type": "integer"},
            "minItems": 2,
            "maxItems": 2,
        },
        "encounters": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "template": {"type": "string", "minLength": 1},
                    "chance": {"type": "number", "minimum": 0, "maximum": 100},
                },
                "required": ["template", "chance"],
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}


def _default_encounters() -> List[Dict[str, Any]]:
    return [{"template": c.template_id, "chance": c.spawn_chance} for c in DEFAULT_CANDIDATES]


@dataclass
class Settings:
    """Generation and navigation settings.

    Sources, later ones overriding earlier ones:
    - dataclass defaults
    - a YAML file (explicit path, or env DELVE_SETTINGS_FILE)
    - environment variables DELVE_TILE_SIZE, DELVE_SEED, DELVE_OPEN_PROBABILITY
    """

    tile_size: int = 10
    seed: Optional[int] = None
    open_probability: float = 0.5
    origin: Tuple[int, int] = (0, 0)
    encounters: List[Dict[str, Any]] = field(default_factory=_default_encounters)

    def validate(self) -> None:
        """Raise ConfigError if any value is out of range."""
        errors = _schema_errors(self.as_dict())
        if errors:
            raise ConfigError("Invalid settings", errors=errors)

    def encounter_candidates(self) -> List[EncounterCandidate]:
        return [EncounterCandidate(e["template"], float(e["chance"])) for e in self.encounters]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "tile_size": self.tile_size,
            "seed": self.seed,
            "open_probability": self.open_probability,
            "origin": list(self.origin),
            "encounters": [dict(e) for e in self.encounters],
        }

    # ------------------------ Loading & Overrides ------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        data = dict(data)
        if isinstance(data.get("origin"), tuple):
            data["origin"] = list(data["origin"])
        errors = _schema_errors(data)
        if errors:
            raise ConfigError("Invalid settings", errors=errors)
        allowed = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in data.items() if k in allowed}
        if "origin" in filtered:
            filtered["origin"] = tuple(filtered["origin"])
        return cls(**filtered)

    @staticmethod
    def _load_yaml(path: Path) -> Dict[str, Any]:
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Cannot parse settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        mapping = {
            "DELVE_TILE_SIZE": ("tile_size", int),
            "DELVE_SEED": ("seed", int),
            "DELVE_OPEN_PROBABILITY": ("open_probability", float),
        }
        out: Dict[str, Any] = {}
        for env_key, (field_name, caster) in mapping.items():
            if env.get(env_key, "") != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    raise ConfigError(f"Invalid value for {env_key}={env[env_key]!r}: {exc}") from exc
        return out

    @classmethod
    def load(cls, path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from defaults, an optional YAML file and the environment."""
        env = os.environ if env is None else env
        data = dataclasses.asdict(cls())
        data["origin"] = list(data["origin"])

        if path is None and env.get(ENV_SETTINGS_FILE):
            path = Path(env[ENV_SETTINGS_FILE]).expanduser()
        if path is not None:
            if not path.exists():
                raise ConfigError(f"Settings file not found: {path}")
            data.update(cls._load_yaml(path))
            logger.info("Loaded settings from %s", path)

        data.update(cls.from_env(env))
        settings = cls.from_dict(data)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.as_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


def _schema_errors(data: Mapping[str, Any]) -> List[str]:
    validator = Draft7Validator(SETTINGS_SCHEMA)
    out = []
    for e in sorted(validator.iter_errors(dict(data)), key=lambda e: [str(p) for p in e.path]):
        where = "/".join(str(p) for p in e.path) or "<root>"
        out.append(f"at {where}: {e.message}")
    return out
