"""Solver settings: which deduction passes run, in which order, and whether moves are recorded. Loaded from YAML."""

# config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError

TECHNIQUES = (
    "naked_singles",
    "hidden_singles",
    "box_line_reduction",
    "locked_multiples",
    "naked_pairs",
)


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass(frozen=True)
class SolverConfig:
    techniques: tuple[str, ...] = TECHNIQUES
    locked_multiple_size: int = 2
    record_moves: bool = True

    def __post_init__(self) -> None:
        if not all(isinstance(t, str) for t in self.techniques):
            raise ConfigError(f"techniques must be names, got {list(self.techniques)}")
        if not isinstance(self.locked_multiple_size, int) or isinstance(self.locked_multiple_size, bool):
            raise ConfigError(f"locked_multiple_size must be an integer, got {self.locked_multiple_size!r}")
        if not isinstance(self.record_moves, bool):
            raise ConfigError(f"record_moves must be true or false, got {self.record_moves!r}")
        unknown = [t for t in self.techniques if t not in TECHNIQUES]
        if unknown:
            raise ConfigError(f"Unknown technique(s) {unknown}; expected some of {list(TECHNIQUES)}")
        if len(set(self.techniques)) != len(self.techniques):
            raise ConfigError(f"Duplicate technique in {list(self.techniques)}")
        if not 2 <= self.locked_multiple_size <= 4:
            raise ConfigError(f"locked_multiple_size must be 2..4, got {self.locked_multiple_size}")

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "SolverConfig":
        known = {f for f in cls.__dataclass_fields__}
        extra = sorted(set(data) - known)
        if extra:
            raise ConfigError(f"Unknown config key(s): {extra}")
        kwargs = dict(data)
        if "techniques" in kwargs:
            techniques = kwargs["techniques"]
            if isinstance(techniques, str):
                techniques = [t.strip() for t in techniques.split(",") if t.strip()]
            elif not isinstance(techniques, (list, tuple)):
                raise ConfigError(f"techniques must be a list or a comma separated string, got {techniques!r}")
            kwargs["techniques"] = tuple(techniques)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "techniques": list(self.techniques),
            "locked_multiple_size": self.locked_multiple_size,
            "record_moves": self.record_moves,
        }


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """Build a SolverConfig from an optional YAML file plus keyword overrides (None values are ignored)."""
    cfg = load_yaml(path) if path is not None else DotDict()
    return SolverConfig.from_mapping(merge_overrides(cfg, **overrides))


DEFAULT_CONFIG = SolverConfig()
