from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict

import yaml


class Perception(str, Enum):
    # Agents read the collection as it mutates; later agents see earlier agents' new state.
    LIVE = "live"
    # Agents read a frozen copy of every agent's pre-tick state.
    SNAPSHOT = "snapshot"


DEFAULT_PALETTE: tuple[str, ...] = (
    "#e6194b",
    "#3cb44b",
    "#ffe119",
    "#4363d8",
    "#f58231",
    "#911eb4",
    "#46f0f0",
    "#f032e6",
)


@dataclass
class SimulationConfig:
    width: float = 640.0
    height: float = 480.0
    sight_radius: float = 80.0
    comfort_radius: float = 20.0
    speed: float = 0.1
    friction: float = 0.97
    cooperation: float = 0.1
    initial_population: int = 7
    palette: tuple[str, ...] = field(default_factory=lambda: DEFAULT_PALETTE)
    removal_batch: int = 3
    removal_floor: int = 3
    # Separation distances are clamped to this floor before the inverse-square term.
    min_separation_distance: float = 1.0
    perception: Perception = Perception.LIVE
    seed: int = 42
    config_version: str = "v1"

    def __post_init__(self) -> None:
        self.palette = tuple(self.palette)
        if not isinstance(self.perception, Perception):
            self.perception = parse_perception(self.perception)

    @property
    def palette_size(self) -> int:
        return len(self.palette)

    def validate(self) -> "SimulationConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must have positive size, got {self.width}x{self.height}")
        if self.sight_radius < 0 or self.comfort_radius < 0:
            raise ValueError("sight_radius and comfort_radius must be non-negative")
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if not 0.0 <= self.friction <= 1.0:
            raise ValueError(f"friction must lie in [0, 1], got {self.friction}")
        if self.initial_population < 0:
            raise ValueError("initial_population must be non-negative")
        if self.removal_batch < 0 or self.removal_floor < 0:
            raise ValueError("removal_batch and removal_floor must be non-negative")
        if self.min_separation_distance <= 0:
            raise ValueError("min_separation_distance must be positive")
        return self

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def parse_perception(value: Perception | str) -> Perception:
    if isinstance(value, Perception):
        return value
    try:
        return Perception(str(value).lower().strip())
    except ValueError:
        choices = ", ".join(p.value for p in Perception)
        raise ValueError(f"Unknown perception policy: {value!r} (expected one of {choices})") from None


def load_config(raw: Dict[str, Any]) -> SimulationConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(raw).__name__}")
    values = dict(raw)
    palette = values.pop("palette", None)
    if palette is not None:
        values["palette"] = tuple(str(color) for color in palette)
    if "perception" in values:
        values["perception"] = parse_perception(values["perception"])
    return SimulationConfig(**values).validate()
