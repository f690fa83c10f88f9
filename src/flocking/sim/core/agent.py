from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, TYPE_CHECKING

from pygame.math import Vector2

from ..systems import steering

if TYPE_CHECKING:
    from .config import SimulationConfig


class AgentLike(Protocol):
    @property
    def id(self) -> int: ...

    @property
    def position(self) -> Vector2: ...

    @property
    def velocity(self) -> Vector2: ...

    @property
    def color_index(self) -> int: ...


@dataclass(frozen=True, slots=True)
class AgentView:
    """Read-only copy of an agent's state at the start of a tick."""

    id: int
    position: Vector2
    velocity: Vector2
    color_index: int


@dataclass(slots=True)
class Agent:
    id: int
    position: Vector2
    velocity: Vector2
    color_index: int

    def view(self) -> AgentView:
        return AgentView(
            id=self.id,
            position=Vector2(self.position),
            velocity=Vector2(self.velocity),
            color_index=self.color_index,
        )

    def act(
        self,
        population: Iterable[AgentLike],
        target: Optional[Vector2],
        config: "SimulationConfig",
    ) -> int:
        """Perceive ``population``, steer, move and bounce for one tick.

        Returns the number of other agents that were within sight.
        """
        hood = steering.scan_neighborhood(self, population, config.sight_radius, config.palette_size)
        self.color_index = steering.adopt_color(self.color_index, hood.tally)

        velocity = steering.compute_velocity(self, hood, target, config)
        position = self.position + velocity
        position, velocity = steering.reflect(position, velocity, config.width, config.height)

        self.position = position
        self.velocity = velocity * config.friction
        return len(hood)
