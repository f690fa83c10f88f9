from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TYPE_CHECKING

from pygame.math import Vector2

from ..utils.math2d import ZERO, mean, safe_normalize, seek

if TYPE_CHECKING:
    from ..core.agent import AgentLike
    from ..core.config import SimulationConfig


@dataclass(slots=True)
class Neighborhood:
    """Other agents within sight of one agent, plus the color tally of the local swarm.

    ``agents``, ``offsets`` and ``distances`` are parallel lists and never
    contain the scanning agent itself. ``tally`` does count it.
    """

    agents: List["AgentLike"] = field(default_factory=list)
    offsets: List[Vector2] = field(default_factory=list)
    distances: List[float] = field(default_factory=list)
    tally: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.agents)


def scan_neighborhood(
    agent: "AgentLike",
    population: Iterable["AgentLike"],
    sight_radius: float,
    palette_size: int,
) -> Neighborhood:
    hood = Neighborhood(tally=[0] * palette_size)
    hood.tally[agent.color_index] += 1
    origin = agent.position
    for other in population:
        if other.id == agent.id:
            continue
        distance = origin.distance_to(other.position)
        if distance > sight_radius:
            continue
        hood.agents.append(other)
        hood.offsets.append(other.position - origin)
        hood.distances.append(distance)
        hood.tally[other.color_index] += 1
    return hood


def adopt_color(current: int, tally: List[int]) -> int:
    # Palette order is scanned once; only a strictly larger count replaces the
    # running best, so ties keep the current color.
    best = current
    best_count = tally[current]
    for index, count in enumerate(tally):
        if count > best_count:
            best = index
            best_count = count
    return best


def cohesion(position: Vector2, hood: Neighborhood, speed: float) -> Vector2:
    if not hood.agents:
        return Vector2(ZERO)
    centroid = mean([other.position for other in hood.agents])
    return seek(position, centroid, speed)


def separation(agent_id: int, hood: Neighborhood, comfort_radius: float, min_distance: float) -> Vector2:
    """Inverse-square push away from every neighbor inside the comfort zone.

    Each push has strength ``4 / d`` with ``d`` floored at ``min_distance``.
    Stacked agents have no offset to push along, so the lower id is pushed
    toward -x and the higher id toward +x.
    """
    push_x = 0.0
    push_y = 0.0
    for other, offset, distance in zip(hood.agents, hood.offsets, hood.distances):
        if distance >= comfort_radius:
            continue
        toward = safe_normalize(offset)
        if toward.x == 0.0 and toward.y == 0.0:
            toward = Vector2(1.0, 0.0) if agent_id < other.id else Vector2(-1.0, 0.0)
        strength = 4.0 / max(distance, min_distance)
        push_x -= toward.x * strength
        push_y -= toward.y * strength
    return Vector2(push_x, push_y)


def alignment(velocity: Vector2, hood: Neighborhood, cooperation: float) -> Vector2:
    if not hood.agents:
        return Vector2(ZERO)
    heading = mean([other.velocity for other in hood.agents])
    return (heading - velocity) * cooperation


def compute_velocity(
    agent: "AgentLike",
    hood: Neighborhood,
    target: Optional[Vector2],
    config: "SimulationConfig",
) -> Vector2:
    velocity = (
        agent.velocity
        + cohesion(agent.position, hood, config.speed)
        + separation(agent.id, hood, config.comfort_radius, config.min_separation_distance)
        + alignment(agent.velocity, hood, config.cooperation)
    )
    if target is not None:
        velocity = velocity + seek(agent.position, target, config.speed)
    return velocity


def reflect(position: Vector2, velocity: Vector2, width: float, height: float) -> tuple[Vector2, Vector2]:
    """Bounce off the canvas walls one axis at a time.

    An axis that left ``[0, size]`` has its last step undone and its velocity
    component negated. The position is restored, not clamped, so it may sit
    just outside the wall until the next tick.
    """
    x, y = position.x, position.y
    vx, vy = velocity.x, velocity.y
    if x < 0.0 or x > width:
        x -= vx
        vx = -vx
    if y < 0.0 or y > height:
        y -= vy
        vy = -vy
    return Vector2(x, y), Vector2(vx, vy)
