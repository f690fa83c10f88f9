from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

from ..types.metrics import TickMetrics

if TYPE_CHECKING:
    from ..core.agent import Agent


def color_counts(agents: Sequence["Agent"], palette_size: int) -> list[int]:
    counts = [0] * palette_size
    for agent in agents:
        counts[agent.color_index] += 1
    return counts


def dominant_color(counts: Sequence[int]) -> int:
    best = -1
    best_count = 0
    for index, count in enumerate(counts):
        if count > best_count:
            best = index
            best_count = count
    return best


def create_metrics(
    tick: int,
    agents: Sequence["Agent"],
    palette_size: int,
    neighbor_checks: int,
    duration_ms: float,
) -> TickMetrics:
    population = len(agents)
    speed_sum = sum(agent.velocity.length() for agent in agents)
    counts = color_counts(agents, palette_size)
    return TickMetrics(
        tick=tick,
        population=population,
        neighbor_checks=neighbor_checks,
        average_speed=speed_sum / population if population else 0.0,
        dominant_color=dominant_color(counts),
        color_counts=counts,
        tick_duration_ms=duration_ms,
    )
