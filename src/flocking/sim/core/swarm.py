from __future__ import annotations

import logging
from time import perf_counter
from typing import List, Optional

from pygame.math import Vector2

from .agent import Agent
from .config import Perception, SimulationConfig, parse_perception
from .rng import DeterministicRng
from ..systems import metrics as metrics_system
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata

logger = logging.getLogger(__name__)


class Swarm:
    """The live agent population plus the optional shared target point.

    Agents are kept in insertion order; the oldest agent is always first.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self._config = (config or SimulationConfig()).validate()
        self._rng = DeterministicRng(self._config.seed)
        self._agents: List[Agent] = []
        self._target: Optional[Vector2] = None
        self._next_id = 0
        self._tick = 0
        self._metrics: TickMetrics | None = None
        self._perception = parse_perception(self._config.perception)
        self._bootstrap_population()
        logger.info(
            "Swarm created: %d agents on %gx%g canvas (seed=%d)",
            len(self._agents),
            self._config.width,
            self._config.height,
            self._config.seed,
        )

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def agents(self) -> List[Agent]:
        return self._agents

    @property
    def target(self) -> Optional[Vector2]:
        return self._target

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def perception(self) -> Perception:
        """Policy used by the most recent tick, or the configured one before any tick."""
        return self._perception

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self) -> None:
        self._agents.clear()
        self._rng.reset()
        self._target = None
        self._next_id = 0
        self._tick = 0
        self._metrics = None
        self._perception = parse_perception(self._config.perception)
        self._bootstrap_population()
        logger.info("Swarm reset to %d agents", len(self._agents))

    def _bootstrap_population(self) -> None:
        config = self._config
        for _ in range(config.initial_population):
            x = self._rng.next_range(0.0, config.width)
            y = self._rng.next_range(0.0, config.height)
            self.add_agent(x, y)
        self.set_target(config.width / 2.0, config.height / 2.0)

    def add_agent(self, x: float, y: float) -> Agent:
        agent = Agent(
            id=self._next_id,
            position=Vector2(x, y),
            velocity=Vector2(),
            color_index=self._rng.next_int(self._config.palette_size),
        )
        self._next_id += 1
        self._agents.append(agent)
        logger.debug("Spawned agent %d at (%.2f, %.2f) color=%d", agent.id, x, y, agent.color_index)
        return agent

    def remove_oldest(self, count: Optional[int] = None) -> int:
        """Drop the ``count`` earliest-inserted agents and return how many were removed.

        Nothing happens when the population is below ``removal_floor`` or
        smaller than ``count``.
        """
        if count is None:
            count = self._config.removal_batch
        population = len(self._agents)
        if count <= 0 or population < self._config.removal_floor or count > population:
            logger.debug("Ignored removal of %d agents from population of %d", count, population)
            return 0
        del self._agents[:count]
        logger.debug("Removed %d oldest agents, %d remain", count, len(self._agents))
        return count

    def set_target(self, x: float, y: float) -> None:
        self._target = Vector2(x, y)
        logger.debug("Target set to (%.2f, %.2f)", x, y)

    def clear_target(self) -> None:
        self._target = None
        logger.debug("Target cleared")

    def tick(self, perception: Perception | str | None = None) -> TickMetrics:
        start = perf_counter()
        config = self._config
        policy = parse_perception(config.perception if perception is None else perception)
        self._perception = policy
        target = Vector2(self._target) if self._target is not None else None

        if policy is Perception.SNAPSHOT:
            population = [agent.view() for agent in self._agents]
        else:
            population = self._agents

        neighbor_checks = 0
        for agent in self._agents:
            neighbor_checks += agent.act(population, target, config)

        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            self._tick, self._agents, config.palette_size, neighbor_checks, duration_ms
        )
        self._tick += 1
        return self._metrics

    def snapshot(self) -> Snapshot:
        config = self._config
        metrics = self._metrics or metrics_system.create_metrics(
            self._tick, self._agents, config.palette_size, 0, 0.0
        )
        agents = [
            {
                "id": agent.id,
                "x": agent.position.x,
                "y": agent.position.y,
                "vx": agent.velocity.x,
                "vy": agent.velocity.y,
                "color_index": agent.color_index,
                "color": config.palette[agent.color_index],
            }
            for agent in self._agents
        ]
        target = None if self._target is None else {"x": self._target.x, "y": self._target.y}
        return Snapshot(
            tick=self._tick,
            metrics=metrics,
            agents=agents,
            target=target,
            metadata=SnapshotMetadata(
                width=config.width,
                height=config.height,
                seed=config.seed,
                palette=list(config.palette),
                perception=self._perception.value,
                config_version=config.config_version,
            ),
        )
