import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from flocking.sim.core.config import SimulationConfig  # noqa: E402
from flocking.sim.core.swarm import Swarm  # noqa: E402


@pytest.fixture
def empty_swarm() -> Swarm:
    """A 400x400 swarm with no agents and no target."""
    swarm = Swarm(SimulationConfig(width=400.0, height=400.0, initial_population=0, seed=5))
    swarm.clear_target()
    return swarm
