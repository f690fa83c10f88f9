import os
import subprocess
import sys
from pathlib import Path

_SCRIPT = """
import flocking.headless
from flocking.sim.core import swarm
print(flocking.headless.__file__)
print(swarm.__file__)
print(swarm.Swarm().tick().population)
"""


def test_checkout_runs_a_tick_without_install():
    repo_root = Path(__file__).resolve().parents[2]
    env = os.environ.copy()
    env.pop("PYTHONPATH", None)
    env.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

    proc = subprocess.run(
        [sys.executable, "-c", _SCRIPT],
        cwd=repo_root,
        env=env,
        capture_output=True,
        text=True,
    )

    assert proc.returncode == 0, proc.stderr

    lines = proc.stdout.strip().splitlines()
    assert len(lines) >= 3, proc.stdout
    headless_path, swarm_path, population = lines[-3:]

    src_root = repo_root / "src" / "flocking"
    assert Path(headless_path).resolve().samefile(src_root / "headless.py")
    assert Path(swarm_path).resolve().samefile(src_root / "sim" / "core" / "swarm.py")
    assert int(population) == 7
