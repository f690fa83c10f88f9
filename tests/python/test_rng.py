from __future__ import annotations

from flocking.sim.core.rng import DeterministicRng


def test_same_seed_same_sequence_and_reset_replays():
    rng_a = DeterministicRng(99)
    rng_b = DeterministicRng(99)
    first = [rng_a.next_range(0.0, 10.0) for _ in range(5)]
    assert first == [rng_b.next_range(0.0, 10.0) for _ in range(5)]

    rng_a.reset()
    assert first == [rng_a.next_range(0.0, 10.0) for _ in range(5)]


def test_next_int_stays_in_range():
    rng = DeterministicRng(3)
    values = {rng.next_int(4) for _ in range(200)}
    assert values <= {0, 1, 2, 3}
    assert len(values) == 4
