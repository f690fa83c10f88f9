from __future__ import annotations

import math

from pygame.math import Vector2

ZERO = Vector2()


def safe_normalize(vector: Vector2) -> Vector2:
    return _safe_normalize_xy(vector.x, vector.y)


def _safe_normalize_xy(x: float, y: float) -> Vector2:
    magnitude_sq = x * x + y * y
    if magnitude_sq < 1e-10:
        return Vector2()
    inv = 1.0 / math.sqrt(magnitude_sq)
    return Vector2(x * inv, y * inv)


def seek(position: Vector2, target: Vector2, speed: float) -> Vector2:
    """Unit vector from ``position`` toward ``target`` scaled by ``speed``."""
    return _safe_normalize_xy(target.x - position.x, target.y - position.y) * speed


def mean(vectors: list[Vector2]) -> Vector2:
    if not vectors:
        return Vector2()
    total_x = 0.0
    total_y = 0.0
    for vector in vectors:
        total_x += vector.x
        total_y += vector.y
    count = len(vectors)
    return Vector2(total_x / count, total_y / count)
