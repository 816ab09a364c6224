"""
organism_sim module: world/physics.py

Top-down 2D point physics:
- steering impulses toward/away from a target, scaled by the body's speed gene
- linear drag each tick
- speed clamp keeps bodies at their genetic top speed
- toroidal wrap keeps positions inside the world rectangle
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from organism.organism import Organism

ACCEL_FACTOR = 0.08
LINEAR_DRAG = 0.92
MAX_SPEED_FACTOR = 0.6
MIN_STEER_DIST = 0.1


def _steer(org: "Organism", x: float, y: float, strength: float, sign: float) -> None:
    dx = x - org.x
    dy = y - org.y
    dist = math.hypot(dx, dy)
    if dist <= MIN_STEER_DIST:
        return

    gain = org.speed * strength * ACCEL_FACTOR * sign
    org.vx += dx / dist * gain
    org.vy += dy / dist * gain


def move_towards(org: "Organism", x: float, y: float, strength: float = 1.0) -> None:
    _steer(org, x, y, strength, 1.0)


def move_away(org: "Organism", x: float, y: float, strength: float = 1.0) -> None:
    _steer(org, x, y, strength, -1.0)


def apply_drag(org: "Organism", drag: float = LINEAR_DRAG) -> None:
    org.vx *= drag
    org.vy *= drag


def clamp_speed(org: "Organism", max_speed: float) -> None:
    """
    Rescale velocity so its magnitude never exceeds ``max_speed``.
    """
    v2 = org.vx * org.vx + org.vy * org.vy
    if v2 > max_speed * max_speed:
        v = math.sqrt(v2)
        s = max_speed / max(v, 1e-9)
        org.vx *= s
        org.vy *= s


def wrap_position(x: float, y: float, w: float, h: float) -> tuple[float, float]:
    """
    Torus wrap into [0, w) x [0, h).
    """
    x = x % w
    y = y % h
    # float modulo of tiny negatives can land exactly on the upper edge
    if x >= w:
        x = 0.0
    if y >= h:
        y = 0.0
    return x, y
