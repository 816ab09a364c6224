"""
organism_sim module: render/trails.py

Renderer-owned motion trails, rebuilt from snapshots each frame.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Iterable, Tuple

from simulation.snapshot import OrganismSnapshot

TRAIL_LENGTH = 15
TRAIL_DECAY = 0.9


class TrailBuffer:
    def __init__(self, length: int = TRAIL_LENGTH):
        self.length = length
        self._trails: Dict[int, Deque[Tuple[float, float]]] = {}

    def __len__(self) -> int:
        return len(self._trails)

    def record(self, organisms: Iterable[OrganismSnapshot]) -> None:
        """
        Append the current position of every organism and drop trails of
        organisms that are gone.
        """
        alive = set()
        for o in organisms:
            alive.add(o.key)
            trail = self._trails.get(o.key)
            if trail is None:
                trail = deque(maxlen=self.length)
                self._trails[o.key] = trail
            trail.append((o.x, o.y))

        for key in list(self._trails):
            if key not in alive:
                del self._trails[key]

    def points(self, key: int) -> Iterable[Tuple[float, float, float]]:
        """
        (x, y, fade) oldest first; the newest point has fade 1.0.
        """
        trail = self._trails.get(key, ())
        n = len(trail)
        for i, (x, y) in enumerate(trail):
            yield x, y, TRAIL_DECAY ** (n - 1 - i)

    def clear(self) -> None:
        self._trails.clear()
