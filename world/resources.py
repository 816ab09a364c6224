"""
organism_sim module: world/resources.py

Resource fields:
- Food spawns one item at a time while the field is under 1.5x its target
- Toxins spawn at a rate driven by the toxicity knob and decay faster
- Ambient particles drift and fade; they never touch the simulation
- Every item ages one unit per tick and is culled at its lifetime
"""

from __future__ import annotations
from dataclasses import dataclass
import random
from typing import List, Optional


@dataclass
class FoodItem:
    x: float
    y: float
    age: int = 0


@dataclass
class Toxin:
    x: float
    y: float
    age: int = 0


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    hue: float
    life: int = 100


class ResourceField:
    """
    Ordered collection of aging items with a probabilistic spawner.
    """

    def __init__(self, w: int, h: int, spawn_chance: float, lifetime: int):
        self.w = w
        self.h = h
        self.spawn_chance = spawn_chance
        self.lifetime = lifetime
        self.items: list = []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def can_spawn(self) -> bool:
        return True

    def make_item(self, x: float, y: float):
        """Build one item at (x, y). Subclasses must override this."""
        raise NotImplementedError

    def spawn_at(self, x: float, y: float):
        item = self.make_item(x, y)
        self.items.append(item)
        return item

    def spawn_random(self, rng: random.Random):
        return self.spawn_at(rng.random() * self.w, rng.random() * self.h)

    def update(self, rng: Optional[random.Random] = None) -> None:
        rng = rng or random
        if self.can_spawn() and rng.random() < self.spawn_chance:
            self.spawn_random(rng)

        # age & cull
        for item in self.items:
            item.age += 1
        self.items = [item for item in self.items if item.age < self.lifetime]

    def remove(self, eaten: List) -> None:
        gone = {id(item) for item in eaten}
        self.items = [item for item in self.items if id(item) not in gone]


class FoodField(ResourceField):
    def __init__(self, w: int, h: int, target: int, abundance: float, lifetime: int, spawn_scale: float = 0.10):
        super().__init__(w, h, spawn_chance=abundance * spawn_scale, lifetime=lifetime)
        self.target = target

    def can_spawn(self) -> bool:
        return len(self.items) < self.target * 1.5

    def make_item(self, x: float, y: float) -> FoodItem:
        return FoodItem(x=x, y=y)

    def seed(self, n: int, rng: Optional[random.Random] = None) -> None:
        rng = rng or random
        for _ in range(n):
            self.spawn_random(rng)


class ToxinField(ResourceField):
    def __init__(self, w: int, h: int, toxicity: float, lifetime: int, spawn_scale: float = 0.015):
        super().__init__(w, h, spawn_chance=toxicity * spawn_scale, lifetime=lifetime)

    def make_item(self, x: float, y: float) -> Toxin:
        return Toxin(x=x, y=y)


class ParticleField:
    """
    Visual-only drifting motes.
    """

    def __init__(self, w: int, h: int, spawn_chance: float = 0.3, life: int = 100, enabled: bool = True):
        self.w = w
        self.h = h
        self.spawn_chance = spawn_chance
        self.life = life
        self.enabled = enabled
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def update(self, rng: Optional[random.Random] = None) -> None:
        if not self.enabled:
            return
        rng = rng or random
        if rng.random() < self.spawn_chance:
            self.particles.append(
                Particle(
                    x=rng.random() * self.w,
                    y=rng.random() * self.h,
                    vx=(rng.random() - 0.5) * 0.5,
                    vy=(rng.random() - 0.5) * 0.5,
                    hue=rng.random() * 360.0,
                    life=self.life,
                )
            )

        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.life -= 1
        self.particles = [p for p in self.particles if p.life > 0]
