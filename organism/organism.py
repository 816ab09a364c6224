"""
organism_sim module: organism/organism.py

Per-agent mutable state on top of an immutable genome, plus the per-tick
update hook (aging, metabolism, behaviour, motion).
"""

from __future__ import annotations
from dataclasses import dataclass, field
import itertools
import random
from typing import Optional, Sequence, TYPE_CHECKING

from config import SimConfig
from organism.genome import Genome, Trait, species as species_of
from organism.behavior import Peer, behave, perceive
from organism.metabolism import energy_consumption, environmental_stress
from world.physics import apply_drag, wrap_position

if TYPE_CHECKING:
    from world.resources import FoodItem
    from world.world import Environment

_serial = itertools.count()


@dataclass(eq=False)
class Organism:
    x: float
    y: float
    genome: Genome
    energy: float
    max_energy: float
    vx: float = 0.0
    vy: float = 0.0
    age: int = 0
    reproduction_cooldown: int = 0

    # derived once at birth
    uid: int = field(init=False)
    species: int = field(init=False)
    reproduction_threshold: float = field(init=False)

    def __post_init__(self) -> None:
        self.uid = next(_serial)
        self.species = species_of(self.genome)
        self.reproduction_threshold = self.max_energy * self.genome.safe(Trait.REPRODUCTION_THRESHOLD)

    @classmethod
    def initial(cls, x: float, y: float, genome: Genome, cfg: SimConfig) -> "Organism":
        return cls(x=x, y=y, genome=genome, energy=cfg.max_energy * cfg.initial_energy_factor, max_energy=cfg.max_energy)

    @classmethod
    def newborn(cls, x: float, y: float, genome: Genome, cfg: SimConfig) -> "Organism":
        return cls(x=x, y=y, genome=genome, energy=cfg.child_initial_energy, max_energy=cfg.max_energy)

    @property
    def size(self) -> float:
        return self.genome.safe(Trait.SIZE)

    @property
    def speed(self) -> float:
        return self.genome.safe(Trait.SPEED)

    @property
    def sensor_range(self) -> float:
        return self.genome.safe(Trait.SENSOR_RANGE)

    def is_dead(self) -> bool:
        return self.energy <= 0 or self.age > self.genome.safe(Trait.LIFESPAN)

    def eat_radius(self, cfg: SimConfig) -> float:
        return self.size + cfg.eat_margin

    def can_eat(self, food: "FoodItem", cfg: SimConfig) -> bool:
        dx = food.x - self.x
        dy = food.y - self.y
        r = self.eat_radius(cfg)
        return dx * dx + dy * dy < r * r

    def update(
        self,
        env: "Environment",
        peers: Sequence[Peer],
        cfg: SimConfig,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        One tick: age, metabolise, steer, move.

        ``peers`` is the pre-tick snapshot of the whole population, so every
        organism perceives the same instant.
        """
        rng = rng or random
        self.age += 1
        self.reproduction_cooldown = max(0, self.reproduction_cooldown - 1)

        seen = perceive(self, env, peers)
        stress = environmental_stress(self, env.temperature, len(seen.toxins), cfg)
        self.energy -= energy_consumption(self, stress, cfg)

        behave(self, seen, rng)

        self.x, self.y = wrap_position(self.x + self.vx, self.y + self.vy, env.w, env.h)
        apply_drag(self)

        self.energy = min(self.energy, self.max_energy)
