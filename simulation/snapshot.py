"""
organism_sim module: simulation/snapshot.py

Frozen copies of engine state for renderers and HUDs. Nothing here holds a
live reference a reader could mutate.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence, Tuple

from organism.genome import Genome, clone

if TYPE_CHECKING:
    from organism.organism import Organism
    from simulation.scheduler import Statistics
    from world.world import Environment


@dataclass(frozen=True)
class OrganismSnapshot:
    key: int  # never reused within a process, used to key renderer trails
    x: float
    y: float
    vx: float
    vy: float
    energy: float
    max_energy: float
    age: int
    species: int
    genome: Genome

    @property
    def energy_ratio(self) -> float:
        return max(0.0, self.energy / self.max_energy)


@dataclass(frozen=True)
class ItemSnapshot:
    x: float
    y: float
    age: int


@dataclass(frozen=True)
class ParticleSnapshot:
    x: float
    y: float
    hue: float
    life: int


@dataclass(frozen=True)
class WorldSnapshot:
    width: int
    height: int
    tick: int
    generation: int
    temperature: float
    organisms: Tuple[OrganismSnapshot, ...]
    food: Tuple[ItemSnapshot, ...]
    toxins: Tuple[ItemSnapshot, ...]
    particles: Tuple[ParticleSnapshot, ...]
    stats: "Statistics"


def snapshot_organism(org: "Organism") -> OrganismSnapshot:
    return OrganismSnapshot(
        key=org.uid,
        x=org.x,
        y=org.y,
        vx=org.vx,
        vy=org.vy,
        energy=org.energy,
        max_energy=org.max_energy,
        age=org.age,
        species=org.species,
        genome=clone(org.genome),
    )


def take_snapshot(population: Sequence["Organism"], env: "Environment", stats: "Statistics") -> WorldSnapshot:
    return WorldSnapshot(
        width=env.w,
        height=env.h,
        tick=env.time,
        generation=env.generation,
        temperature=env.temperature,
        organisms=tuple(snapshot_organism(o) for o in population),
        food=tuple(ItemSnapshot(f.x, f.y, f.age) for f in env.food),
        toxins=tuple(ItemSnapshot(t.x, t.y, t.age) for t in env.toxins),
        particles=tuple(ParticleSnapshot(p.x, p.y, p.hue, p.life) for p in env.particles),
        stats=stats,
    )
