"""
organism_sim module: evolution/reproduction.py

Live reproduction: eligibility, parental cost, child genome, child placement.
"""

from __future__ import annotations
import math
import random
from typing import TYPE_CHECKING, Optional

from config import SimConfig
from evolution.mutate import crossover, mutate_genome
from organism.genome import Trait, clone
from organism.organism import Organism
from world.physics import wrap_position

if TYPE_CHECKING:
    from world.world import Environment


def can_reproduce(org: Organism, cfg: SimConfig) -> bool:
    return (
        org.energy > org.reproduction_threshold
        and org.reproduction_cooldown <= 0
        and org.age > cfg.min_reproduction_age
    )


def cooldown_for(org: Organism, cfg: SimConfig) -> int:
    factor = org.genome.safe(Trait.REPRODUCTION_SPEED)
    if factor <= 0:
        factor = 1.0
    return int(math.floor(cfg.base_cooldown / factor))


def reproduce(
    parent: Organism,
    mate: Optional[Organism],
    env: "Environment",
    cfg: SimConfig,
    rng: Optional[random.Random] = None,
) -> Optional[Organism]:
    """
    Produce one child, or None if the parent is not eligible.

    The parent pays a fixed share of max energy and enters cooldown. With a
    mate there is a ``crossover_chance`` of uniform crossover, otherwise the
    parent genome is cloned. The child genome is always mutated.
    """
    rng = rng or random
    if not can_reproduce(parent, cfg):
        return None

    parent.energy -= parent.max_energy * cfg.reproduction_cost_factor
    parent.reproduction_cooldown = cooldown_for(parent, cfg)

    if mate is not None and rng.random() < cfg.crossover_chance:
        child_genome = crossover(parent.genome, mate.genome, rng)
    else:
        child_genome = clone(parent.genome)
    child_genome = mutate_genome(child_genome, cfg.mutation_rate, rng)

    angle = rng.random() * math.pi * 2
    distance = parent.size + cfg.child_spawn_margin
    x, y = wrap_position(
        parent.x + math.cos(angle) * distance,
        parent.y + math.sin(angle) * distance,
        env.w,
        env.h,
    )
    return Organism.newborn(x, y, child_genome, cfg)
