"""
organism_sim module: evolution/mutate.py

Mutation + crossover operators for genomes.
"""

from __future__ import annotations
import random
from typing import Optional

import config
from organism.genome import Genome, TRAIT_BOUNDS, Trait, clamp_trait, sanitize_genome, wrap_hue

# (random() - 0.5) * JITTER_SPAN -> [-0.1, 0.1)
JITTER_SPAN = 0.20
HUE_JITTER_SCALE = 40.0
LIFESPAN_JITTER_SCALE = config.LIFESPAN_RANDOM_ADD * 0.2

SCALED_TRAITS = frozenset({
    Trait.SIZE,
    Trait.SPEED,
    Trait.ENERGY_EFFICIENCY,
    Trait.REPRODUCTION_THRESHOLD,
    Trait.REPRODUCTION_SPEED,
    Trait.TOXIN_RESISTANCE,
    Trait.SENSOR_RANGE,
})
UNIT_TRAITS = frozenset({Trait.AGGRESSIVENESS, Trait.SOCIABILITY})


def mutate_trait(trait: Trait, value: float, amount: float) -> float:
    """
    Apply one perturbation of size ``amount`` (in [-0.1, 0.1)) to ``value``.
    """
    band = TRAIT_BOUNDS[trait].tolerance
    if trait in SCALED_TRAITS:
        return clamp_trait(trait, value * (1.0 + amount), band)
    if trait in UNIT_TRAITS:
        return clamp_trait(trait, value + amount, band)
    if trait is Trait.LIFESPAN:
        return clamp_trait(trait, value + amount * LIFESPAN_JITTER_SCALE, band)
    if trait is Trait.HUE:
        return wrap_hue(value + amount * HUE_JITTER_SCALE)
    raise ValueError(f"no mutation rule for trait {trait!r}")


def mutate_genome(genome: Genome, rate: float = config.MUTATION_RATE, rng: Optional[random.Random] = None) -> Genome:
    """
    Return a mutated copy of ``genome``.

    Each trait mutates independently with probability ``rate``. The result
    is always clamped into the safety band, so later arithmetic never sees
    a non-finite or out-of-range value.
    """
    rng = rng or random
    changes = {}
    for trait in Trait:
        if rng.random() < rate:
            amount = (rng.random() - 0.5) * JITTER_SPAN
            changes[trait.value] = mutate_trait(trait, genome.value(trait), amount)
    return sanitize_genome(genome.with_traits(**changes))


def crossover(a: Genome, b: Genome, rng: Optional[random.Random] = None) -> Genome:
    """
    Uniform crossover: every trait comes from ``a`` or ``b`` with equal odds.
    """
    rng = rng or random
    picked = {}
    for trait in Trait:
        src = a if rng.random() < 0.5 else b
        picked[trait.value] = src.value(trait)
    return Genome(**picked)
