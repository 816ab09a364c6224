"""
organism_sim module: organism/genome.py

Heritable trait set.

Design goals:
- Closed trait enumeration, one float per trait
- Every trait carries three bands:
    * generation range (random_genome draws here)
    * tolerance band (mutation may drift this far)
    * safety band (hard clamp applied after every mutation)
- Genomes are frozen; mutation builds a new one
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from enum import Enum
import math
import random
from typing import Dict, Optional, Tuple

import config


class Trait(Enum):
    """Trait tags. Values are the Genome field names."""
    SIZE = "size"
    SPEED = "speed"
    ENERGY_EFFICIENCY = "energy_efficiency"
    REPRODUCTION_THRESHOLD = "reproduction_threshold"
    REPRODUCTION_SPEED = "reproduction_speed"
    LIFESPAN = "lifespan"
    AGGRESSIVENESS = "aggressiveness"
    SOCIABILITY = "sociability"
    TOXIN_RESISTANCE = "toxin_resistance"
    SENSOR_RANGE = "sensor_range"
    HUE = "hue"


@dataclass(frozen=True)
class TraitBounds:
    low: float
    high: float
    tolerance: Tuple[float, float]
    safety: Tuple[float, float]


def _scaled(lo: float, hi: float) -> TraitBounds:
    # multiplicative traits: tolerance 0.7x..1.3x, safety 0.5x..1.5x
    return TraitBounds(low=lo, high=hi, tolerance=(lo * 0.7, hi * 1.3), safety=(lo * 0.5, hi * 1.5))


_LIFESPAN_HIGH = config.LIFESPAN_BASE + config.LIFESPAN_RANDOM_ADD

TRAIT_BOUNDS: Dict[Trait, TraitBounds] = {
    Trait.SIZE: _scaled(*config.SIZE_RANGE),
    Trait.SPEED: _scaled(*config.SPEED_RANGE),
    Trait.ENERGY_EFFICIENCY: TraitBounds(
        *config.ENERGY_EFFICIENCY_RANGE,
        tolerance=(config.ENERGY_EFFICIENCY_RANGE[0] * 0.7, config.ENERGY_EFFICIENCY_RANGE[1] * 1.3),
        safety=(0.1, config.ENERGY_EFFICIENCY_RANGE[1] * 1.5),
    ),
    Trait.REPRODUCTION_THRESHOLD: _scaled(*config.REPRO_THRESHOLD_FACTOR_RANGE),
    Trait.REPRODUCTION_SPEED: TraitBounds(
        *config.REPRO_SPEED_FACTOR_RANGE,
        tolerance=(config.REPRO_SPEED_FACTOR_RANGE[0] * 0.7, config.REPRO_SPEED_FACTOR_RANGE[1] * 1.3),
        safety=(0.1, config.REPRO_SPEED_FACTOR_RANGE[1] * 1.5),
    ),
    # lifespan only has a floor; drift upward is unbounded but finite
    Trait.LIFESPAN: TraitBounds(
        config.LIFESPAN_BASE,
        _LIFESPAN_HIGH,
        tolerance=(config.LIFESPAN_BASE * 0.5, math.inf),
        safety=(config.LIFESPAN_BASE * 0.3, math.inf),
    ),
    Trait.AGGRESSIVENESS: TraitBounds(*config.AGGRESSIVENESS_RANGE, tolerance=(0.0, 1.0), safety=(0.0, 1.0)),
    Trait.SOCIABILITY: TraitBounds(*config.SOCIABILITY_RANGE, tolerance=(0.0, 1.0), safety=(0.0, 1.0)),
    Trait.TOXIN_RESISTANCE: _scaled(*config.TOXIN_RESISTANCE_RANGE),
    Trait.SENSOR_RANGE: _scaled(*config.SENSOR_RANGE_RANGE),
    Trait.HUE: TraitBounds(*config.HUE_RANGE, tolerance=config.HUE_RANGE, safety=config.HUE_RANGE),
}

SPECIES_COUNT = 8


@dataclass(frozen=True)
class Genome:
    size: float
    speed: float
    energy_efficiency: float
    reproduction_threshold: float
    reproduction_speed: float
    lifespan: float
    aggressiveness: float
    sociability: float
    toxin_resistance: float
    sensor_range: float
    hue: float

    def value(self, trait: Trait) -> float:
        return getattr(self, trait.value)

    def safe(self, trait: Trait) -> float:
        """Trait value, or its generation minimum when non-finite."""
        v = self.value(trait)
        if not math.isfinite(v):
            return TRAIT_BOUNDS[trait].low
        return v

    def with_traits(self, **changes: float) -> "Genome":
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def random_genome(rng: Optional[random.Random] = None) -> Genome:
    rng = rng or random
    values = {}
    for trait, b in TRAIT_BOUNDS.items():
        if trait is Trait.HUE:
            # half-open [0, 360)
            values[trait.value] = rng.random() * b.high
        else:
            values[trait.value] = b.low + rng.random() * (b.high - b.low)
    return Genome(**values)


def clone(genome: Genome) -> Genome:
    # every field is a float, so a field-wise copy is a deep copy
    return Genome(**genome.as_dict())


def species(genome: Genome) -> int:
    """
    Coarse 8-way class id. Distant genomes can alias onto the same id.
    """
    raw = genome.safe(Trait.SIZE) + genome.safe(Trait.SPEED) * 5 + genome.safe(Trait.AGGRESSIVENESS) * 10
    return int(math.floor(raw % SPECIES_COUNT))


def clamp_trait(trait: Trait, v: float, band: Tuple[float, float]) -> float:
    if not math.isfinite(v):
        return TRAIT_BOUNDS[trait].low
    lo, hi = band
    return max(lo, min(hi, v))


def wrap_hue(h: float) -> float:
    if not math.isfinite(h):
        return TRAIT_BOUNDS[Trait.HUE].low
    h = h % 360.0
    # tiny negatives round up to exactly 360.0
    return 0.0 if h >= 360.0 else h


def sanitize_genome(genome: Genome) -> Genome:
    """
    Clamp every trait into its safety band. Non-finite values fall back to
    the generation minimum.
    """
    values = {}
    for trait, b in TRAIT_BOUNDS.items():
        v = genome.value(trait)
        if trait is Trait.HUE:
            values[trait.value] = wrap_hue(v)
        else:
            values[trait.value] = clamp_trait(trait, v, b.safety)
    return Genome(**values)
