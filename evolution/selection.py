"""
organism_sim module: evolution/selection.py

Mate selection helpers.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING, List, Optional, Sequence

import config

if TYPE_CHECKING:
    from organism.organism import Organism


def mate_candidates(
    org: "Organism",
    population: Sequence["Organism"],
    range_factor: float = config.MATE_RANGE_FACTOR,
) -> List["Organism"]:
    """
    Living same-species organisms within ``range_factor`` x sensor range.
    """
    reach = org.sensor_range * range_factor
    reach2 = reach * reach
    out: List["Organism"] = []
    for other in population:
        if other is org or other.species != org.species or other.is_dead():
            continue
        dx = other.x - org.x
        dy = other.y - org.y
        if dx * dx + dy * dy < reach2:
            out.append(other)
    return out


def pick_mate(
    org: "Organism",
    population: Sequence["Organism"],
    range_factor: float = config.MATE_RANGE_FACTOR,
    rng: Optional[random.Random] = None,
) -> Optional["Organism"]:
    rng = rng or random
    pool = mate_candidates(org, population, range_factor)
    if not pool:
        return None
    return rng.choice(pool)
