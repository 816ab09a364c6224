"""
organism_sim module: organism/metabolism.py

Energy bookkeeping: environmental stress, per-tick consumption, feeding.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from config import SimConfig, EFFICIENCY_MIN_DIVISOR, EFFICIENCY_PENALTY
from organism.genome import Trait

if TYPE_CHECKING:
    from organism.organism import Organism


def environmental_stress(org: "Organism", temperature: float, toxins_in_range: int, cfg: SimConfig) -> float:
    """
    Temperature deviation plus damage from the toxins the organism can sense.
    """
    temp_stress = abs(temperature - cfg.temperature_optimum) * cfg.temperature_stress_factor
    resistance = org.genome.safe(Trait.TOXIN_RESISTANCE)
    toxin_stress = toxins_in_range * (1.0 - resistance) * cfg.toxin_damage_factor
    return temp_stress + toxin_stress


def energy_consumption(org: "Organism", stress: float, cfg: SimConfig) -> float:
    consumed = cfg.metabolic_rate_base + org.size * cfg.size_cost_factor + stress * cfg.stress_impact_multiplier

    efficiency = org.genome.safe(Trait.ENERGY_EFFICIENCY)
    if efficiency > EFFICIENCY_MIN_DIVISOR:
        return consumed / efficiency
    return consumed * EFFICIENCY_PENALTY


def feed(org: "Organism", cfg: SimConfig) -> None:
    org.energy = min(org.max_energy, org.energy + cfg.food_energy_gain)
