"""
organism_sim module: world/world.py

Environment state container: bounds, resource fields, temperature and the
run counters. One instance per simulation run.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
import random
from typing import Optional

from config import SimConfig, FOOD_SPAWN_SCALE, TOXIN_SPAWN_SCALE, PARTICLE_SPAWN_CHANCE, PARTICLE_LIFE
from world.resources import FoodField, ToxinField, ParticleField


def temperature_at(time: int, cfg: SimConfig) -> float:
    return cfg.temperature_optimum + cfg.temperature_amplitude * math.sin(time * cfg.temperature_rate)


@dataclass
class Environment:
    w: int
    h: int
    food: FoodField
    toxins: ToxinField
    particles: ParticleField
    temperature: float
    time: int = 0
    generation: int = 0
    total_born: int = 0
    total_died: int = 0

    @staticmethod
    def create(cfg: SimConfig, rng: Optional[random.Random] = None) -> "Environment":
        rng = rng or random
        food = FoodField(
            cfg.width, cfg.height,
            target=cfg.initial_food,
            abundance=cfg.food_abundance,
            lifetime=cfg.food_lifetime,
            spawn_scale=FOOD_SPAWN_SCALE,
        )
        food.seed(cfg.initial_food, rng)
        return Environment(
            w=cfg.width,
            h=cfg.height,
            food=food,
            toxins=ToxinField(
                cfg.width, cfg.height,
                toxicity=cfg.toxicity,
                lifetime=cfg.toxin_lifetime,
                spawn_scale=TOXIN_SPAWN_SCALE,
            ),
            particles=ParticleField(
                cfg.width, cfg.height,
                spawn_chance=PARTICLE_SPAWN_CHANCE,
                life=PARTICLE_LIFE,
                enabled=cfg.particles,
            ),
            temperature=cfg.temperature_optimum,
        )

    def update(self, cfg: SimConfig, rng: Optional[random.Random] = None) -> None:
        rng = rng or random
        self.time += 1
        self.temperature = temperature_at(self.time, cfg)
        self.food.update(rng)
        self.toxins.update(rng)
        self.particles.update(rng)
