"""
organism_sim module: simulation/scheduler.py

Population tick scheduler.

``step`` is the only thing that adds or removes organisms. One call is one
atomic transition of (population, environment); hosts read state between
calls, never during one.

Tick order:
  environment -> organism updates (shared pre-tick snapshot) -> feeding ->
  reproduction (capped) -> deaths -> newborns -> statistics
"""

from __future__ import annotations
from dataclasses import dataclass
import random
from typing import List, Optional, Tuple

from loguru import logger

from config import SimConfig
from evolution.reproduction import can_reproduce, reproduce
from evolution.selection import pick_mate
from organism.behavior import snapshot_peers
from organism.genome import random_genome
from organism.metabolism import feed
from organism.organism import Organism
from simulation.snapshot import WorldSnapshot, take_snapshot
from world.world import Environment

Population = List[Organism]


@dataclass(frozen=True)
class Statistics:
    population: int = 0
    avg_size: float = 0.0
    avg_speed: float = 0.0
    avg_energy: float = 0.0
    species: int = 0
    total_born: int = 0
    total_died: int = 0
    tick: int = 0
    generation: int = 0
    temperature: float = 0.0
    food: int = 0
    toxins: int = 0


def compute_statistics(population: Population, env: Environment) -> Statistics:
    n = len(population)
    common = dict(
        population=n,
        total_born=env.total_born,
        total_died=env.total_died,
        tick=env.time,
        generation=env.generation,
        temperature=env.temperature,
        food=len(env.food),
        toxins=len(env.toxins),
    )
    if n == 0:
        return Statistics(**common)
    return Statistics(
        avg_size=sum(o.size for o in population) / n,
        avg_speed=sum(o.speed for o in population) / n,
        avg_energy=sum(o.energy for o in population) / n,
        species=len({o.species for o in population}),
        **common,
    )


def initialize(cfg: Optional[SimConfig] = None, rng: Optional[random.Random] = None) -> Tuple[Population, Environment]:
    """
    Fresh run: ``initial_population`` random organisms and ``initial_food``
    food items. Counters start at zero.
    """
    cfg = cfg or SimConfig()
    rng = rng or random
    env = Environment.create(cfg, rng)
    population = [
        Organism.initial(rng.random() * cfg.width, rng.random() * cfg.height, random_genome(rng), cfg)
        for _ in range(cfg.initial_population)
    ]
    logger.info(
        f"Initialized world {cfg.width}x{cfg.height} with {len(population)} organisms and {len(env.food)} food"
    )
    return population, env


def resolve_feeding(population: Population, env: Environment, cfg: SimConfig) -> int:
    """
    Each food item goes to the first living organism (population order) that
    can reach it. Returns the number of items eaten.
    """
    eaten = []
    for food in env.food:
        for org in population:
            if not org.is_dead() and org.can_eat(food, cfg):
                feed(org, cfg)
                eaten.append(food)
                break
    if eaten:
        env.food.remove(eaten)
    return len(eaten)


def resolve_reproduction(
    population: Population,
    env: Environment,
    cfg: SimConfig,
    rng: Optional[random.Random] = None,
) -> Population:
    rng = rng or random
    newborns: Population = []
    for org in population:
        if len(population) + len(newborns) >= cfg.max_population:
            break
        if org.is_dead() or not can_reproduce(org, cfg):
            continue
        mate = pick_mate(org, population, cfg.mate_range_factor, rng)
        child = reproduce(org, mate, env, cfg, rng)
        if child is not None:
            newborns.append(child)
    return newborns


def step(
    population: Population,
    env: Environment,
    cfg: Optional[SimConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[Population, Environment, Statistics]:
    """
    Advance the run by one tick.

    An empty population is a no-op: nothing moves, nothing spawns, and the
    returned statistics report zero organisms.
    """
    cfg = cfg or SimConfig()
    rng = rng or random
    if not population:
        return [], env, compute_statistics([], env)

    env.update(cfg, rng)

    peers = snapshot_peers(population)
    for org in population:
        org.update(env, peers, cfg, rng)

    resolve_feeding(population, env, cfg)
    newborns = resolve_reproduction(population, env, cfg, rng)

    survivors = [o for o in population if not o.is_dead()]
    died = len(population) - len(survivors)
    next_population = survivors + newborns

    env.total_born += len(newborns)
    env.total_died += died
    if newborns or died:
        logger.debug(f"tick {env.time}: +{len(newborns)} born, -{died} died, {len(next_population)} alive")

    if next_population and env.time % cfg.generation_interval == 0:
        env.generation += 1
        logger.info(f"Generation {env.generation} at tick {env.time} ({len(next_population)} alive)")
    if not next_population:
        logger.info(f"Extinction at tick {env.time} after {env.total_born} births")

    return next_population, env, compute_statistics(next_population, env)


class Simulation:
    """
    Stateful holder for hosts: owns the current population + environment and
    hands out snapshots between steps.
    """

    def __init__(self, cfg: Optional[SimConfig] = None, seed: Optional[int] = None):
        self.cfg = cfg or SimConfig()
        self.rng = random.Random(seed)
        self.population: Population = []
        self.env: Environment
        self.stats = Statistics()
        self.reset()

    def reset(self) -> None:
        self.population, self.env = initialize(self.cfg, self.rng)
        self.stats = compute_statistics(self.population, self.env)

    @property
    def extinct(self) -> bool:
        return not self.population

    def step(self) -> Statistics:
        self.population, self.env, self.stats = step(self.population, self.env, self.cfg, self.rng)
        return self.stats

    def snapshot(self) -> WorldSnapshot:
        return take_snapshot(self.population, self.env, self.stats)
