"""
organism_sim module: organism/behavior.py

Perception + steering policy.

Neighbour queries are plain O(n) scans with squared distances. The steering
rules run in a fixed order and each one adds onto the current velocity:

  1. forage   (closest food, urgent when hungry)
  2. avoid    (closest toxin)
  3. flock    (same-species centroid, sociable organisms only)
  4. predate  (chase weaker / flee bigger other-species neighbours)
  5. explore  (random nudge when no food was chased)

and the result is capped at the organism's genetic top speed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar, TYPE_CHECKING

from organism.genome import Trait
from world.physics import MAX_SPEED_FACTOR, clamp_speed, move_away, move_towards

if TYPE_CHECKING:
    from organism.organism import Organism
    from world.world import Environment

T = TypeVar("T")

HUNGER_FRACTION = 0.7
FORAGE_URGENT = 1.5
FORAGE_IDLE = 1.0
TOXIN_AVOID = 1.2
SOCIAL_MIN = 0.6
SOCIAL_GAIN = 0.3
AGGRESSION_MIN = 0.7
AGGRESSION_GAIN = 0.5
DOMINANCE_SIZE = 1.1
DOMINANCE_ENERGY = 1.2
THREAT_SIZE = 1.2
FLEE_STRENGTH = 0.7
EXPLORE_CHANCE = 0.12
EXPLORE_IMPULSE = 0.35


@dataclass(frozen=True)
class Peer:
    """
    Frozen view of one organism at the start of a tick.
    """
    ref: "Organism"
    x: float
    y: float
    energy: float
    size: float
    species: int


def snapshot_peers(population: Iterable["Organism"]) -> List[Peer]:
    return [Peer(ref=o, x=o.x, y=o.y, energy=o.energy, size=o.size, species=o.species) for o in population]


@dataclass
class Perception:
    food: list = field(default_factory=list)
    toxins: list = field(default_factory=list)
    peers: List[Peer] = field(default_factory=list)


def find_nearby(items: Iterable[T], x: float, y: float, radius: float) -> List[T]:
    """
    Items strictly closer than ``radius`` to (x, y), in input order.
    """
    r2 = radius * radius
    out: List[T] = []
    for it in items:
        dx = it.x - x
        dy = it.y - y
        if dx * dx + dy * dy < r2:
            out.append(it)
    return out


def closest(items: Iterable[T], x: float, y: float) -> Optional[T]:
    """
    Nearest item, or None if there are none. Ties go to the earlier item.
    """
    best = None
    best_d2 = float("inf")
    for it in items:
        dx = it.x - x
        dy = it.y - y
        d2 = dx * dx + dy * dy
        if d2 < best_d2:
            best_d2 = d2
            best = it
    return best


def centroid(items: Sequence) -> Optional[Tuple[float, float]]:
    if not items:
        return None
    n = len(items)
    return (sum(it.x for it in items) / n, sum(it.y for it in items) / n)


def perceive(org: "Organism", env: "Environment", peers: Sequence[Peer]) -> Perception:
    r = org.sensor_range
    others = [p for p in peers if p.ref is not org]
    return Perception(
        food=find_nearby(env.food, org.x, org.y, r),
        toxins=find_nearby(env.toxins, org.x, org.y, r),
        peers=find_nearby(others, org.x, org.y, r),
    )


def behave(org: "Organism", seen: Perception, rng: Optional[random.Random] = None) -> None:
    rng = rng or random
    g = org.genome

    moved_for_food = False
    target = closest(seen.food, org.x, org.y)
    if target is not None:
        hungry = org.energy < org.reproduction_threshold or org.energy < org.max_energy * HUNGER_FRACTION
        move_towards(org, target.x, target.y, FORAGE_URGENT if hungry else FORAGE_IDLE)
        moved_for_food = True

    toxin = closest(seen.toxins, org.x, org.y)
    if toxin is not None:
        move_away(org, toxin.x, toxin.y, TOXIN_AVOID)

    if seen.peers:
        same = [p for p in seen.peers if p.species == org.species]
        different = [p for p in seen.peers if p.species != org.species]

        sociability = g.safe(Trait.SOCIABILITY)
        if sociability > SOCIAL_MIN and same:
            cx, cy = centroid(same)
            move_towards(org, cx, cy, SOCIAL_GAIN * sociability)

        aggressiveness = g.safe(Trait.AGGRESSIVENESS)
        if aggressiveness > AGGRESSION_MIN and different:
            rival = closest(different, org.x, org.y)
            if org.size >= rival.size * DOMINANCE_SIZE and org.energy >= rival.energy * DOMINANCE_ENERGY:
                move_towards(org, rival.x, rival.y, AGGRESSION_GAIN * aggressiveness)
            elif rival.size >= org.size * THREAT_SIZE:
                move_away(org, rival.x, rival.y, FLEE_STRENGTH)

    if not moved_for_food and rng.random() < EXPLORE_CHANCE:
        org.vx += (rng.random() - 0.5) * EXPLORE_IMPULSE
        org.vy += (rng.random() - 0.5) * EXPLORE_IMPULSE

    clamp_speed(org, org.speed * MAX_SPEED_FACTOR)
