"""
Continuous live simulation: organisms eat, reproduce, and evolve in real time.

SPACE pauses/resumes, R resets, TAB toggles debug labels, ESC quits.
``--headless`` runs without a window and logs statistics instead.
"""

from __future__ import annotations
import argparse
from typing import Optional

import pygame
from loguru import logger

import config
from render.renderer import draw_extinction, draw_hud, draw_world
from render.trails import TrailBuffer
from simulation.scheduler import Simulation, Statistics


def log_stats(stats: Statistics) -> None:
    logger.info(
        f"tick {stats.tick} gen {stats.generation}: alive={stats.population} species={stats.species} "
        f"born={stats.total_born} died={stats.total_died} "
        f"size={stats.avg_size:.2f} speed={stats.avg_speed:.2f} energy={stats.avg_energy:.2f} "
        f"temp={stats.temperature:.3f} food={stats.food} toxins={stats.toxins}"
    )


def run_headless(sim: Simulation, ticks: int, report_every: int = 500) -> Statistics:
    """
    Step ``ticks`` times or until extinction, logging every ``report_every``.
    """
    stats = sim.stats
    for _ in range(ticks):
        if sim.extinct:
            logger.warning(f"Population extinct at tick {sim.env.time}; stopping")
            break
        stats = sim.step()
        if report_every and stats.tick % report_every == 0:
            log_stats(stats)
    log_stats(stats)
    return stats


def run_viewer(sim: Simulation, sub_steps: int = config.SIM_SPEED) -> None:
    pygame.init()
    screen = pygame.display.set_mode((sim.cfg.width, sim.cfg.height))
    pygame.display.set_caption("organism_sim (Digital Evolution)")
    clock = pygame.time.Clock()
    trails = TrailBuffer()

    paused = True
    debug = False
    running = True
    logger.info("Viewer started (SPACE to evolve)")

    while running:
        clock.tick(config.FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_SPACE:
                    paused = not paused
                    logger.info("Paused" if paused else "Resumed")
                elif e.key == pygame.K_r:
                    sim.reset()
                    trails.clear()
                    paused = True
                    logger.info("Simulation reset")
                elif e.key == pygame.K_TAB:
                    debug = not debug

        if not paused and not sim.extinct:
            for _ in range(max(1, sub_steps)):
                sim.step()
                if sim.extinct:
                    paused = True
                    break

        snap = sim.snapshot()
        trails.record(snap.organisms)

        draw_world(screen, snap, trails, debug=debug)
        draw_hud(screen, snap, paused=paused)
        if sim.extinct and snap.tick > 0:
            draw_extinction(screen)

        pygame.display.flip()

    pygame.quit()
    logger.info("Viewer closed")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the digital evolution simulation.")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--ticks", type=int, default=5000, help="ticks to run in headless mode")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--population", type=int, default=config.START_POP)
    parser.add_argument("--speed", type=int, default=config.SIM_SPEED, help="steps per rendered frame")
    args = parser.parse_args(argv)

    cfg = config.SimConfig(initial_population=args.population)
    sim = Simulation(cfg, seed=args.seed)

    if args.headless:
        run_headless(sim, args.ticks)
    else:
        run_viewer(sim, sub_steps=args.speed)


if __name__ == "__main__":
    main()
