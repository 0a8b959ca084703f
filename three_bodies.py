#!/usr/bin/env python3
"""
Three Bodies application entry point.

What this module does
- Parses command-line options into a SimulationConfig and sets up logging.
- Opens a resizable Pygame window and runs the frame loop:
  read input -> apply toggles / reset -> step physics -> draw -> tick.
- Optionally opens a Dear PyGui control panel (--panel) that is rendered from the same
  loop. Everything runs on the main thread.

Controls
- Space: reset, Esc: quit, H: cycle overlay, R: auto-restart, E: elastic collisions,
  W: screen wrap, T: trails.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python three_bodies.py` (see `--help` for options)
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from threebody.config import SimulationConfig, UiDetail
from threebody.constants import (
    DEFAULT_BODY_COUNT,
    DEFAULT_FIXED_RADIUS,
    DEFAULT_RADIUS_POLICY,
    DEFAULT_SEED,
    FPS,
    GRAVITY_SCALE,
    RADIUS_POLICIES,
    TRAIL_DECAY,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    WINDOW_TITLE,
)
from threebody.controls import apply_toggles, commands_from_events
from threebody.renderer import Renderer
from threebody.simulation import Simulation

logger = logging.getLogger("three_bodies")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Interactive three-body gravity toy")
    p.add_argument("--bodies", type=int, default=DEFAULT_BODY_COUNT, help="number of bodies (>= 2)")
    p.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed, used once at start")
    p.add_argument("--wrap", action="store_true", help="wrap bodies around the screen edges")
    p.add_argument("--elastic", action="store_true", help="bounce bodies instead of halting on collision")
    p.add_argument("--auto-restart", action="store_true", help="reset automatically after a collision")
    p.add_argument("--no-trails", action="store_true", help="do not record trails")
    p.add_argument("--trail-decay", type=float, default=TRAIL_DECAY, help="trail alpha multiplier per frame")
    p.add_argument("--no-trail-decay", action="store_true", help="keep every trail sample forever")
    p.add_argument("--radius-policy", choices=RADIUS_POLICIES, default=DEFAULT_RADIUS_POLICY,
                   help="collision/render radius: equal to mass, or fixed")
    p.add_argument("--fixed-radius", type=float, default=DEFAULT_FIXED_RADIUS,
                   help="radius in pixels when --radius-policy=fixed")
    p.add_argument("--gravity-scale", type=float, default=GRAVITY_SCALE)
    p.add_argument("--ui", choices=[d.value for d in UiDetail], default=UiDetail.MINIMAL.value,
                   help="overlay detail level")
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("--width", type=int, default=VIEW_WIDTH)
    p.add_argument("--height", type=int, default=VIEW_HEIGHT)
    p.add_argument("--panel", action="store_true", help="open the Dear PyGui control panel")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        trails=not args.no_trails,
        trail_decay=None if args.no_trail_decay else args.trail_decay,
        wrap=args.wrap,
        elastic=args.elastic,
        ui_detail=UiDetail(args.ui),
        auto_restart=args.auto_restart,
        radius_policy=args.radius_policy,
        fixed_radius=args.fixed_radius,
        gravity_scale=args.gravity_scale,
        body_count=args.bodies,
        seed=args.seed,
    )


def run(config: SimulationConfig, size, fps: int, panel=None) -> None:
    pygame.init()
    pygame.display.set_caption(WINDOW_TITLE)
    surface = pygame.display.set_mode(size, pygame.RESIZABLE)
    clock = pygame.time.Clock()
    renderer = Renderer()

    sim = Simulation(config, surface.get_size())
    while True:
        commands = commands_from_events(pygame.event.get())
        if panel is not None:
            if not panel.is_open:
                commands.quit = True
            commands = commands.merge(panel.take_commands())
        if commands.quit:
            break

        config = apply_toggles(config, commands)
        surface = pygame.display.get_surface()
        viewport = surface.get_size()
        if commands.reset:
            sim.reset(config, viewport)
        sim.step(config, viewport)

        renderer.draw(surface, sim, config)
        pygame.display.flip()
        if panel is not None:
            panel.sync(sim, config)

        clock.tick(fps)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    panel = None
    if args.panel:
        from threebody.panel import ControlPanel
        panel = ControlPanel(config)

    try:
        run(config, (args.width, args.height), args.fps, panel)
    finally:
        pygame.quit()
        if panel is not None:
            panel.close()
    logger.info("Bye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
