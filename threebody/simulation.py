#!/usr/bin/env python3
"""
Simulation state and the per-frame step.

Simulation owns the live bodies, the trail buffer and the running flag. The
presentation layer calls step() once per frame with the current configuration and
viewport size, then reads bodies, trails and running to draw the frame.

Step order while running:
1) snapshot the bodies
2) compute every new velocity from the snapshot (elastic response or gravity)
3) integrate positions
4) record trails
5) test for a halting collision
"""
import logging
import random
from typing import List, Optional, Sequence, Tuple

from .collisions import elastic_response, find_collision
from .config import SimulationConfig
from .constants import MASS_RANGE, SPAWN_MARGIN, VELOCITY_RANGE
from .data_models import Body, snapshot
from .physics import NBodyPhysics, Viewport
from .trails import TrailBuffer
from .vector_utils import vec_add

logger = logging.getLogger(__name__)


def spawn_bodies(rng: random.Random, viewport: Viewport, config: SimulationConfig) -> List[Body]:
    """
    Create config.body_count bodies with random color, position, velocity and mass.

    Positions stay SPAWN_MARGIN away from every edge of the viewport.
    """
    width, height = viewport
    bodies = []
    for body_id in range(config.body_count):
        color = (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255), 255)
        position = (
            rng.uniform(SPAWN_MARGIN, width - SPAWN_MARGIN),
            rng.uniform(SPAWN_MARGIN, height - SPAWN_MARGIN),
        )
        velocity = (rng.uniform(*VELOCITY_RANGE), rng.uniform(*VELOCITY_RANGE))
        mass = rng.uniform(*MASS_RANGE)
        body = Body(
            id=body_id,
            mass=mass,
            radius=config.radius_for(mass),
            position=position,
            velocity=velocity,
            color=color,
        )
        logger.debug("Spawned body %d: mass=%.2f pos=(%.1f, %.1f) vel=(%.2f, %.2f)",
                     body.id, mass, position[0], position[1], velocity[0], velocity[1])
        bodies.append(body)
    return bodies


class Simulation:
    """
    Bodies, trails and the Running/Stopped state of one simulation session.

    The random stream is seeded once here; resets keep drawing from it, so the
    second run differs from the first.
    """

    def __init__(self, config: SimulationConfig, viewport: Viewport,
                 bodies: Optional[Sequence[Body]] = None):
        self.rng = random.Random(config.seed)
        self.trails = TrailBuffer(config.trail_decay, config.trail_cutoff)
        self.bodies: List[Body] = []
        self.running = True
        self.steps = 0
        self.collided: Optional[Tuple[int, int]] = None
        if bodies is None:
            self.reset(config, viewport)
        else:
            self.load(bodies)
        logger.info("Simulation created with %d bodies (seed %d)", len(self.bodies), config.seed)

    def load(self, bodies: Sequence[Body]) -> None:
        """Replace the whole body set with the given bodies and start running."""
        if len(bodies) < 2:
            raise ValueError(f"at least 2 bodies are required, got {len(bodies)}")
        self.bodies = [b.copy() for b in bodies]
        self.trails.clear()
        self.running = True
        self.steps = 0
        self.collided = None

    def reset(self, config: SimulationConfig, viewport: Viewport) -> None:
        """Discard every body and spawn a fresh random set."""
        self.load(spawn_bodies(self.rng, viewport, config))
        logger.info("Reset: spawned %d bodies in %dx%d viewport",
                    len(self.bodies), viewport[0], viewport[1])

    def step(self, config: SimulationConfig, viewport: Viewport) -> bool:
        """
        Advance the simulation by one frame.

        Returns the running flag after the step. A stopped simulation does nothing
        unless auto_restart is set, in which case it resets and resumes.
        """
        if not self.running:
            if config.auto_restart:
                logger.info("Auto-restart after collision between bodies %s", self.collided)
                self.reset(config, viewport)
            return self.running

        wrap_to = viewport if config.wrap else None
        physics = NBodyPhysics(config.gravity_scale, config.wrap)

        previous = snapshot(self.bodies)
        updated = snapshot(previous)
        for body in updated:
            bounced = elastic_response(body, previous, wrap_to) if config.elastic else None
            if bounced is not None:
                body.velocity = bounced
            else:
                body.velocity = vec_add(body.velocity,
                                        physics.velocity_increment(body, previous, viewport))
        for body in updated:
            physics.integrate(body, viewport)
        self.bodies = list(updated)
        self.steps += 1

        self.trails.decay = config.trail_decay
        self.trails.cutoff = config.trail_cutoff
        if config.trails:
            self.trails.record(self.bodies)
        elif len(self.trails):
            self.trails.clear()

        if not config.elastic:
            hit = find_collision(self.bodies, wrap_to)
            if hit is not None:
                self.running = False
                self.collided = hit
                logger.info("Collision between bodies %d and %d at step %d; halting",
                            hit[0], hit[1], self.steps)
        return self.running
