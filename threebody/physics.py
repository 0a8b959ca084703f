#!/usr/bin/env python3
"""
Core Physics Engine for Three Bodies

Responsibilities
- Compute the gravitational velocity increment of one body from a snapshot of all bodies,
  optionally measuring distances on a wrapped (toroidal) viewport.
- Advance a body's position by its velocity (explicit Euler, one frame per step),
  optionally wrapping it back into the viewport.
- Provide small diagnostics (kinetic energy, total momentum) for the HUD.

Units and conventions
- Positions are in pixels, velocities in pixels per frame. Time advances one frame per step.
- The gravitational constant is 1; the summed force is scaled by gravity_scale (9.81 by
  default) and divided by the body's own mass.

Numerical notes
- No softening. Two bodies at the same position have no direction between them and the
  normalisation raises ZeroDivisionError. Collision checks trigger long before that in
  practice, so the case is left unguarded.
- Complexity is O(N^2) per step, which is irrelevant for a handful of bodies.
"""

from typing import Optional, Sequence, Tuple

from .constants import GRAVITY_SCALE
from .data_models import Body
from .vector_utils import Vec2, vec_add, vec_len, vec_norm, vec_scale, vec_sub

Viewport = Tuple[float, float]


def wrapped_axis(delta: float, extent: float) -> float:
    """Pick the shorter of the two ways around an axis of the given extent."""
    if abs(delta) > extent / 2:
        return delta - extent if delta > 0 else delta + extent
    return delta


def displacement(origin: Vec2, target: Vec2, viewport: Optional[Viewport] = None) -> Vec2:
    """
    Vector from origin to target.

    With a viewport the shortest path on the torus is returned instead of the
    straight-line one.
    """
    d = vec_sub(target, origin)
    if viewport is None:
        return d
    width, height = viewport
    return (wrapped_axis(d[0], width), wrapped_axis(d[1], height))


def pair_force(body: Body, other: Body, delta: Vec2) -> Vec2:
    """
    Raw gravitational force on body from other, with delta pointing from body to other.

    F = m1 * m2 / r^2 along the unit vector delta / r.
    """
    distance = vec_len(delta)
    direction = vec_norm(delta)
    magnitude = (body.mass * other.mass) / (distance * distance)
    return vec_scale(direction, magnitude)


class NBodyPhysics:
    """
    Pairwise inverse-square gravity with a fixed one-frame Euler step.

    The gravitational force between two bodies is:
    F = m1 * m2 * r_hat / r^2

    and the resulting velocity increment of body 1 is gravity_scale * sum(F) / m1.
    """

    def __init__(self, gravity_scale: float = GRAVITY_SCALE, wrap: bool = False):
        """
        Initialize the physics engine.

        Args:
            gravity_scale: Multiplier applied to the summed force
            wrap: Measure distances and positions on a toroidal viewport
        """
        self.gravity_scale = float(gravity_scale)
        self.wrap = wrap

    def velocity_increment(self, body: Body, bodies: Sequence[Body],
                           viewport: Optional[Viewport] = None) -> Vec2:
        """
        Compute the change in velocity of body caused by every other body.

        Args:
            body: Body being updated (its own entry in bodies is skipped by id).
            bodies: Snapshot of all bodies taken before any of them was updated this step.
            viewport: (width, height); only used when wrapping.

        Returns:
            (dvx, dvy) to add to body.velocity.

        Raises:
            ValueError: if the snapshot holds fewer than two bodies.
        """
        if len(bodies) < 2:
            raise ValueError(f"gravity needs at least 2 bodies, got {len(bodies)}")

        wrap_to = viewport if self.wrap else None
        total = None
        for other in bodies:
            if other.id == body.id:
                continue
            delta = displacement(body.position, other.position, wrap_to)
            force = pair_force(body, other, delta)
            total = force if total is None else vec_add(total, force)

        if total is None:
            raise ValueError(f"body {body.id} has no other body to attract it")
        return vec_scale(total, self.gravity_scale / body.mass)

    def integrate(self, body: Body, viewport: Optional[Viewport] = None) -> None:
        """
        Advance body.position by body.velocity, in place.

        When wrapping, a coordinate that leaves the viewport re-enters from the
        opposite edge. Only one extent is added or subtracted, so a body must not
        move more than a viewport per frame.
        """
        x, y = vec_add(body.position, body.velocity)
        if self.wrap and viewport is not None:
            width, height = viewport
            x = _wrap_coordinate(x, width)
            y = _wrap_coordinate(y, height)
        body.position = (x, y)


def _wrap_coordinate(value: float, extent: float) -> float:
    if value > extent:
        return value - extent
    if value < 0:
        return value + extent
    return value


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """Sum of 1/2 m v^2 over all bodies."""
    return sum(0.5 * b.mass * (b.velocity[0] ** 2 + b.velocity[1] ** 2) for b in bodies)


def total_momentum(bodies: Sequence[Body]) -> Vec2:
    """Sum of m v over all bodies."""
    px, py = 0.0, 0.0
    for b in bodies:
        px += b.mass * b.velocity[0]
        py += b.mass * b.velocity[1]
    return (px, py)
