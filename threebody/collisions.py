#!/usr/bin/env python3
"""
Collision handling for Three Bodies.

Supports two modes:
- Halt: any overlapping pair stops the simulation until it is reset
- Elastic: a body overlapping others takes the 1D elastic-collision velocity instead
  of its gravitational update for that step

Two bodies overlap when the distance between their centres is at most the sum of
their radii (the boundary counts as a collision).
"""
import itertools
from typing import Optional, Sequence, Tuple

from .data_models import Body
from .physics import Viewport, displacement
from .vector_utils import Vec2, vec_add, vec_len, vec_scale


def separation(a: Body, b: Body, viewport: Optional[Viewport] = None) -> float:
    """Distance between the centres of a and b, measured on the torus when viewport is given."""
    return vec_len(displacement(a.position, b.position, viewport))


def bodies_overlap(a: Body, b: Body, viewport: Optional[Viewport] = None) -> bool:
    return separation(a, b, viewport) <= a.radius + b.radius


def find_collision(bodies: Sequence[Body],
                   viewport: Optional[Viewport] = None) -> Optional[Tuple[int, int]]:
    """
    Return the ids of the first overlapping pair of distinct bodies, or None.

    Pairs are visited in creation order, so the result is deterministic.
    """
    for a, b in itertools.combinations(bodies, 2):
        if a.id != b.id and bodies_overlap(a, b, viewport):
            return (a.id, b.id)
    return None


def elastic_velocity(m1: float, v1: Vec2, m2: float, v2: Vec2) -> Vec2:
    """
    Velocity of body 1 after a 1D elastic collision with body 2, applied per component.

        v1' = (m1 - m2) / (m1 + m2) * v1 + 2 * m2 / (m1 + m2) * v2
    """
    total = m1 + m2
    return vec_add(vec_scale(v1, (m1 - m2) / total), vec_scale(v2, 2.0 * m2 / total))


def elastic_response(body: Body, bodies: Sequence[Body],
                     viewport: Optional[Viewport] = None) -> Optional[Vec2]:
    """
    New velocity for body if it overlaps any other body in the snapshot, else None.

    Each overlapping partner contributes its own post-collision velocity and the
    contributions are summed, not averaged.
    """
    result: Optional[Vec2] = None
    for other in bodies:
        if other.id == body.id or not bodies_overlap(body, other, viewport):
            continue
        v = elastic_velocity(body.mass, body.velocity, other.mass, other.velocity)
        result = v if result is None else vec_add(result, v)
    return result
