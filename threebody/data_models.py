#!/usr/bin/env python3
"""
Data models for Three Bodies.

This module defines the Body and TrailSample dataclasses shared between physics,
collisions, trails and rendering.

Units and usage
- position is in pixels, velocity in pixels per frame, radius in pixels; mass is unitless.
- color is an RGBA tuple in 0..255 and never changes after creation.
- Bodies never reference each other. A step works on copies (snapshot()) so that
  every new velocity is computed from the same state.
"""
from dataclasses import dataclass, replace
from typing import Sequence, Tuple

Color = Tuple[int, int, int, int]


@dataclass
class Body:
    """
    A point mass taking part in the simulation.

    Fields:
    - id: Small integer, unique within a run, assigned in creation order
    - mass: Positive mass
    - radius: Render and collision radius in pixels
    - position: 2D position (x, y)
    - velocity: 2D velocity (vx, vy) per frame
    - color: RGBA tuple used for rendering and copied into trail samples
    """
    id: int
    mass: float
    radius: float
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    color: Color = (200, 200, 255, 255)

    def __post_init__(self):
        if not self.mass > 0:
            raise ValueError(f"Body {self.id}: mass must be positive, got {self.mass!r}")

    def copy(self) -> "Body":
        return replace(self)


@dataclass
class TrailSample:
    """One past position of a body; alpha is the fade level in [0, 1]."""
    position: Tuple[float, float]
    color: Tuple[int, int, int]
    alpha: float = 1.0

    @classmethod
    def from_body(cls, body: Body) -> "TrailSample":
        return cls(position=body.position, color=tuple(body.color[:3]))


def snapshot(bodies: Sequence[Body]) -> Tuple[Body, ...]:
    """Copy every body so later writes cannot leak into the copy."""
    return tuple(b.copy() for b in bodies)
