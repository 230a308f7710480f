"""flappy/collision.py — Axis-aligned rectangle tests for bird, pipes, walls.

Pipe overlap is strict: rectangles that only share an edge do not collide.
The playfield edges are hard walls, so touching the top or bottom counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flappy.physics import Bird
from flappy.pipes import Pipe

if TYPE_CHECKING:
    from flappy.simulation import SimState


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


def bird_rect(bird: Bird) -> Rect:
    return Rect(bird.x, bird.y, bird.width, bird.height)


def pipe_segments(pipe: Pipe, canvas_height: float) -> tuple[Rect, Rect]:
    """Return the (top, bottom) segment rectangles of a pipe."""
    gap_top = pipe.gap_y - pipe.gap_height / 2
    gap_bottom = pipe.gap_y + pipe.gap_height / 2
    top = Rect(pipe.x, 0.0, pipe.width, max(0.0, gap_top))
    bottom = Rect(pipe.x, gap_bottom, pipe.width, max(0.0, canvas_height - gap_bottom))
    return top, bottom


def rectangles_intersect(a: Rect, b: Rect) -> bool:
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def check_bird_boundary_collision(bird: Bird, canvas_height: float) -> bool:
    return bird.y <= 0 or bird.y + bird.height >= canvas_height


def check_bird_pipe_collision(bird: Bird, pipe: Pipe, canvas_height: float) -> bool:
    rect = bird_rect(bird)
    top, bottom = pipe_segments(pipe, canvas_height)
    return rectangles_intersect(rect, top) or rectangles_intersect(rect, bottom)


def detect_collision(state: SimState) -> bool:
    """True if the bird hits a wall or any pipe in *state*."""
    height = state.viewport.height
    if check_bird_boundary_collision(state.bird, height):
        return True
    return any(check_bird_pipe_collision(state.bird, p, height) for p in state.pipes)
