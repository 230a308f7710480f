"""flappy/pipes.py — Pipe records, spawn timing, gap placement, cleanup."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from flappy.config import PipeGeneratorConfig


@dataclass(frozen=True)
class Pipe:
    """A top/bottom barrier pair with a gap centered on gap_y."""
    x: float
    gap_y: float
    gap_height: float
    width: int
    passed: bool = False


def should_spawn_pipe(frame_count: int, config: PipeGeneratorConfig) -> bool:
    return frame_count % config.spawn_interval == 0


def generate_pipe(
    canvas_width: int,
    canvas_height: int,
    config: PipeGeneratorConfig,
    rng: random.Random | None = None,
) -> Pipe:
    """Spawn a pipe just past the right edge with a random gap center.

    gap_y is drawn uniformly from [min_gap_y, max_gap_y] inclusive; equal
    bounds pin it without drawing. The bounds are trusted: config validation
    guarantees both segments fit inside canvas_height, so nothing is clamped
    here.
    """
    if rng is None:
        rng = random
    if config.min_gap_y == config.max_gap_y:
        gap_y = config.min_gap_y
    else:
        gap_y = rng.randint(int(config.min_gap_y), int(config.max_gap_y))
    return Pipe(
        x=float(canvas_width),
        gap_y=float(gap_y),
        gap_height=config.gap_height,
        width=config.pipe_width,
    )


def remove_offscreen_pipes(pipes: Sequence[Pipe]) -> tuple[Pipe, ...]:
    """Drop pipes whose right edge has moved past x=0."""
    return tuple(p for p in pipes if p.x + p.width >= 0)
