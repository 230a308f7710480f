"""flappy/scoring.py — Pass detection and score updates.

A pipe's passed flag is the only record that it has already scored; it is set
once and never cleared, so re-running update_score cannot double count.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from flappy.physics import Bird
from flappy.pipes import Pipe

if TYPE_CHECKING:
    from flappy.simulation import SimState


def check_pipe_passed(bird: Bird, pipe: Pipe) -> bool:
    """True once the bird's left edge is past the pipe's right edge."""
    return bird.x > pipe.x + pipe.width and not pipe.passed


def update_score(state: SimState) -> SimState:
    """Score one point for every pipe newly passed, in spawn order."""
    gained = 0
    pipes = []
    for pipe in state.pipes:
        if check_pipe_passed(state.bird, pipe):
            pipe = replace(pipe, passed=True)
            gained += 1
        pipes.append(pipe)
    if gained == 0:
        return state
    return replace(state, pipes=tuple(pipes), score=state.score + gained)
