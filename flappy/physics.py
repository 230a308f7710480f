"""flappy/physics.py — Gravity, jump impulse, and position integration.

Every function takes a frozen record and returns a new one; inputs are never
modified. Velocities are in pixels per frame, positive is down.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from flappy.config import PhysicsConfig
from flappy.constants import BIRD_HEIGHT, BIRD_START_X, BIRD_WIDTH
from flappy.pipes import Pipe


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Bird:
    """The player-controlled actor. x stays fixed during play."""
    x: float = float(BIRD_START_X)
    y: float = 0.0
    velocity: float = 0.0
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT


def create_bird(y: float, x: float = float(BIRD_START_X)) -> Bird:
    """Bird at rest at (x, y)."""
    return Bird(x=x, y=y, velocity=0.0)


# ---------------------------------------------------------------------------
# Bird
# ---------------------------------------------------------------------------

def apply_gravity(bird: Bird, config: PhysicsConfig) -> Bird:
    """Accelerate downward, capped at terminal velocity."""
    velocity = min(bird.velocity + config.gravity, config.terminal_velocity)
    return replace(bird, velocity=velocity)


def apply_jump(bird: Bird, config: PhysicsConfig) -> Bird:
    """Overwrite velocity with the jump impulse, whatever it was before."""
    return replace(bird, velocity=config.jump_velocity)


def update_bird_position(bird: Bird) -> Bird:
    return replace(bird, y=bird.y + bird.velocity)


# ---------------------------------------------------------------------------
# Pipes
# ---------------------------------------------------------------------------

def update_pipe_positions(
    pipes: Sequence[Pipe],
    config: PhysicsConfig,
) -> tuple[Pipe, ...]:
    """Scroll every pipe left by pipe_speed, keeping spawn order."""
    return tuple(replace(p, x=p.x - config.pipe_speed) for p in pipes)
