"""flappy/simulation.py — Headless game state and phase machine.

Provides SimState (the complete game state) and the transitions that drive it:
input handling, the per-tick update, collision handling and reset. Every
function returns a new SimState derived from its input; nothing here owns a
clock, a frame counter or a random source. Those are passed in by the driver.
No Pyxel imports.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum

from flappy.collision import detect_collision
from flappy.config import PhysicsConfig, PipeGeneratorConfig, Viewport
from flappy.physics import (
    Bird,
    apply_gravity,
    apply_jump,
    create_bird,
    update_bird_position,
    update_pipe_positions,
)
from flappy.pipes import Pipe, generate_pipe, remove_offscreen_pipes, should_spawn_pipe
from flappy.scoring import update_score


# ---------------------------------------------------------------------------
# Phase and input events
# ---------------------------------------------------------------------------

class Phase(Enum):
    READY = "ready"
    ACTIVE = "active"
    ENDED = "ended"


class InputEvent(Enum):
    JUMP = "jump"
    RESTART = "restart"


# ---------------------------------------------------------------------------
# SimState
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SimState:
    """One snapshot of the game.

    pipes are kept in spawn order (oldest, and so leftmost, first).
    """

    bird: Bird
    viewport: Viewport = field(default_factory=Viewport)
    phase: Phase = Phase.READY
    pipes: tuple[Pipe, ...] = ()
    score: int = 0


def create_sim(viewport: Viewport | None = None) -> SimState:
    """Fresh READY state: bird at rest, vertically centered, no pipes."""
    if viewport is None:
        viewport = Viewport()
    return SimState(bird=create_bird(viewport.height / 2), viewport=viewport)


def reset_sim(state: SimState) -> SimState:
    """Replace *state* wholesale with a fresh READY state, from any phase."""
    return create_sim(state.viewport)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def handle_jump_input(state: SimState, physics_config: PhysicsConfig) -> SimState:
    """READY starts the game with a jump; ACTIVE jumps; ENDED ignores input."""
    if state.phase == Phase.ENDED:
        return state
    bird = apply_jump(state.bird, physics_config)
    return replace(state, bird=bird, phase=Phase.ACTIVE)


def handle_restart_input(state: SimState) -> SimState:
    """Only a finished game can be restarted."""
    if state.phase != Phase.ENDED:
        return state
    return reset_sim(state)


def handle_input(
    state: SimState,
    event: InputEvent,
    physics_config: PhysicsConfig,
) -> SimState:
    if event == InputEvent.JUMP:
        return handle_jump_input(state, physics_config)
    if event == InputEvent.RESTART:
        return handle_restart_input(state)
    raise ValueError(f"Unknown input event: {event!r}")


# ---------------------------------------------------------------------------
# Tick
# ---------------------------------------------------------------------------

def handle_collision(state: SimState) -> SimState:
    """End an active game. The score is carried over as-is."""
    if state.phase != Phase.ACTIVE:
        return state
    return replace(state, phase=Phase.ENDED)


def handle_game_update(
    state: SimState,
    frame_count: int,
    physics_config: PhysicsConfig,
    generator_config: PipeGeneratorConfig,
    rng: random.Random | None = None,
) -> SimState:
    """Advance an ACTIVE game by one tick; any other phase is returned as-is.

    Order: gravity, bird position, pipe positions, spawn, cull, collision,
    score. Pipes spawn past the right edge before collision runs, so a new
    pipe can't collide on its first tick. A tick that ends in a collision
    skips scoring.
    """
    if state.phase != Phase.ACTIVE:
        return state

    bird = apply_gravity(state.bird, physics_config)
    bird = update_bird_position(bird)

    pipes = update_pipe_positions(state.pipes, physics_config)
    if should_spawn_pipe(frame_count, generator_config):
        width, height = state.viewport.width, state.viewport.height
        pipes = pipes + (generate_pipe(width, height, generator_config, rng),)
    pipes = remove_offscreen_pipes(pipes)

    state = replace(state, bird=bird, pipes=pipes)

    if detect_collision(state):
        return handle_collision(state)
    return update_score(state)
