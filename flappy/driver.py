"""flappy/driver.py — Headless driver around the pure simulation.

The driver is the one place that holds mutable game-loop state: the current
SimState, the frame counter, the configs and the random source. The pyxel app,
the Gymnasium environment and the CLI all drive the game through it.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from flappy.config import GameConfig, validate_config
from flappy.constants import MAX_CATCH_UP_TICKS
from flappy.simulation import (
    InputEvent,
    Phase,
    SimState,
    create_sim,
    handle_game_update,
    handle_input,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------

@dataclass
class ScoreEvent:
    score: int


@dataclass
class CollisionEvent:
    score: int


Event = ScoreEvent | CollisionEvent


def diff_events(before: SimState, after: SimState) -> list[Event]:
    """Events implied by one tick's transition from *before* to *after*."""
    events: list[Event] = []
    for score in range(before.score + 1, after.score + 1):
        events.append(ScoreEvent(score))
    if before.phase == Phase.ACTIVE and after.phase == Phase.ENDED:
        events.append(CollisionEvent(after.score))
    return events


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

class Driver:
    """Owns one game session: state, frame counter, configs, rng.

    The given config is validated here; invalid fields are replaced with
    defaults and logged (see flappy.config). Read the validated copy from
    `config`.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self.config, _ = validate_config(config if config is not None else GameConfig())
        self.rng = random.Random(seed)
        self._state = create_sim(self.config.viewport)
        self._frame = 0

    @property
    def state(self) -> SimState:
        return self._state

    @property
    def frame(self) -> int:
        return self._frame

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def send(self, event: InputEvent) -> None:
        before = self._state
        self._state = handle_input(before, event, self.config.physics)
        if self._state is before:
            return
        if event == InputEvent.RESTART:
            self._frame = 0
            logger.debug("Game reset")
        elif before.phase == Phase.READY:
            logger.debug("Game started")

    def jump(self) -> None:
        self.send(InputEvent.JUMP)

    def restart(self) -> None:
        self.send(InputEvent.RESTART)

    # ------------------------------------------------------------------
    # Ticks
    # ------------------------------------------------------------------

    def tick(self) -> list[Event]:
        """Run one simulation tick. Does nothing unless the game is ACTIVE."""
        before = self._state
        if before.phase != Phase.ACTIVE:
            return []
        self._state = handle_game_update(
            before,
            self._frame,
            self.config.physics,
            self.config.pipes,
            self.rng,
        )
        self._frame += 1
        events = diff_events(before, self._state)
        for evt in events:
            if isinstance(evt, CollisionEvent):
                logger.debug("Collision at frame %d, score %d", self._frame, evt.score)
        return events

    def catch_up(self, ticks: int) -> list[Event]:
        """Replay missed ticks in order, at most MAX_CATCH_UP_TICKS of them.

        Ticks beyond the cap are dropped, not replayed.
        """
        if ticks > MAX_CATCH_UP_TICKS:
            logger.debug("Dropping %d missed ticks", ticks - MAX_CATCH_UP_TICKS)
            ticks = MAX_CATCH_UP_TICKS
        events: list[Event] = []
        for _ in range(ticks):
            events.extend(self.tick())
        return events
