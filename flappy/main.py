"""flappy/main.py — Pyxel app and entry point.

Maps keyboard and mouse to the two game inputs (jump, restart), runs driver
ticks on a fixed 1/FPS step, and draws the resulting state. Set FLAPPY_CONFIG
to a YAML file to override the defaults.
"""

from __future__ import annotations

import logging
import os
import sys
import time

import pyxel

from flappy import renderer
from flappy.config import GameConfig, load_config
from flappy.constants import FPS
from flappy.debug import DEBUG
from flappy.driver import Driver
from flappy.simulation import Phase

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def _jump_pressed() -> bool:
    return (
        pyxel.btnp(pyxel.KEY_SPACE)
        or pyxel.btnp(pyxel.KEY_UP)
        or pyxel.btnp(pyxel.MOUSE_BUTTON_LEFT)
    )


def _restart_pressed() -> bool:
    return pyxel.btnp(pyxel.KEY_R) or pyxel.btnp(pyxel.KEY_RETURN)


def _load_config() -> GameConfig:
    path = os.environ.get("FLAPPY_CONFIG")
    if not path:
        return GameConfig()
    try:
        config, diagnostics = load_config(path)
    except (OSError, ValueError) as e:
        logger.error("Ignoring config %s: %s", path, e)
        return GameConfig()
    for diag in diagnostics:
        logger.warning("Config: %s", diag)
    return config


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

class App:
    def __init__(self, config: GameConfig | None = None):
        self.driver = Driver(config if config is not None else _load_config())
        self.config = self.driver.config
        self._last_update = time.perf_counter()
        self._tick_accumulator = 0.0

        viewport = self.config.viewport
        pyxel.init(viewport.width, viewport.height, title="Flappy", fps=FPS)
        renderer.init_palette(self.config.render)
        pyxel.mouse(True)
        pyxel.run(self.update, self.draw)

    def update(self):
        if pyxel.btnp(pyxel.KEY_Q):
            pyxel.quit()

        # A click on the game-over screen restarts rather than being ignored
        phase = self.driver.state.phase
        if _restart_pressed() or (phase == Phase.ENDED and _jump_pressed()):
            self.driver.restart()
        elif _jump_pressed():
            self.driver.jump()

        # Fixed step: run one tick per whole 1/FPS of wall time, carry the rest.
        # pyxel may call update several times after a stall; those extra calls
        # find the accumulator already drained.
        now = time.perf_counter()
        self._tick_accumulator += now - self._last_update
        self._last_update = now
        step = 1.0 / FPS
        ticks = 0
        while self._tick_accumulator >= step:
            self._tick_accumulator -= step
            ticks += 1
        if ticks:
            self.driver.catch_up(ticks)

    def draw(self):
        renderer.draw_frame(self.driver.state, pyxel.frame_count)


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        App()
    except RuntimeError as e:
        # pyxel raises when no display/window can be created
        logger.error("Cannot start the game window: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
