"""flappy/renderer.py — Pyxel primitive renderer.

Draws a read-only SimState each frame. All visuals are pyxel rectangles,
ellipses and text; no .pyxres assets. Nothing here mutates game state.
"""

from __future__ import annotations

import pyxel

from flappy.collision import pipe_segments
from flappy.config import RenderConfig
from flappy.debug import DEBUG
from flappy.physics import Bird
from flappy.simulation import Phase, SimState

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

COL_BACKGROUND = 0
COL_BIRD = 1
COL_BIRD_ACCENT = 2
COL_PIPE = 3
COL_PIPE_EDGE = 4
COL_TEXT = 7
COL_HITBOX = 8

_DEBUG_HITBOX_RGB = 0xFF0040

PIPE_LIP_HEIGHT = 8
PIPE_LIP_OVERHANG = 3


def palette_for(render_config: RenderConfig) -> dict[int, int]:
    """Map palette slots to the configured RGB colors."""
    return {
        COL_BACKGROUND: render_config.background,
        COL_BIRD: render_config.bird,
        COL_BIRD_ACCENT: render_config.bird_accent,
        COL_PIPE: render_config.pipe,
        COL_PIPE_EDGE: render_config.pipe_edge,
        COL_TEXT: render_config.text,
        COL_HITBOX: _DEBUG_HITBOX_RGB,
    }


def init_palette(render_config: RenderConfig) -> None:
    """Set palette colors. Call after pyxel.init()."""
    for slot, color in palette_for(render_config).items():
        pyxel.colors[slot] = color


# ---------------------------------------------------------------------------
# Pipes
# ---------------------------------------------------------------------------

def draw_pipes(state: SimState) -> None:
    height = state.viewport.height
    for pipe in state.pipes:
        top, bottom = pipe_segments(pipe, height)
        x = int(pipe.x)
        if top.height > 0:
            pyxel.rect(x, 0, pipe.width, int(top.height), COL_PIPE)
            _draw_lip(x, int(top.height) - PIPE_LIP_HEIGHT, pipe.width)
        if bottom.height > 0:
            pyxel.rect(x, int(bottom.y), pipe.width, int(bottom.height), COL_PIPE)
            _draw_lip(x, int(bottom.y), pipe.width)


def _draw_lip(x: int, y: int, width: int) -> None:
    """Wider cap at the gap end of a segment."""
    lip_x = x - PIPE_LIP_OVERHANG
    lip_w = width + PIPE_LIP_OVERHANG * 2
    pyxel.rect(lip_x, y, lip_w, PIPE_LIP_HEIGHT, COL_PIPE)
    pyxel.rectb(lip_x, y, lip_w, PIPE_LIP_HEIGHT, COL_PIPE_EDGE)


# ---------------------------------------------------------------------------
# Bird
# ---------------------------------------------------------------------------

def draw_bird(bird: Bird, frame_count: int) -> None:
    x, y = int(bird.x), int(bird.y)
    pyxel.elli(x, y, bird.width, bird.height, COL_BIRD)

    # Wing flaps while rising
    wing_y = y + bird.height // 2
    if bird.velocity < 0 and frame_count % 8 < 4:
        wing_y -= 4
    pyxel.elli(x + 2, wing_y - 3, bird.width // 3, 7, COL_BIRD_ACCENT)

    # Eye and beak
    pyxel.circ(x + bird.width - 9, y + 7, 2, COL_TEXT)
    pyxel.rect(x + bird.width - 4, y + bird.height // 2, 6, 4, COL_BIRD_ACCENT)


# ---------------------------------------------------------------------------
# HUD
# ---------------------------------------------------------------------------

def draw_hud(state: SimState) -> None:
    text = str(state.score)
    x = state.viewport.width // 2 - len(text) * 2
    pyxel.text(x, 16, text, COL_TEXT)


def draw_prompt(state: SimState, frame_count: int) -> None:
    """READY and ENDED overlays. Prompts flash on a 60-frame cycle."""
    cx = state.viewport.width // 2
    cy = state.viewport.height // 2
    if state.phase == Phase.READY:
        if frame_count % 60 < 40:
            pyxel.text(cx - 30, cy + 40, "PRESS SPACE", COL_TEXT)
    elif state.phase == Phase.ENDED:
        pyxel.text(cx - 18, cy - 20, "GAME OVER", COL_TEXT)
        pyxel.text(cx - 22, cy - 8, f"SCORE: {state.score}", COL_TEXT)
        if frame_count % 60 < 40:
            pyxel.text(cx - 36, cy + 8, "PRESS R TO RETRY", COL_TEXT)


def draw_hitboxes(state: SimState) -> None:
    """Outline collision rectangles (FLAPPY_DEBUG=1)."""
    bird = state.bird
    pyxel.rectb(int(bird.x), int(bird.y), bird.width, bird.height, COL_HITBOX)
    for pipe in state.pipes:
        for seg in pipe_segments(pipe, state.viewport.height):
            if seg.height > 0:
                pyxel.rectb(int(seg.x), int(seg.y), int(seg.width), int(seg.height), COL_HITBOX)


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------

def draw_frame(state: SimState, frame_count: int) -> None:
    pyxel.cls(COL_BACKGROUND)
    draw_pipes(state)
    draw_bird(state.bird, frame_count)
    draw_hud(state)
    draw_prompt(state, frame_count)
    if DEBUG:
        draw_hitboxes(state)
