"""flappy/config.py — Configuration records, boundary validation, YAML loading.

The simulation core trusts its configuration. Everything that can be wrong
with a configuration is caught here: invalid fields are replaced with the
documented defaults and each substitution is reported as a ConfigDiagnostic
(and logged), so the core never receives invalid values.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

from flappy.constants import (
    COLOR_BACKGROUND,
    COLOR_BIRD,
    COLOR_BIRD_ACCENT,
    COLOR_PIPE,
    COLOR_PIPE_EDGE,
    COLOR_TEXT,
    GAP_HEIGHT,
    GRAVITY,
    JUMP_VELOCITY,
    MAX_GAP_Y,
    MIN_GAP_Y,
    PIPE_SPEED,
    PIPE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPAWN_INTERVAL,
    TERMINAL_VELOCITY,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Viewport:
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT


@dataclass(frozen=True)
class PhysicsConfig:
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    pipe_speed: float = PIPE_SPEED
    terminal_velocity: float = TERMINAL_VELOCITY


@dataclass(frozen=True)
class PipeGeneratorConfig:
    pipe_width: int = PIPE_WIDTH
    gap_height: int = GAP_HEIGHT
    min_gap_y: int = MIN_GAP_Y
    max_gap_y: int = MAX_GAP_Y
    spawn_interval: int = SPAWN_INTERVAL


@dataclass(frozen=True)
class RenderConfig:
    """Colors consumed by the renderer (0xRRGGBB)."""
    background: int = COLOR_BACKGROUND
    bird: int = COLOR_BIRD
    bird_accent: int = COLOR_BIRD_ACCENT
    pipe: int = COLOR_PIPE
    pipe_edge: int = COLOR_PIPE_EDGE
    text: int = COLOR_TEXT


@dataclass(frozen=True)
class GameConfig:
    viewport: Viewport = field(default_factory=Viewport)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    pipes: PipeGeneratorConfig = field(default_factory=PipeGeneratorConfig)
    render: RenderConfig = field(default_factory=RenderConfig)


@dataclass(frozen=True)
class ConfigDiagnostic:
    """One rejected configuration value and what replaced it."""

    field: str
    value: object
    replacement: object
    reason: str

    def __str__(self) -> str:
        return (
            f"{self.field}={self.value!r} rejected ({self.reason}); "
            f"using {self.replacement!r}"
        )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _reject(
    diagnostics: list[ConfigDiagnostic],
    name: str,
    value: object,
    replacement: object,
    reason: str,
) -> None:
    diag = ConfigDiagnostic(name, value, replacement, reason)
    logger.warning("Invalid configuration: %s", diag)
    diagnostics.append(diag)


def _positive(value) -> bool:
    """True for finite numbers > 0. NaN and infinities fail."""
    return math.isfinite(value) and value > 0


def validate_viewport(viewport: Viewport) -> tuple[Viewport, list[ConfigDiagnostic]]:
    """Replace non-positive or non-finite dimensions with the default screen size."""
    diagnostics: list[ConfigDiagnostic] = []
    width, height = viewport.width, viewport.height
    if not _positive(width):
        _reject(diagnostics, "viewport.width", width, SCREEN_WIDTH, "must be finite and > 0")
        width = SCREEN_WIDTH
    if not _positive(height):
        _reject(diagnostics, "viewport.height", height, SCREEN_HEIGHT, "must be finite and > 0")
        height = SCREEN_HEIGHT
    return Viewport(width=width, height=height), diagnostics


def validate_physics_config(
    config: PhysicsConfig,
) -> tuple[PhysicsConfig, list[ConfigDiagnostic]]:
    """Gravity, terminal velocity and pipe speed must be positive; the jump
    velocity must point up (negative). All four must be finite."""
    diagnostics: list[ConfigDiagnostic] = []
    defaults = PhysicsConfig()
    updates: dict[str, float] = {}

    for name in ("gravity", "terminal_velocity", "pipe_speed"):
        value = getattr(config, name)
        if not _positive(value):
            default = getattr(defaults, name)
            _reject(diagnostics, f"physics.{name}", value, default, "must be finite and > 0")
            updates[name] = default

    if not _positive(-config.jump_velocity):
        _reject(
            diagnostics, "physics.jump_velocity", config.jump_velocity,
            defaults.jump_velocity, "must be finite and < 0 (upward)",
        )
        updates["jump_velocity"] = defaults.jump_velocity

    return replace(config, **updates), diagnostics


def _fallback_gap_bounds(gap_height: float, viewport: Viewport) -> tuple[float, float]:
    """Default gap bounds, narrowed to the viewport when they don't fit.

    When no integer center fits (viewports a few pixels tall) the gap is
    pinned to the middle of the viewport.
    """
    low = math.ceil(gap_height / 2)
    high = math.floor(viewport.height - gap_height / 2)
    if low <= MIN_GAP_Y <= MAX_GAP_Y <= high:
        return MIN_GAP_Y, MAX_GAP_Y
    if low <= high:
        return low, high
    return viewport.height / 2, viewport.height / 2


def validate_generator_config(
    config: PipeGeneratorConfig,
    viewport: Viewport,
) -> tuple[PipeGeneratorConfig, list[ConfigDiagnostic]]:
    """Check pipe generator settings against the viewport.

    The viewport must already be valid. Guarantees for the result: every
    field finite, gap_height in (0, viewport.height), spawn_interval >= 1,
    min_gap_y <= max_gap_y, and every gap center in [min_gap_y, max_gap_y]
    yields two pipe segments of non-negative height.
    """
    diagnostics: list[ConfigDiagnostic] = []
    pipe_width = config.pipe_width
    gap_height = config.gap_height
    spawn_interval = config.spawn_interval

    if not _positive(pipe_width):
        _reject(diagnostics, "pipes.pipe_width", pipe_width, PIPE_WIDTH, "must be finite and > 0")
        pipe_width = PIPE_WIDTH

    if not (_positive(gap_height) and gap_height < viewport.height):
        replacement = GAP_HEIGHT if GAP_HEIGHT < viewport.height else viewport.height / 2
        _reject(
            diagnostics, "pipes.gap_height", gap_height, replacement,
            f"must be in (0, {viewport.height})",
        )
        gap_height = replacement

    if not _positive(spawn_interval) or int(spawn_interval) != spawn_interval:
        _reject(
            diagnostics, "pipes.spawn_interval", spawn_interval, SPAWN_INTERVAL,
            "must be a positive integer",
        )
        spawn_interval = SPAWN_INTERVAL

    min_gap_y, max_gap_y = config.min_gap_y, config.max_gap_y
    finite = math.isfinite(min_gap_y) and math.isfinite(max_gap_y)
    if finite and min_gap_y != max_gap_y:
        # Gap centers are drawn as integers; a single fixed center is used as is
        min_gap_y = math.ceil(min_gap_y)
        max_gap_y = math.floor(max_gap_y)
    reason = None
    if not finite:
        reason = "gap bounds must be finite"
    elif min_gap_y > max_gap_y:
        reason = "min_gap_y > max_gap_y"
    elif min_gap_y - gap_height / 2 < 0:
        reason = "top segment would have negative height"
    elif max_gap_y + gap_height / 2 > viewport.height:
        reason = "bottom segment would start below the viewport"
    if reason is not None:
        bounds = _fallback_gap_bounds(gap_height, viewport)
        _reject(
            diagnostics, "pipes.gap_bounds",
            (config.min_gap_y, config.max_gap_y), bounds, reason,
        )
        min_gap_y, max_gap_y = bounds

    result = PipeGeneratorConfig(
        pipe_width=pipe_width,
        gap_height=gap_height,
        min_gap_y=min_gap_y,
        max_gap_y=max_gap_y,
        spawn_interval=int(spawn_interval),
    )
    return result, diagnostics


def validate_config(config: GameConfig) -> tuple[GameConfig, list[ConfigDiagnostic]]:
    """Validate every section; the generator is checked against the
    already-validated viewport."""
    viewport, diagnostics = validate_viewport(config.viewport)
    physics, physics_diags = validate_physics_config(config.physics)
    pipes, pipe_diags = validate_generator_config(config.pipes, viewport)
    diagnostics.extend(physics_diags)
    diagnostics.extend(pipe_diags)
    return GameConfig(viewport, physics, pipes, config.render), diagnostics


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------

_SECTIONS = {
    "viewport": Viewport,
    "physics": PhysicsConfig,
    "pipes": PipeGeneratorConfig,
    "render": RenderConfig,
}


def _parse_section(name: str, data: object):
    cls = _SECTIONS[name]
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"Config section {name!r} must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(
            f"Unknown keys in config section {name!r}: {sorted(unknown)}"
        )
    return cls(**data)


def parse_config(data: dict | None) -> GameConfig:
    """Build an unvalidated GameConfig from a raw mapping."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Config document must be a mapping")
    unknown = set(data) - set(_SECTIONS)
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")
    return GameConfig(**{
        name: _parse_section(name, data.get(name)) for name in _SECTIONS
    })


def load_config(path: Path | str) -> tuple[GameConfig, list[ConfigDiagnostic]]:
    """Load and validate a YAML config file.

    Raises:
        ValueError: If the document is not shaped like a config.
        OSError: If the file cannot be read.
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    config = parse_config(data)
    logger.debug("Loaded config from %s", path)
    try:
        return validate_config(config)
    except TypeError as e:
        raise ValueError(f"Non-numeric value in config {path}: {e}") from e
