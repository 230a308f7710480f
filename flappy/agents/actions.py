"""flappy/agents/actions.py — Action space and input mapping."""

from __future__ import annotations

from flappy.simulation import InputEvent

# Action constants
ACTION_NOOP = 0
ACTION_FLAP = 1

NUM_ACTIONS = 2

ACTION_MAP: dict[int, InputEvent | None] = {
    ACTION_NOOP: None,
    ACTION_FLAP: InputEvent.JUMP,
}


def action_to_input(action: int) -> InputEvent | None:
    """Input event for an action index, or None for no input."""
    return ACTION_MAP[action]
