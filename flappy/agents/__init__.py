"""flappy/agents — Agent interface, action space, and programmed agents."""

from flappy.agents.actions import (
    ACTION_FLAP,
    ACTION_MAP,
    ACTION_NOOP,
    NUM_ACTIONS,
    action_to_input,
)
from flappy.agents.base import Agent
from flappy.agents.gap_follower import GapFollowerAgent
from flappy.agents.idle import IdleAgent
from flappy.agents.registry import AGENT_REGISTRY, resolve_agent

__all__ = [
    "Agent",
    "ACTION_NOOP",
    "ACTION_FLAP",
    "NUM_ACTIONS",
    "ACTION_MAP",
    "action_to_input",
    "IdleAgent",
    "GapFollowerAgent",
    "AGENT_REGISTRY",
    "resolve_agent",
]
