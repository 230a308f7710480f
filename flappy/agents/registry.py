"""flappy/agents/registry.py — Agent name → class mapping.

Used by the CLI to instantiate agents by string name.
"""

from __future__ import annotations

from flappy.agents.gap_follower import GapFollowerAgent
from flappy.agents.idle import IdleAgent

AGENT_REGISTRY: dict[str, type] = {
    "idle": IdleAgent,
    "gap_follower": GapFollowerAgent,
}


def resolve_agent(name: str, params: dict | None = None):
    """Look up an agent class by name and instantiate with optional kwargs.

    Raises:
        KeyError: If name is not in the registry.
    """
    if name not in AGENT_REGISTRY:
        raise KeyError(f"Unknown agent: {name!r}. Available: {sorted(AGENT_REGISTRY)}")
    cls = AGENT_REGISTRY[name]
    return cls(**(params or {}))
