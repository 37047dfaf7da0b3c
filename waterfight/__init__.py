"""Game model, rules and input/output handling for a turn-based water fight bot."""

__version__ = "0.1.0"
__all__ = [
    "agent",
    "agent_collections",
    "geometry",
    "grid",
    "parser",
    "position",
    "rules",
    "sample",
    "state",
    "types",
]