"""cogsym/api — Developer-facing reasoning system."""

from cogsym.api.context import extra_rules, round_limit
from cogsym.api.system import ReasoningSystem, connect_to_model

__all__ = [
    "ReasoningSystem",
    "connect_to_model",
    "extra_rules",
    "round_limit",
]
