"""cogsym/symbolic — Knowledge base, inference rules and forward chaining."""

from cogsym.symbolic.engine import InferenceEngine
from cogsym.symbolic.knowledge import KnowledgeBase, ReasoningGraph
from cogsym.symbolic.rules import (
    CanonicalRule,
    InferenceRule,
    default_rules,
    modus_ponens,
    register_rule,
    resolve_rule,
    substitution,
    symmetry,
    transitivity,
)

__all__ = [
    "InferenceEngine",
    "KnowledgeBase",
    "ReasoningGraph",
    "CanonicalRule",
    "InferenceRule",
    "default_rules",
    "register_rule",
    "resolve_rule",
    "modus_ponens",
    "transitivity",
    "symmetry",
    "substitution",
]
