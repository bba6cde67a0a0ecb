"""
cogsym/__init__.py — Public API exports
"""

from cogsym.analysis import (
    SymbolicAST,
    analyze,
    complexity,
    depth,
    extract_patterns,
    optimize,
    search,
    similarity,
    substitute_pattern,
    transform,
)
from cogsym.api.system import ReasoningSystem, connect_to_model
from cogsym.core.config import InferenceConfig, ReasoningConfig, RewriteConfig
from cogsym.core.exceptions import (
    CogSymError,
    ConstructionError,
    InvalidExpression,
    RuleFault,
)
from cogsym.core.types import AnalysisReport, InferenceStep, RuleOutcome, RuleResult, Symmetry
from cogsym.symbolic import (
    CanonicalRule,
    InferenceEngine,
    InferenceRule,
    KnowledgeBase,
    ReasoningGraph,
    default_rules,
    register_rule,
)
from cogsym.version import __version__

__all__ = [
    "ReasoningSystem",
    "connect_to_model",
    "KnowledgeBase",
    "ReasoningGraph",
    "InferenceEngine",
    "InferenceRule",
    "CanonicalRule",
    "default_rules",
    "register_rule",
    "SymbolicAST",
    "depth",
    "complexity",
    "similarity",
    "extract_patterns",
    "search",
    "substitute_pattern",
    "transform",
    "optimize",
    "analyze",
    "AnalysisReport",
    "InferenceStep",
    "RuleOutcome",
    "RuleResult",
    "Symmetry",
    "ReasoningConfig",
    "InferenceConfig",
    "RewriteConfig",
    "CogSymError",
    "ConstructionError",
    "InvalidExpression",
    "RuleFault",
    "__version__",
]
