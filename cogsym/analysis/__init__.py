"""cogsym/analysis — Structural analysis and rewriting of expression trees."""

from cogsym.analysis.ast import (
    OPERATOR_WEIGHTS,
    SymbolicAST,
    complexity,
    depth,
    extract_patterns,
    search,
    similarity,
    substitute_pattern,
)
from cogsym.analysis.report import analyze, find_symmetries
from cogsym.analysis.rewrite import (
    OPTIMIZATION_RULES,
    RewriteRule,
    cancel_double_negation,
    eliminate_additive_zero,
    eliminate_multiplicative_one,
    optimize,
    transform,
)

__all__ = [
    "OPERATOR_WEIGHTS",
    "SymbolicAST",
    "depth",
    "complexity",
    "similarity",
    "extract_patterns",
    "search",
    "substitute_pattern",
    "analyze",
    "find_symmetries",
    "RewriteRule",
    "transform",
    "optimize",
    "OPTIMIZATION_RULES",
    "eliminate_additive_zero",
    "eliminate_multiplicative_one",
    "cancel_double_negation",
]
