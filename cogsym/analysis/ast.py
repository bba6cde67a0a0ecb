"""
cogsym/analysis/ast.py
======================
Structural metrics over expression trees.

All functions are pure structural recursion over immutable z3
expressions and never touch a knowledge base:

    depth(e)                         1 for atoms, 1 + deepest child otherwise
    complexity(e)                    node count plus operator weights
    similarity(a, b)                 positional structural similarity ∈ [0, 1]
    extract_patterns(e)              sub-expressions useful for matching
    search(e, predicate)             pre-order filter
    substitute_pattern(e, p, r)      fuzzy whole-node replacement

Inputs must be finite trees; no cycle detection is performed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from cogsym.core.config import DEFAULT_CONFIG
from cogsym.symbolic.expr import (
    Expr,
    children,
    is_commutative,
    is_compound,
    operator,
    rebuild,
    same,
    unique,
)


# Operator weights used by ``complexity``. Anything not listed weighs 3.
OPERATOR_WEIGHTS: Dict[str, int] = {
    "+": 1, "-": 1, "*": 1, "/": 1, "div": 1,
    "^": 2, "exp": 2, "log": 2, "sin": 2, "cos": 2,
}
DEFAULT_OPERATOR_WEIGHT = 3


def operator_weight(name: str) -> int:
    return OPERATOR_WEIGHTS.get(name, DEFAULT_OPERATOR_WEIGHT)


def depth(e: Expr) -> int:
    if not is_compound(e):
        return 1
    return 1 + max(depth(child) for child in children(e))


def complexity(e: Expr) -> int:
    """1 per node, plus the operator weight of every compound node.

    complexity(x + y) == 1 + 1 + 1 + 1 == 4
    """
    if not is_compound(e):
        return 1
    score = 1 + sum(complexity(child) for child in children(e))
    return score + operator_weight(operator(e).name)


def similarity(a: Expr, b: Expr) -> float:
    """Structural similarity in [0, 1].

    Atoms score 1.0 only against an equal atom. Compounds score 0.0
    unless operator and arity agree, otherwise the mean similarity of
    their children taken position by position (operands are not
    re-matched, so ``x + y`` vs ``y + x`` scores below 1.0).
    """
    a_compound, b_compound = is_compound(a), is_compound(b)
    if not a_compound and not b_compound:
        return 1.0 if same(a, b) else 0.0
    if a_compound != b_compound:
        return 0.0
    if operator(a) != operator(b):
        return 0.0

    args_a, args_b = children(a), children(b)
    if len(args_a) != len(args_b):
        return 0.0
    total = sum(similarity(x, y) for x, y in zip(args_a, args_b))
    return total / len(args_a)


def extract_patterns(e: Expr) -> List[Expr]:
    """``e`` itself, every pattern of every child, and for ``+``/``*``
    nodes with more than two operands each adjacent operand pair
    re-applied as a binary node. De-duplicated, first occurrence kept.

    Only adjacent pairs are produced: ``a+b+c+d`` yields ``a+b``,
    ``b+c`` and ``c+d``, never ``a+c``.
    """
    patterns: List[Expr] = [e]
    if is_compound(e):
        args = children(e)
        for child in args:
            patterns.extend(extract_patterns(child))
        if is_commutative(e) and len(args) > 2:
            for left, right in zip(args, args[1:]):
                patterns.append(rebuild(e, [left, right]))
    return unique(patterns)


def search(e: Expr, predicate: Callable[[Expr], bool]) -> List[Expr]:
    """All nodes (root included) satisfying ``predicate``, in pre-order."""
    matches: List[Expr] = []
    if predicate(e):
        matches.append(e)
    for child in children(e):
        matches.extend(search(child, predicate))
    return matches


def substitute_pattern(
    e: Expr,
    pattern: Expr,
    replacement: Expr,
    threshold: float = DEFAULT_CONFIG.rewrite.substitution_threshold,
) -> Expr:
    """Replace every sub-expression nearly identical to ``pattern``.

    A node whose similarity to ``pattern`` exceeds ``threshold`` is
    replaced whole; otherwise its children are rewritten and the node
    rebuilt with the same operator.
    """
    if similarity(e, pattern) > threshold:
        return replacement
    if not is_compound(e):
        return e
    new_args = [substitute_pattern(arg, pattern, replacement, threshold) for arg in children(e)]
    return rebuild(e, new_args)


# ─────────────────────────────────────────────
#  WRAPPER
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class SymbolicAST:
    """An expression plus free-form metadata, with the analyzer as methods.

    Example:
        ast = SymbolicAST(x + y, {"source": "model"})
        ast.depth()       # 2
        ast.complexity()  # 4
    """
    expr:     Expr
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    def depth(self) -> int:
        return depth(self.expr)

    def complexity(self) -> int:
        return complexity(self.expr)

    def patterns(self) -> List[Expr]:
        return extract_patterns(self.expr)

    def similarity(self, other: "SymbolicAST") -> float:
        other_expr = other.expr if isinstance(other, SymbolicAST) else other
        return similarity(self.expr, other_expr)

    def search(self, predicate: Callable[[Expr], bool]) -> List[Expr]:
        return search(self.expr, predicate)

    def substitute(self, pattern: Expr, replacement: Expr) -> "SymbolicAST":
        return SymbolicAST(substitute_pattern(self.expr, pattern, replacement), dict(self.metadata))

    def analyze(self):
        from cogsym.analysis.report import analyze

        return analyze(self.expr)

    def __str__(self) -> str:
        return str(self.expr)
