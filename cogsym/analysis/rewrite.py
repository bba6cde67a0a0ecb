"""
cogsym/analysis/rewrite.py
==========================
Fixed-point term rewriting and the built-in optimizer.

Algorithm (``transform``):
    1. Scan the rules in registration order against the current node
    2. The first rule whose output differs structurally replaces the node;
       the scan restarts from the first rule
    3. Stop when a full pass changes nothing, or after ``max_iterations``
       passes — rule sets are not guaranteed to converge

A rewrite rule is any ``Expr -> Expr`` callable. A rule that raises is
counted as "no change" for that attempt and the scan moves on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from cogsym.core.config import DEFAULT_CONFIG
from cogsym.core.exceptions import ConstructionError, RuleFault
from cogsym.core.registry import REWRITE_RULES, Registry
from cogsym.core.types import RewriteResult
from cogsym.symbolic.expr import (
    Expr,
    children,
    is_negation,
    is_numeral,
    is_product,
    is_sum,
    rebuild,
    same,
)

logger = logging.getLogger(__name__)

RewriteFn = Callable[[Expr], Expr]


@dataclass(frozen=True)
class RewriteRule:
    """A named ``Expr -> Expr`` rewrite."""
    name: str
    fn:   RewriteFn

    def apply(self, node: Expr) -> RewriteResult:
        try:
            new_node = self.fn(node)
            unchanged = new_node is None or same(new_node, node)
        except Exception as exc:
            fault = RuleFault(self.name, node, exc)
            logger.debug("%s", fault)
            return RewriteResult(rule=self.name, node=node, changed=False, fault=fault)
        if unchanged:
            return RewriteResult(rule=self.name, node=node, changed=False)
        return RewriteResult(rule=self.name, node=new_node, changed=True)

    def __call__(self, node: Expr) -> Expr:
        return self.fn(node)


def as_rewrite_rule(candidate: Any) -> RewriteRule:
    """Accepts a RewriteRule, a registered rule name, or a callable."""
    if isinstance(candidate, RewriteRule):
        return candidate
    if isinstance(candidate, str):
        try:
            return RewriteRule(candidate, Registry.get(candidate, category=REWRITE_RULES))
        except KeyError as exc:
            raise ConstructionError(str(exc), context={"rule": candidate}) from exc
    if callable(candidate):
        return RewriteRule(getattr(candidate, "__name__", repr(candidate)), candidate)
    raise ConstructionError(
        f"Cannot build a rewrite rule from {type(candidate).__name__}",
        context={"value": repr(candidate)},
    )


def transform(
    node: Expr,
    rules: Sequence[Any],
    max_iterations: Optional[int] = None,
) -> Expr:
    """Rewrite ``node`` to a fixed point of ``rules`` (bounded)."""
    if max_iterations is None:
        max_iterations = DEFAULT_CONFIG.rewrite.max_iterations
    rewrite_rules: List[RewriteRule] = [as_rewrite_rule(r) for r in rules]

    current = node
    changed = True
    iteration = 0
    while changed and iteration < max_iterations:
        changed = False
        iteration += 1
        for rule in rewrite_rules:
            result = rule.apply(current)
            if result.changed:
                logger.debug("Rewrite %s: %s → %s", rule.name, current, result.node)
                current = result.node
                changed = True
                break

    if changed:
        logger.warning(
            "Rewrite iteration bound reached (%d); result may not be a fixed point",
            max_iterations,
        )
    return current


# ─────────────────────────────────────────────
#  BUILT-IN OPTIMIZATION RULES
# ─────────────────────────────────────────────

def _drop_identity(node: Expr, matches: Callable[[Expr], bool], identity: int) -> Expr:
    if not matches(node):
        return node
    args = children(node)
    kept = [arg for arg in args if not is_numeral(arg, identity)]
    if len(kept) == len(args) or not kept:
        return node
    if len(kept) == 1:
        return kept[0]
    return rebuild(node, kept)


def eliminate_additive_zero(node: Expr) -> Expr:
    """x + 0 + y → x + y (top-level operands only)."""
    return _drop_identity(node, is_sum, 0)


def eliminate_multiplicative_one(node: Expr) -> Expr:
    """x * 1 * y → x * y (top-level operands only)."""
    return _drop_identity(node, is_product, 1)


def cancel_double_negation(node: Expr) -> Expr:
    """-(-x) → x"""
    if is_negation(node):
        (inner,) = children(node)
        if is_negation(inner):
            return children(inner)[0]
    return node


OPTIMIZATION_RULES = (
    RewriteRule("eliminate_additive_zero", eliminate_additive_zero),
    RewriteRule("eliminate_multiplicative_one", eliminate_multiplicative_one),
    RewriteRule("cancel_double_negation", cancel_double_negation),
)

for _rule in OPTIMIZATION_RULES:
    Registry.register(_rule.name, _rule.fn, category=REWRITE_RULES, override=True)


def optimize(node: Expr, max_iterations: Optional[int] = None) -> Expr:
    """Apply the built-in optimization rules to a fixed point."""
    return transform(node, OPTIMIZATION_RULES, max_iterations=max_iterations)
