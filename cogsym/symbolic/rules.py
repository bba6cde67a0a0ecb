"""
cogsym/symbolic/rules.py
========================
Inference rules: the canonical four plus user-supplied callables.

Rule contract:
    fn(knowledge_base: Sequence[Expr], probe: Expr) -> Optional[Expr]

A rule is pure (never mutates the knowledge base). Returning ``None``
means "no derivation", a normal and frequent outcome. Any exception a
rule raises is caught by ``InferenceRule.apply`` and reported as
``RuleOutcome.FAULTED``; callers treat it exactly like ``None``.

This module provides:
    1. modus_ponens / transitivity / symmetry / substitution
    2. CanonicalRule — closed tag for the four built-ins
    3. InferenceRule — a named rule, canonical or custom
    4. resolve_rule  — turn names, tags and callables into InferenceRules
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from cogsym.core.exceptions import ConstructionError, RuleFault
from cogsym.core.registry import INFERENCE_RULES, Registry
from cogsym.core.types import RuleOutcome, RuleResult
from cogsym.symbolic.expr import (
    Expr,
    children,
    equation,
    implies,
    is_equation,
    is_expression,
    is_implication,
    same,
    substitute,
)

logger = logging.getLogger(__name__)

RuleFn = Callable[[Sequence[Expr], Expr], Optional[Expr]]


# ─────────────────────────────────────────────
#  CANONICAL RULES
# ─────────────────────────────────────────────

def modus_ponens(kb: Sequence[Expr], probe: Expr) -> Optional[Expr]:
    """A ⇒ B and A  ⊢  B

    First implication in ``kb`` whose antecedent is ``probe`` wins.
    """
    for fact in kb:
        if is_implication(fact):
            antecedent, consequent = children(fact)
            if same(antecedent, probe):
                return consequent
    return None


def transitivity(kb: Sequence[Expr], probe: Expr) -> Optional[Expr]:
    """A ⇒ B and B ⇒ C  ⊢  A ⇒ C

    Scans every ordered pair of implications (outer in kb order, inner
    over the full list) and returns the first chain found.
    ``probe`` is not consulted.
    """
    chain = [fact for fact in kb if is_implication(fact)]
    for outer in chain:
        ant_outer, cons_outer = children(outer)
        for inner in chain:
            ant_inner, cons_inner = children(inner)
            if same(cons_outer, ant_inner):
                return implies(ant_outer, cons_inner)
    return None


def symmetry(kb: Sequence[Expr], probe: Expr) -> Optional[Expr]:
    """A = B  ⊢  B = A, for the first equation in ``kb``.

    ``probe`` is not consulted.
    """
    for fact in kb:
        if is_equation(fact):
            lhs, rhs = children(fact)
            return equation(rhs, lhs)
    return None


def substitution(kb: Sequence[Expr], probe: Expr) -> Optional[Expr]:
    """A = B and P(A)  ⊢  P(B)

    Tries each equation in kb order; the first substitution that changes
    ``probe`` wins. Equations whose sides cannot replace into ``probe``
    (sort mismatch) are skipped.
    """
    for fact in kb:
        if is_equation(fact):
            lhs, rhs = children(fact)
            try:
                result = substitute(probe, lhs, rhs)
            except Exception as exc:
                logger.debug("Substitution %s → %s skipped on %s: %s", lhs, rhs, probe, exc)
                continue
            if not same(result, probe):
                return result
    return None


class CanonicalRule(Enum):
    MODUS_PONENS = "modus_ponens"
    TRANSITIVITY = "transitivity"
    SYMMETRY     = "symmetry"
    SUBSTITUTION = "substitution"

    @property
    def fn(self) -> RuleFn:
        return _CANONICAL_FNS[self]


_CANONICAL_FNS = {
    CanonicalRule.MODUS_PONENS: modus_ponens,
    CanonicalRule.TRANSITIVITY: transitivity,
    CanonicalRule.SYMMETRY:     symmetry,
    CanonicalRule.SUBSTITUTION: substitution,
}


# ─────────────────────────────────────────────
#  RULE WRAPPER
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class InferenceRule:
    """A named inference rule.

    ``canonical`` is set for the four built-ins and ``None`` for rules
    supplied by the caller.
    """
    name:      str
    fn:        RuleFn
    canonical: Optional[CanonicalRule] = None

    @classmethod
    def from_canonical(cls, tag: CanonicalRule) -> "InferenceRule":
        return cls(name=tag.value, fn=tag.fn, canonical=tag)

    @classmethod
    def custom(cls, name: str, fn: RuleFn) -> "InferenceRule":
        if not callable(fn):
            raise ConstructionError(
                f"Rule '{name}' is not callable",
                context={"rule": name, "type": type(fn).__name__},
            )
        return cls(name=name, fn=fn)

    @property
    def is_canonical(self) -> bool:
        return self.canonical is not None

    def __call__(self, kb: Sequence[Expr], probe: Expr) -> Optional[Expr]:
        return self.fn(kb, probe)

    def apply(self, kb: Sequence[Expr], probe: Expr) -> RuleResult:
        """Evaluate the rule, mapping every failure mode to a result."""
        try:
            fact = self.fn(kb, probe)
        except Exception as exc:
            fault = RuleFault(self.name, probe, exc)
            logger.debug("%s", fault)
            return RuleResult(rule=self.name, outcome=RuleOutcome.FAULTED, fault=fault)
        if fact is None:
            return RuleResult(rule=self.name, outcome=RuleOutcome.INAPPLICABLE)
        if not is_expression(fact):
            fault = RuleFault(
                self.name, probe,
                TypeError(f"rule returned {type(fact).__name__}, not an expression"),
            )
            logger.debug("%s", fault)
            return RuleResult(rule=self.name, outcome=RuleOutcome.FAULTED, fault=fault)
        return RuleResult(rule=self.name, outcome=RuleOutcome.DERIVED, fact=fact)

    def __repr__(self) -> str:
        kind = "canonical" if self.is_canonical else "custom"
        return f"InferenceRule({self.name}, {kind})"


# ─────────────────────────────────────────────
#  REGISTRATION / RESOLUTION
# ─────────────────────────────────────────────

def register_rule(name: str, override: bool = False):
    """Decorator registering a rule function under ``name``.

    Example:
        @register_rule("double_implication")
        def double_implication(kb, probe):
            ...
    """
    return Registry.decorator(name, category=INFERENCE_RULES, override=override)


def resolve_rule(candidate: Any) -> InferenceRule:
    """Turn a rule candidate into an ``InferenceRule``.

    Accepted: InferenceRule, CanonicalRule, registered name, callable.
    """
    if isinstance(candidate, InferenceRule):
        return candidate
    if isinstance(candidate, CanonicalRule):
        return InferenceRule.from_canonical(candidate)
    if isinstance(candidate, str):
        for tag in CanonicalRule:
            if tag.value == candidate:
                return InferenceRule.from_canonical(tag)
        if Registry.contains(candidate, category=INFERENCE_RULES):
            return InferenceRule.custom(candidate, Registry.get(candidate, category=INFERENCE_RULES))
        raise ConstructionError(
            f"Unknown inference rule '{candidate}'",
            context={"available": sorted(Registry.list_all(INFERENCE_RULES))},
        )
    if callable(candidate):
        return InferenceRule.custom(getattr(candidate, "__name__", repr(candidate)), candidate)
    raise ConstructionError(
        f"Cannot build an inference rule from {type(candidate).__name__}",
        context={"value": repr(candidate)},
    )


def resolve_rules(candidates: Sequence[Any]) -> List[InferenceRule]:
    return [resolve_rule(candidate) for candidate in candidates]


def default_rules() -> List[InferenceRule]:
    """The four canonical rules in canonical order."""
    return [InferenceRule.from_canonical(tag) for tag in CanonicalRule]


for _tag in CanonicalRule:
    Registry.register(_tag.value, _tag.fn, category=INFERENCE_RULES, override=True)
