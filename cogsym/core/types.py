"""
cogsym/core/types.py
====================
Foundation type system for CogSym-Core.
Every module imports from here. No circular dependencies.

Expression trees themselves are z3 ASTs (``z3.ExprRef``): immutable,
hash-consed, compared structurally with ``ExprRef.eq``. The types below
describe what the reasoning layer produces *about* those trees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

import z3

from cogsym.core.exceptions import RuleFault


# ─────────────────────────────────────────────
#  ENUMERATIONS
# ─────────────────────────────────────────────

class RuleOutcome(Enum):
    """What happened when a rule was applied to a probe.

    DERIVED:      the rule produced a fact
    INAPPLICABLE: the rule had nothing to say (normal, frequent)
    FAULTED:      the rule raised internally; treated like INAPPLICABLE
                  by every caller, kept apart only for observability
    """
    DERIVED      = "derived"
    INAPPLICABLE = "inapplicable"
    FAULTED      = "faulted"


# ─────────────────────────────────────────────
#  EXPRESSION METADATA
# ─────────────────────────────────────────────

class Operator(NamedTuple):
    """Identity of a compound node's operator.

    ``kind`` is the z3 decl kind (Z3_OP_ADD, Z3_OP_UNINTERPRETED, ...),
    ``name`` the decl name ("+", "sin", "=>"). Two operators are the same
    when both agree, so Int ``+`` and Real ``+`` coincide while two
    uninterpreted functions are told apart by name.
    """
    kind: int
    name: str

    def __str__(self) -> str:
        return self.name


# ─────────────────────────────────────────────
#  RULE RESULTS
# ─────────────────────────────────────────────

@dataclass
class RuleResult:
    """Explicit result of one inference-rule application."""
    rule:    str
    outcome: RuleOutcome
    fact:    Optional[z3.ExprRef] = None
    fault:   Optional[RuleFault]  = None

    @property
    def derived(self) -> bool:
        return self.outcome is RuleOutcome.DERIVED


@dataclass
class RewriteResult:
    """Result of one rewrite-rule application inside the fixed-point driver."""
    rule:    str
    node:    z3.ExprRef
    changed: bool
    fault:   Optional[RuleFault] = None

    @property
    def faulted(self) -> bool:
        return self.fault is not None


@dataclass
class RuleStats:
    """Per-rule outcome counters kept by the inference engine."""
    derived:      int = 0
    inapplicable: int = 0
    faulted:      int = 0

    def record(self, outcome: RuleOutcome) -> None:
        if outcome is RuleOutcome.DERIVED:
            self.derived += 1
        elif outcome is RuleOutcome.FAULTED:
            self.faulted += 1
        else:
            self.inapplicable += 1

    @property
    def total(self) -> int:
        return self.derived + self.inapplicable + self.faulted


@dataclass
class InferenceStep:
    """One new fact discovered during forward chaining."""
    round:   int            # 1-based round number
    premise: z3.ExprRef     # fact used as the probe
    rule:    str            # rule name
    derived: z3.ExprRef

    def __str__(self) -> str:
        return f"[round {self.round}] {self.rule}({self.premise}) ⊢ {self.derived}"


# ─────────────────────────────────────────────
#  ANALYSIS TYPES
# ─────────────────────────────────────────────

class Symmetry(NamedTuple):
    """Two top-level operands of a commutative node that look alike.

    ``i`` and ``j`` are 0-based operand positions with ``i < j``.
    """
    i:     int
    j:     int
    score: float


@dataclass
class AnalysisReport:
    """Structural report produced by ``cogsym.analysis.analyze``."""
    depth:      int
    complexity: int
    patterns:   List[z3.ExprRef]
    variables:  List[z3.ExprRef]
    operations: List[str]
    symmetries: List[Symmetry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return plain dict suitable for ``json.dumps()``."""
        return {
            "depth":      self.depth,
            "complexity": self.complexity,
            "patterns":   [str(p) for p in self.patterns],
            "variables":  [str(v) for v in self.variables],
            "operations": list(self.operations),
            "symmetries": [list(s) for s in self.symmetries],
        }

    def summary(self) -> str:
        return (
            f"depth={self.depth} complexity={self.complexity} "
            f"patterns={len(self.patterns)} variables={len(self.variables)} "
            f"operations={','.join(self.operations) or '-'} "
            f"symmetries={len(self.symmetries)}"
        )
