"""
cogsym/symbolic/engine.py
=========================
InferenceEngine: single-shot rule application and bounded forward
chaining over a knowledge base.

The engine holds no facts of its own. It reads whatever fact sequence
it is given and the ordered rule list it was built with, and reports
what each rule did through ``stats`` and ``last_steps``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from cogsym.core.config import DEFAULT_CONFIG, InferenceConfig
from cogsym.core.types import InferenceStep, RuleOutcome, RuleResult, RuleStats
from cogsym.symbolic.expr import Expr, contains
from cogsym.symbolic.rules import InferenceRule

logger = logging.getLogger(__name__)


class InferenceEngine:
    """Forward-chaining engine over an ordered rule list.

    Responsibilities:
        1. Apply every rule to a probe (``infer``)
        2. Saturate a fact set for a bounded number of rounds (``saturate``)
        3. Map rule faults to "no result" while counting them

    Usage:
        engine = InferenceEngine(default_rules())
        engine.infer(facts, x)
        new_facts = engine.saturate(facts, max_rounds=3)
    """

    def __init__(
        self,
        rules: Optional[Sequence[InferenceRule]] = None,
        config: Optional[InferenceConfig] = None,
    ):
        self.rules: List[InferenceRule] = list(rules or [])
        self.config = config or DEFAULT_CONFIG.inference
        self.stats: Dict[str, RuleStats] = {}
        self.last_steps: List[InferenceStep] = []

    # ─── RULE APPLICATION ──────────────────────────────────────────

    def apply_rule(self, rule: InferenceRule, kb: Sequence[Expr], probe: Expr) -> RuleResult:
        result = rule.apply(kb, probe)
        self.stats.setdefault(rule.name, RuleStats()).record(result.outcome)
        return result

    def infer(self, kb: Sequence[Expr], probe: Expr) -> List[Expr]:
        """Apply every rule, in registration order, to ``probe``.

        One entry per rule that derived something; duplicates across
        rules are kept. Faulted and inapplicable rules contribute nothing.
        """
        results: List[Expr] = []
        for rule in self.rules:
            result = self.apply_rule(rule, kb, probe)
            if result.derived:
                results.append(result.fact)
        return results

    # ─── FORWARD CHAINING ──────────────────────────────────────────

    def saturate(self, kb: Sequence[Expr], max_rounds: Optional[int] = None) -> List[Expr]:
        """Bounded forward chaining.

        Each round feeds every fact of the round-start snapshot, as the
        probe, to every rule (fact-outer, rule-inner). Results not yet in
        the working set and not yet found this round are collected in
        discovery order, then appended to the working set. Stops after
        ``max_rounds`` rounds or at the first round that finds nothing.

        Returns:
            new facts only, grouped by round in ascending order
        """
        if max_rounds is None:
            max_rounds = self.config.max_rounds
        working: List[Expr] = list(kb)
        discovered: List[Expr] = []
        self.last_steps = []

        last_round_productive = False
        for round_no in range(1, max(max_rounds, 0) + 1):
            snapshot = list(working)
            round_discoveries: List[Expr] = []

            for fact in snapshot:
                for rule in self.rules:
                    result = self.apply_rule(rule, snapshot, fact)
                    if not result.derived:
                        continue
                    inferred = result.fact
                    if contains(snapshot, inferred) or contains(round_discoveries, inferred):
                        continue
                    round_discoveries.append(inferred)
                    self.last_steps.append(
                        InferenceStep(round=round_no, premise=fact, rule=rule.name, derived=inferred)
                    )

            if not round_discoveries:
                logger.debug("Round %d derived nothing; fixpoint reached", round_no)
                last_round_productive = False
                break

            logger.debug("Round %d derived %d fact(s)", round_no, len(round_discoveries))
            discovered.extend(round_discoveries)
            working.extend(round_discoveries)
            last_round_productive = True

        if last_round_productive:
            logger.warning(
                "Saturation round bound reached (%d); further rounds may derive more facts",
                max_rounds,
            )
        logger.info(
            "Saturation over %d fact(s) with %d rule(s) derived %d new fact(s)",
            len(kb), len(self.rules), len(discovered),
        )
        return discovered

    # ─── STATS ─────────────────────────────────────────────────────

    def faults(self) -> Dict[str, int]:
        return {name: s.faulted for name, s in self.stats.items() if s.faulted}

    def reset_stats(self) -> None:
        self.stats = {}
        self.last_steps = []

    def outcome_count(self, outcome: RuleOutcome) -> int:
        return sum(
            {
                RuleOutcome.DERIVED: s.derived,
                RuleOutcome.INAPPLICABLE: s.inapplicable,
                RuleOutcome.FAULTED: s.faulted,
            }[outcome]
            for s in self.stats.values()
        )
