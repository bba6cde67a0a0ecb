"""
examples/basic_reasoning.py
===========================
Minimal CogSym-Core example: rule-based inference over z3 facts,
followed by a structural analysis of one of the expressions.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging

import z3

from cogsym.analysis.report import analyze
from cogsym.analysis.rewrite import optimize
from cogsym.api.system import ReasoningSystem


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    x, y, z = z3.Ints("x y z")
    p, q, r = z3.Bools("p q r")

    system = ReasoningSystem.with_default_rules(
        "syllogism",
        [p, z3.Implies(p, q), z3.Implies(q, r), x == y, y == z],
        description="Implication chain plus an equality chain",
    )

    print(f"infer(x)   -> {system.infer(x)}")
    derived = system.saturate()
    print(f"saturate() -> {derived}")
    assert any(fact.eq(r) for fact in derived), "Should derive r from p ⇒ q ⇒ r"

    expr = (x + 0) * 1 + (y + z) * (y + z)
    report = analyze(optimize(expr))
    print(report.summary())
    print(report.to_dict())
    print("✓ Basic reasoning example passed.")


if __name__ == "__main__":
    main()
