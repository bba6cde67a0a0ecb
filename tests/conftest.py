"""
tests/conftest.py
==================
Shared pytest fixtures for all CogSym-Core tests.
"""

import pytest
import z3

from cogsym.api.system import ReasoningSystem
from cogsym.symbolic.rules import CanonicalRule


# ─── SYMBOLS ──────────────────────────────────────────────────────


@pytest.fixture
def ints():
    return z3.Ints("x y z w")


@pytest.fixture
def reals():
    return z3.Reals("a b c d")


@pytest.fixture
def bools():
    return z3.Bools("p q r s")


@pytest.fixture
def sin():
    return z3.Function("sin", z3.RealSort(), z3.RealSort())


# ─── SYSTEMS ──────────────────────────────────────────────────────


@pytest.fixture
def equality_system(ints):
    x, y, z, _ = ints
    return ReasoningSystem(
        "equalities",
        [x == y, y == z],
        rules=[CanonicalRule.SUBSTITUTION],
        description="Substitution over a chain of equalities",
    )


@pytest.fixture
def implication_system(bools):
    p, q, r, _ = bools
    return ReasoningSystem(
        "implications",
        [p, z3.Implies(p, q), z3.Implies(q, r)],
        rules=[CanonicalRule.MODUS_PONENS],
    )


@pytest.fixture
def empty_system():
    return ReasoningSystem("empty")


# ─── HELPERS ──────────────────────────────────────────────────────


@pytest.fixture
def assert_exprs():
    """Compare expression lists structurally (``==`` builds equations)."""
    def _check(actual, expected):
        actual, expected = list(actual), list(expected)
        assert len(actual) == len(expected), f"{actual} != {expected}"
        for got, want in zip(actual, expected):
            assert got.eq(want), f"{got} != {want}"
    return _check
