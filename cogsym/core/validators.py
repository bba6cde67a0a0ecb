"""
cogsym/core/validators.py
=========================
Input validation utilities for CogSym-Core.

Validates:
    - Expression trees (must be z3 expressions)
    - Fact collections (every member an expression)
    - System names and descriptions

These validators run at API boundaries, not in hot inference paths.
``validate_*`` functions return a list of error strings (empty = valid);
``assert_valid_*`` functions raise the matching typed exception.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, List

import z3

from cogsym.core.exceptions import ConstructionError, InvalidExpression


# ─── REGEX PATTERNS ───────────────────────────────────────────────

VALID_NAME_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_.\-]*$')


# ─── EXPRESSION VALIDATION ────────────────────────────────────────

def validate_expression(value: Any, label: str = "expression") -> List[str]:
    """Validate that ``value`` is a z3 expression tree."""
    if isinstance(value, z3.ExprRef):
        return []
    return [f"{label} must be a z3 expression, got {type(value).__name__}"]


def validate_facts(facts: Iterable[Any]) -> List[str]:
    """Validate every member of a fact collection.

    Checks:
        1. The collection is iterable (and not a bare expression)
        2. Each member is a z3 expression
    """
    if isinstance(facts, (str, bytes)) or z3.is_expr(facts):
        return ["facts must be an iterable of expressions, not a single value"]
    try:
        items = list(facts)
    except TypeError:
        return [f"facts must be iterable, got {type(facts).__name__}"]

    errors: List[str] = []
    for i, fact in enumerate(items):
        errors.extend(validate_expression(fact, label=f"fact[{i}]"))
    return errors


# ─── NAME VALIDATION ──────────────────────────────────────────────

def validate_name(name: Any) -> List[str]:
    """System and rule names: non-empty identifiers (dots and dashes allowed)."""
    if not isinstance(name, str):
        return [f"name must be a string, got {type(name).__name__}"]
    if not name:
        return ["name is empty"]
    if not VALID_NAME_RE.match(name):
        return [f"name '{name}' invalid: must match {VALID_NAME_RE.pattern}"]
    return []


# ─── CONVENIENCE VALIDATORS ──────────────────────────────────────

def assert_valid_expression(value: Any, label: str = "expression") -> None:
    """Raise InvalidExpression if ``value`` is not an expression tree."""
    errors = validate_expression(value, label)
    if errors:
        raise InvalidExpression(errors[0], value=value, context={"label": label})


def assert_valid_facts(facts: Iterable[Any]) -> None:
    """Validate initial facts and raise ConstructionError on any violation."""
    errors = validate_facts(facts)
    if errors:
        raise ConstructionError(
            f"Invalid facts: {'; '.join(errors)}",
            context={"error_count": len(errors)},
        )


def assert_valid_name(name: Any) -> None:
    """Validate name and raise ConstructionError on any violation."""
    errors = validate_name(name)
    if errors:
        raise ConstructionError(
            f"Invalid name: {'; '.join(errors)}",
            context={"name": repr(name)},
        )
