"""
cogsym/api/context.py
=====================
Context managers for temporary reasoning setups.

Usage:
    with extra_rules(system, "transitivity"):
        system.saturate()        # runs with the extra rule

    with round_limit(system, 10):
        system.saturate()        # default bound raised to 10 rounds
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Generator

from cogsym.core.config import InferenceConfig


@contextmanager
def extra_rules(system, *rules: Any) -> Generator:
    """Temporarily append rules; the original rule list is restored on exit."""
    original = list(system.rules)
    for rule in rules:
        system.add_rule(rule)
    try:
        yield system
    finally:
        system.set_rules(original)


@contextmanager
def round_limit(system, max_rounds: int) -> Generator:
    """Temporarily change the default saturation bound.

    Raises ConstructionError on entry if ``max_rounds`` is not a
    non-negative int.
    """
    engine = system.engine
    original = engine.config
    engine.config = InferenceConfig(max_rounds=max_rounds)
    try:
        yield system
    finally:
        engine.config = original
