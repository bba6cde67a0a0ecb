"""
cogsym/core/exceptions.py
=========================
Custom exception hierarchy for CogSym-Core.

All exceptions carry structured context so callers can
programmatically handle different failure modes.

Only construction misuse is surfaced to callers as a hard failure.
Rule inapplicability is a plain ``None`` and rule faults are caught at
the rule boundary, wrapped in ``RuleFault`` and reported, never raised.
"""

from __future__ import annotations

from typing import Any, Optional


class CogSymError(Exception):
    """Base exception for all CogSym-Core errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class ConstructionError(CogSymError):
    """Raised when a reasoning system, rule or config is built from
    malformed arguments. Fatal at construction time."""

    pass


class InvalidExpression(CogSymError):
    """Raised when something that is not an expression tree is passed
    where a fact or probe is required."""

    def __init__(self, message: str, value: Any, context: Optional[dict] = None):
        super().__init__(message, context)
        self.value = value


class RuleFault(CogSymError):
    """Describes an internal error raised while evaluating a rule.

    Never propagated across the public API: the engine and the rewrite
    driver attach it to their result objects and treat the attempt
    exactly like "no result".
    """

    def __init__(self, rule_name: str, probe: Any, original: BaseException):
        super().__init__(
            f"Rule '{rule_name}' faulted: {type(original).__name__}: {original}",
            context={"rule": rule_name, "probe": str(probe)},
        )
        self.rule_name = rule_name
        self.probe = probe
        self.original = original
