"""
cogsym/core/config.py
=====================
Global configuration for CogSym-Core.
All termination bounds and thresholds in one place — validated at startup.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from cogsym.core.exceptions import ConstructionError


@dataclass
class InferenceConfig:
    max_rounds: int = 3            # forward chaining rounds (hard bound)

    def __post_init__(self):
        if not isinstance(self.max_rounds, int) or self.max_rounds < 0:
            raise ConstructionError(
                f"max_rounds must be a non-negative int, got {self.max_rounds!r}",
                context={"field": "max_rounds"},
            )


@dataclass
class RewriteConfig:
    max_iterations:         int   = 100   # fixed-point rewrite cap (hard bound)
    substitution_threshold: float = 0.99  # similarity above this → replace whole node
    symmetry_threshold:     float = 0.8   # similarity above this → report symmetry

    def __post_init__(self):
        if not isinstance(self.max_iterations, int) or self.max_iterations < 1:
            raise ConstructionError(
                f"max_iterations must be a positive int, got {self.max_iterations!r}",
                context={"field": "max_iterations"},
            )
        for name in ("substitution_threshold", "symmetry_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConstructionError(
                    f"{name} must be in [0, 1], got {value!r}",
                    context={"field": name},
                )


@dataclass
class ReasoningConfig:
    inference: InferenceConfig = field(default_factory=InferenceConfig)
    rewrite:   RewriteConfig   = field(default_factory=RewriteConfig)

    @classmethod
    def bounded(cls, max_rounds: int, max_iterations: int = 100) -> "ReasoningConfig":
        """Config with custom termination bounds and default thresholds."""
        return cls(
            inference=InferenceConfig(max_rounds=max_rounds),
            rewrite=RewriteConfig(max_iterations=max_iterations),
        )


# Singleton default config
DEFAULT_CONFIG = ReasoningConfig()
