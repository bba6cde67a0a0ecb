"""
cogsym/api/system.py
====================
The main developer-facing API for CogSym-Core.

A ReasoningSystem bundles one knowledge base, one reasoning graph, an
ordered rule list, a name and a description:

    x, y, z = z3.Ints("x y z")
    system = ReasoningSystem("demo", [x == y, y == z], rules=["substitution"])
    system.infer(x)          # [y]
    system.add_fact(z == 1)
    system.saturate()        # newly derived facts, grouped by round

Facts enter only through ``add_fact`` / ``add_facts``, which keep the
reasoning graph in step with the knowledge base.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from cogsym.core.config import ReasoningConfig
from cogsym.core.exceptions import ConstructionError
from cogsym.core.validators import (
    assert_valid_expression,
    assert_valid_facts,
    assert_valid_name,
)
from cogsym.symbolic.engine import InferenceEngine
from cogsym.symbolic.expr import Expr, equation, is_expression
from cogsym.symbolic.knowledge import KnowledgeBase, ReasoningGraph
from cogsym.symbolic.rules import InferenceRule, default_rules, resolve_rule, resolve_rules

logger = logging.getLogger(__name__)


class ReasoningSystem:
    """Knowledge base + reasoning graph + rules behind one object.

    Args:
        name:           non-empty identifier
        knowledge_base: initial facts (indexed into the graph in order)
        rules:          InferenceRules, CanonicalRule tags, registered
                        rule names or bare ``(kb, probe)`` callables
        description:    free text
        config:         ReasoningConfig (bounds and thresholds)

    Raises:
        ConstructionError: on any malformed argument
    """

    def __init__(
        self,
        name: str,
        knowledge_base: Iterable[Expr] = (),
        rules: Sequence[Any] = (),
        description: str = "",
        config: Optional[ReasoningConfig] = None,
    ):
        assert_valid_name(name)
        if not isinstance(description, str):
            raise ConstructionError(
                f"description must be a string, got {type(description).__name__}",
                context={"name": name},
            )
        if config is not None and not isinstance(config, ReasoningConfig):
            raise ConstructionError(
                f"config must be a ReasoningConfig, got {type(config).__name__}",
                context={"name": name},
            )
        if rules is None:
            rules = ()
        if isinstance(rules, (str, InferenceRule)) or callable(rules):
            raise ConstructionError(
                "rules must be a sequence of rules",
                context={"name": name},
            )
        facts = self._materialize(knowledge_base)
        assert_valid_facts(facts)

        self.name = name
        self.description = description
        self.config = config or ReasoningConfig()
        self._kb = KnowledgeBase()
        self._graph = ReasoningGraph()
        self._engine = InferenceEngine(resolve_rules(rules), self.config.inference)

        for fact in facts:
            self._record(fact)
        logger.debug(
            "ReasoningSystem '%s' created with %d fact(s) and %d rule(s)",
            name, len(self._kb), len(self._engine.rules),
        )

    @classmethod
    def with_default_rules(
        cls,
        name: str,
        knowledge_base: Iterable[Expr] = (),
        description: str = "",
        config: Optional[ReasoningConfig] = None,
    ) -> "ReasoningSystem":
        """System using modus ponens, transitivity, symmetry, substitution."""
        return cls(name, knowledge_base, default_rules(), description, config)

    # ─── FACTS ─────────────────────────────────────────────────────

    @staticmethod
    def _materialize(knowledge_base: Any) -> Any:
        if knowledge_base is None:
            return []
        if is_expression(knowledge_base):
            return knowledge_base  # rejected by assert_valid_facts
        try:
            return list(knowledge_base)
        except TypeError as exc:
            raise ConstructionError(
                f"knowledge_base must be iterable, got {type(knowledge_base).__name__}",
                context={"type": type(knowledge_base).__name__},
            ) from exc

    def _record(self, fact: Expr) -> None:
        self._kb.add(fact)
        self._graph.index(fact)

    def add_fact(self, fact: Expr) -> None:
        """Append ``fact`` (no de-duplication) and index its free variables."""
        assert_valid_expression(fact, label="fact")
        self._record(fact)

    def add_facts(self, facts: Iterable[Expr]) -> None:
        for fact in facts:
            self.add_fact(fact)

    def facts_about(self, var: Expr) -> List[Expr]:
        """Facts in which ``var`` occurs free, in insertion order."""
        return self._graph.facts_for(var)

    # ─── RULES ─────────────────────────────────────────────────────

    def add_rule(self, rule: Any) -> InferenceRule:
        resolved = resolve_rule(rule)
        self._engine.rules.append(resolved)
        logger.debug("Rule added to '%s': %s", self.name, resolved.name)
        return resolved

    def set_rules(self, rules: Sequence[Any]) -> None:
        self._engine.rules = resolve_rules(rules)

    # ─── REASONING ─────────────────────────────────────────────────

    def infer(self, probe: Expr) -> List[Expr]:
        """Every rule's derivation for ``probe``, in rule order."""
        assert_valid_expression(probe, label="probe")
        return self._engine.infer(self._kb.snapshot(), probe)

    def saturate(self, max_rounds: Optional[int] = None) -> List[Expr]:
        """Forward chaining for at most ``max_rounds`` rounds.

        The knowledge base is not modified; newly derived facts are
        returned and can be committed with ``add_facts``.
        """
        return self._engine.saturate(self._kb.snapshot(), max_rounds)

    reason_forward = saturate

    # ─── VIEWS ─────────────────────────────────────────────────────

    @property
    def knowledge_base(self) -> Tuple[Expr, ...]:
        return tuple(self._kb)

    @property
    def reasoning_graph(self) -> ReasoningGraph:
        return self._graph

    @property
    def rules(self) -> Tuple[InferenceRule, ...]:
        return tuple(self._engine.rules)

    @property
    def engine(self) -> InferenceEngine:
        return self._engine

    def __len__(self) -> int:
        return len(self._kb)

    def __repr__(self) -> str:
        return (
            f"ReasoningSystem({self.name!r}, facts={len(self._kb)}, "
            f"rules={[r.name for r in self._engine.rules]})"
        )


# ─────────────────────────────────────────────
#  MODEL BRIDGE
# ─────────────────────────────────────────────

def connect_to_model(system: ReasoningSystem, model: Any) -> ReasoningSystem:
    """Add a scientific model's equations, unknowns and parameters as facts.

    ``model`` must provide ``equations()``, ``unknowns()`` and
    ``parameters()``. An equation may be a z3 expression or an
    ``(lhs, rhs)`` pair, which is added as ``lhs == rhs``.
    """
    for name in ("equations", "unknowns", "parameters"):
        if not callable(getattr(model, name, None)):
            raise ConstructionError(
                f"model has no {name}() method",
                context={"model": type(model).__name__},
            )

    for eq in model.equations():
        if isinstance(eq, tuple) and len(eq) == 2:
            eq = equation(*eq)
        system.add_fact(eq)
    for var in model.unknowns():
        system.add_fact(var)
    for param in model.parameters():
        system.add_fact(param)

    logger.info("Connected model %s to '%s' (%d facts)", type(model).__name__, system.name, len(system))
    return system
