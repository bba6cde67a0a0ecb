"""
cogsym/symbolic/knowledge.py
============================
Knowledge base (append-only fact ledger) and reasoning graph
(free variable → facts mentioning it).

Both are plain in-memory structures without synchronisation:
concurrent writers must be serialised by the caller.

Invariant maintained by ``ReasoningGraph.index``:
    keys    == free variables of at least one indexed fact
    entries == facts in insertion order (duplicates kept)
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from cogsym.symbolic.expr import Expr, contains, free_variables

logger = logging.getLogger(__name__)


class KnowledgeBase:
    """Ordered, append-only sequence of facts.

    Order matters: rule scans are order-sensitive and several canonical
    rules are first-match-wins. No operation removes or reorders facts.
    """

    def __init__(self, facts: Iterable[Expr] = ()):
        self._facts: List[Expr] = list(facts)

    def add(self, fact: Expr) -> None:
        self._facts.append(fact)

    def extend(self, facts: Iterable[Expr]) -> None:
        for fact in facts:
            self.add(fact)

    def snapshot(self) -> List[Expr]:
        """Independent copy, safe to hand to rules or to grow."""
        return list(self._facts)

    def __len__(self) -> int:
        return len(self._facts)

    def __iter__(self) -> Iterator[Expr]:
        return iter(self._facts)

    def __getitem__(self, index):
        return self._facts[index]

    def __contains__(self, fact: object) -> bool:
        return isinstance(fact, Expr) and contains(self._facts, fact)

    def __repr__(self) -> str:
        return f"KnowledgeBase({len(self._facts)} facts)"


class ReasoningGraph:
    """Index from free variable to the facts it occurs in.

    Keys are compared structurally: entries are stored under the z3 AST
    id, which z3's hash-consing makes unique per structurally distinct
    expression. Entries only ever grow.
    """

    def __init__(self):
        self._entries: Dict[int, Tuple[Expr, List[Expr]]] = {}

    def index(self, fact: Expr) -> List[Expr]:
        """Append ``fact`` to the entry of each of its free variables.

        Returns the variables that were touched.
        """
        variables = free_variables(fact)
        for var in variables:
            key = var.get_id()
            if key in self._entries:
                self._entries[key][1].append(fact)
            else:
                self._entries[key] = (var, [fact])
        logger.debug("Indexed %s under %d variable(s)", fact, len(variables))
        return variables

    def facts_for(self, var: Expr) -> List[Expr]:
        """Facts mentioning ``var`` (copy); empty if ``var`` is unknown."""
        entry = self._entries.get(var.get_id())
        return list(entry[1]) if entry else []

    def variables(self) -> List[Expr]:
        return [var for var, _ in self._entries.values()]

    def items(self) -> List[Tuple[Expr, List[Expr]]]:
        return [(var, list(facts)) for var, facts in self._entries.values()]

    def __getitem__(self, var: Expr) -> List[Expr]:
        entry = self._entries.get(var.get_id())
        if entry is None:
            raise KeyError(str(var))
        return list(entry[1])

    def __contains__(self, var: object) -> bool:
        return isinstance(var, Expr) and var.get_id() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Expr]:
        return iter(self.variables())

    def __repr__(self) -> str:
        return f"ReasoningGraph({len(self._entries)} variables)"
