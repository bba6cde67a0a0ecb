"""
cogsym/analysis/report.py
=========================
One-call structural report for an expression tree.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from cogsym.core.config import DEFAULT_CONFIG
from cogsym.core.types import AnalysisReport, Symmetry
from cogsym.analysis.ast import complexity, depth, extract_patterns, search, similarity
from cogsym.symbolic.expr import (
    Expr,
    children,
    free_variables,
    is_commutative,
    is_compound,
    operator_name,
)

logger = logging.getLogger(__name__)


def find_symmetries(e: Expr, threshold: Optional[float] = None) -> List[Symmetry]:
    """Pairs of top-level operands of a ``+``/``*`` node scoring above
    ``threshold``. Nested nodes are not inspected."""
    if threshold is None:
        threshold = DEFAULT_CONFIG.rewrite.symmetry_threshold
    if not is_commutative(e):
        return []
    args = children(e)
    found: List[Symmetry] = []
    for i in range(len(args)):
        for j in range(i + 1, len(args)):
            score = similarity(args[i], args[j])
            if score > threshold:
                found.append(Symmetry(i, j, score))
    return found


def analyze(e: Expr, symmetry_threshold: Optional[float] = None) -> AnalysisReport:
    operations: List[str] = []
    for node in search(e, is_compound):
        name = operator_name(node)
        if name not in operations:
            operations.append(name)

    report = AnalysisReport(
        depth=depth(e),
        complexity=complexity(e),
        patterns=extract_patterns(e),
        variables=free_variables(e),
        operations=operations,
        symmetries=find_symmetries(e, symmetry_threshold),
    )
    logger.debug("Analyzed %s: %s", e, report.summary())
    return report
