"""
tests/unit/test_analysis.py
===========================
The one-call structural report.
"""
import json

import z3

from cogsym.analysis.report import analyze, find_symmetries
from cogsym.core.types import Symmetry


class TestAnalyze:
    def test_report_fields(self, reals, sin, assert_exprs):
        a, b, c, _ = reals
        e = (a + b) * sin(c)
        report = analyze(e)
        assert report.depth == 3
        assert report.complexity == 1 + 4 + 4 + 1
        assert report.patterns[0].eq(e)
        assert_exprs(report.variables, [a, b, c])
        assert report.operations == ["*", "+", "sin"]
        assert report.symmetries == []

    def test_operations_deduplicated(self, ints):
        x, y, z, _ = ints
        report = analyze((x + y) + (z + x))
        assert report.operations == ["+"]

    def test_atom(self, ints):
        x, *_ = ints
        report = analyze(x)
        assert report.depth == 1
        assert report.complexity == 1
        assert report.operations == []
        assert [str(v) for v in report.variables] == ["x"]

    def test_to_dict_is_json_ready(self, ints):
        x, y, _, _ = ints
        data = analyze(x + y).to_dict()
        assert set(data) == {"depth", "complexity", "patterns", "variables", "operations", "symmetries"}
        assert data["variables"] == ["x", "y"]
        json.dumps(data)

    def test_summary(self, ints):
        x, y, _, _ = ints
        assert "depth=2" in analyze(x + y).summary()


class TestSymmetries:
    def test_identical_operands(self, ints):
        x, y, z, _ = ints
        e = z3.Sum(x + y, x + z, x + y)
        assert analyze(e).symmetries == [Symmetry(0, 2, 1.0)]

    def test_threshold_is_exclusive(self, ints):
        x, y, z, _ = ints
        e = z3.Sum(x + y, x + z)
        assert find_symmetries(e) == []
        assert find_symmetries(e, threshold=0.4) == [Symmetry(0, 1, 0.5)]

    def test_only_commutative_top_level(self, ints):
        x, y, _, _ = ints
        e = (x + y) - (x + y)
        assert analyze(e).symmetries == []

    def test_nested_symmetries_not_inspected(self, ints):
        x, y, z, _ = ints
        e = (z3.Sum(x + y, x + y, z)) - z
        assert analyze(e).symmetries == []

    def test_products(self, ints):
        x, y, _, _ = ints
        e = (x + y) * (x + y)
        assert analyze(e).symmetries == [Symmetry(0, 1, 1.0)]
