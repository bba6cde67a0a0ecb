"""
tests/unit/test_ast.py
======================
Structural metrics: depth, complexity, similarity, patterns, search,
pattern substitution, and the SymbolicAST wrapper.
"""
import pytest
import z3

from cogsym.analysis.ast import (
    OPERATOR_WEIGHTS,
    SymbolicAST,
    complexity,
    depth,
    extract_patterns,
    operator_weight,
    search,
    similarity,
    substitute_pattern,
)
from cogsym.symbolic.expr import is_compound, is_variable


class TestDepth:
    def test_atom(self, ints):
        x, *_ = ints
        assert depth(x) == 1
        assert depth(z3.IntVal(7)) == 1

    def test_compound(self, ints):
        x, y, z, _ = ints
        assert depth(x + y) == 2
        assert depth((x + y) * (z - x)) == 3

    def test_uses_deepest_child(self, ints):
        x, y, z, _ = ints
        e = x + (y * (z - x))
        assert depth(e) == 1 + max(depth(x), depth(y * (z - x)))
        assert depth(e) == 4


class TestComplexity:
    def test_atom(self, ints):
        x, *_ = ints
        assert complexity(x) == 1

    def test_sum_of_atoms(self, ints):
        x, y, _, _ = ints
        # self + x + y + weight(+)
        assert complexity(x + y) == 4

    def test_nested_arithmetic(self, ints):
        x, y, z, _ = ints
        assert complexity((x + y) * (z - x)) == 1 + 4 + 4 + 1

    def test_transcendental_weight(self, reals, sin):
        a, *_ = reals
        assert complexity(sin(a)) == 1 + 1 + 2

    def test_other_operators_weigh_three(self, ints):
        x, *_ = ints
        f = z3.Function("f", z3.IntSort(), z3.IntSort())
        assert complexity(f(x)) == 1 + 1 + 3

    def test_weight_table(self):
        for name in ("+", "-", "*", "/"):
            assert operator_weight(name) == 1
        for name in ("^", "exp", "log", "sin", "cos"):
            assert operator_weight(name) == 2
        assert operator_weight("tanh") == 3
        assert OPERATOR_WEIGHTS["div"] == 1


class TestSimilarity:
    def test_reflexive(self, ints, reals, sin):
        x, y, z, _ = ints
        a, *_ = reals
        for e in (x, x + y, (x + y) * (z - x), sin(a)):
            assert similarity(e, e) == 1.0

    def test_atoms(self, ints):
        x, y, _, _ = ints
        assert similarity(x, y) == 0.0

    def test_atom_vs_compound(self, ints):
        x, y, _, _ = ints
        assert similarity(x, x + y) == 0.0
        assert similarity(x + y, x) == 0.0

    def test_different_operators(self, ints):
        x, y, _, _ = ints
        assert similarity(x + y, x * y) == 0.0

    def test_different_arity(self, ints):
        x, y, z, _ = ints
        assert similarity(z3.Sum(x, y, z), x + y) == 0.0

    def test_mean_of_children(self, ints):
        x, y, z, _ = ints
        assert similarity(x + y, x + z) == 0.5

    def test_positional_not_matched(self, ints):
        # operands are compared position by position, not re-paired
        x, y, _, _ = ints
        assert similarity(x + y, y + x) == 0.0

    def test_sort_mismatch_is_not_an_error(self, ints, bools):
        x, *_ = ints
        p, *_ = bools
        assert similarity(x, p) == 0.0


class TestExtractPatterns:
    def test_always_contains_expression(self, ints):
        x, y, _, _ = ints
        for e in (x, x + y):
            patterns = extract_patterns(e)
            assert patterns
            assert patterns[0].eq(e)

    def test_binary_node(self, ints, assert_exprs):
        x, y, _, _ = ints
        assert_exprs(extract_patterns(x + y), [x + y, x, y])

    def test_deduplicates(self, ints, assert_exprs):
        x, *_ = ints
        assert_exprs(extract_patterns(x + x), [x + x, x])

    def test_adjacent_pairs_for_wide_sums(self, ints, assert_exprs):
        x, y, z, _ = ints
        e = z3.Sum(x, y, z)
        assert_exprs(extract_patterns(e), [e, x, y, z, x + y, y + z])

    def test_only_adjacent_pairs_are_generated(self, ints):
        # only neighbouring operands are paired
        x, y, z, w = ints
        patterns = extract_patterns(z3.Sum(x, y, z, w))
        assert any(p.eq(x + y) for p in patterns)
        assert any(p.eq(z + w) for p in patterns)
        assert not any(p.eq(x + z) for p in patterns)
        assert not any(p.eq(x + w) for p in patterns)

    def test_wide_products(self, ints):
        x, y, z, _ = ints
        patterns = extract_patterns(z3.Product(x, y, z))
        assert any(p.eq(x * y) for p in patterns)
        assert any(p.eq(y * z) for p in patterns)

    def test_non_commutative_nodes_get_no_pairs(self, ints, assert_exprs):
        x, y, z, _ = ints
        e = z3.Distinct(x, y, z)
        assert_exprs(extract_patterns(e), [e, x, y, z])


class TestSearch:
    def test_preorder(self, ints):
        x, y, z, _ = ints
        e = (x + y) * z
        found = search(e, is_compound)
        assert len(found) == 2
        assert found[0].eq(e)
        assert found[1].eq(x + y)

    def test_variables_left_to_right(self, ints):
        x, y, z, _ = ints
        found = search((x + y) * (z - x), is_variable)
        assert [str(v) for v in found] == ["x", "y", "z", "x"]

    def test_root_included(self, ints):
        x, *_ = ints
        assert len(search(x, lambda e: True)) == 1

    def test_no_match(self, ints):
        x, y, _, _ = ints
        assert search(x + y, lambda e: False) == []


class TestSubstitutePattern:
    def test_whole_node(self, ints):
        x, y, z, _ = ints
        assert substitute_pattern(x + y, x + y, z).eq(z)

    def test_inside_tree(self, ints):
        x, y, z, w = ints
        assert substitute_pattern((x + y) * z, x + y, w).eq(w * z)

    def test_atom_left_alone(self, ints):
        x, y, z, _ = ints
        assert substitute_pattern(x, y, z).eq(x)

    def test_near_match_is_not_enough(self, ints):
        x, y, z, w = ints
        # similarity 0.5 stays below the threshold
        assert substitute_pattern(x + z, x + y, w).eq(x + z)

    def test_every_occurrence(self, ints):
        x, y, _, w = ints
        e = (x + y) * (x + y)
        assert substitute_pattern(e, x + y, w).eq(w * w)

    def test_custom_threshold(self, ints):
        x, y, z, w = ints
        assert substitute_pattern(x + z, x + y, w, threshold=0.4).eq(w)


class TestSymbolicAST:
    def test_delegates_to_analyzer(self, ints):
        x, y, _, _ = ints
        ast = SymbolicAST(x + y, {"source": "unit"})
        assert ast.depth() == 2
        assert ast.complexity() == 4
        assert ast.patterns()[0].eq(x + y)
        assert ast.similarity(SymbolicAST(x + y)) == 1.0
        assert ast.metadata == {"source": "unit"}

    def test_substitute_keeps_metadata(self, ints):
        x, y, z, _ = ints
        ast = SymbolicAST(x + y, {"source": "unit"})
        out = ast.substitute(x + y, z)
        assert out.expr.eq(z)
        assert out.metadata == {"source": "unit"}

    def test_is_immutable(self, ints):
        x, *_ = ints
        ast = SymbolicAST(x)
        with pytest.raises(AttributeError):
            ast.expr = x + 1

    def test_analyze(self, ints):
        x, y, _, _ = ints
        assert SymbolicAST(x + y).analyze().depth == 2
