"""
tests/unit/test_knowledge.py
============================
Knowledge base ledger and reasoning graph index.
"""
import z3

from cogsym.symbolic.knowledge import KnowledgeBase, ReasoningGraph


class TestKnowledgeBase:
    def test_add_appends_in_order(self, ints, assert_exprs):
        x, y, z, _ = ints
        kb = KnowledgeBase()
        kb.add(x == y)
        kb.add(y == z)
        assert_exprs(kb, [x == y, y == z])

    def test_duplicates_are_kept(self, ints):
        x, y, _, _ = ints
        kb = KnowledgeBase([x == y])
        kb.add(x == y)
        assert len(kb) == 2

    def test_contains_is_structural(self, ints):
        x, y, z, _ = ints
        kb = KnowledgeBase([x == y + 1])
        assert (x == y + 1) in kb
        assert (x == z) not in kb
        assert "x" not in kb

    def test_snapshot_is_independent(self, ints):
        x, y, _, _ = ints
        kb = KnowledgeBase([x == y])
        snap = kb.snapshot()
        snap.append(y == x)
        assert len(kb) == 1


class TestReasoningGraph:
    def test_index_creates_entries_for_every_free_variable(self, ints):
        x, y, z, w = ints
        graph = ReasoningGraph()
        fact = x == y + z
        touched = graph.index(fact)
        assert [str(v) for v in touched] == ["x", "y", "z"]
        assert x in graph and y in graph and z in graph
        assert w not in graph
        assert len(graph) == 3

    def test_entries_grow_in_insertion_order(self, ints, assert_exprs):
        x, y, z, _ = ints
        graph = ReasoningGraph()
        graph.index(x == y)
        graph.index(y == z)
        graph.index(x == y)
        assert_exprs(graph[y], [x == y, y == z, x == y])
        assert_exprs(graph.facts_for(z), [y == z])

    def test_ground_fact_adds_no_entry(self):
        graph = ReasoningGraph()
        graph.index(z3.IntVal(1) == z3.IntVal(2))
        assert len(graph) == 0

    def test_unknown_variable(self, ints):
        x, *_ = ints
        graph = ReasoningGraph()
        assert graph.facts_for(x) == []

    def test_repeated_variable_indexed_once_per_fact(self, ints):
        x, *_ = ints
        graph = ReasoningGraph()
        graph.index(x + x == x)
        assert len(graph[x]) == 1

    def test_variables_inside_uninterpreted_functions(self, reals, sin):
        a, b, _, _ = reals
        graph = ReasoningGraph()
        graph.index(sin(a) == b)
        assert [str(v) for v in graph.variables()] == ["a", "b"]
        assert "sin" not in [str(v) for v in graph]

    def test_variables_inside_quantified_facts(self, ints):
        x, y, _, _ = ints
        graph = ReasoningGraph()
        fact = z3.ForAll([x], x + y > 0)
        touched = graph.index(fact)
        assert [str(v) for v in touched] == ["y"]
        assert y in graph
        assert x not in graph
        assert graph[y][0].eq(fact)

    def test_nested_quantifiers(self, ints):
        x, y, z, w = ints
        graph = ReasoningGraph()
        graph.index(z3.Exists([x], z3.ForAll([y], x + y == z)) == (w > 0))
        assert {str(v) for v in graph.variables()} == {"z", "w"}
