"""
cogsym/symbolic/expr.py
=======================
Expression-tree adapter over the Z3 Python API.

Every other module reads and builds trees through this module only.
The reasoning layer needs six capabilities from the tree library:

    is_compound(e)        node has an operator and ≥ 1 child
    operator(e)           operator identity (see ``Operator``)
    children(e)           ordered children
    same(a, b)            structural equality
    free_variables(e)     uninterpreted constants, pre-order, unique
    rebuild(e, children)  same operator over new children

Z3 hash-conses its ASTs: two structurally equal expressions are the
same node and share ``get_id()``. The list helpers below rely on that.
Note that ``a == b`` on z3 expressions *builds an equation*; use
``same`` for comparison.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Iterable, List, Optional, Sequence, Set, Union

import z3

from cogsym.core.types import Operator


Expr = z3.ExprRef

# Operators whose operand lists are commutative-associative.
COMMUTATIVE_KINDS = frozenset({z3.Z3_OP_ADD, z3.Z3_OP_MUL})

# n-ary z3 builtins cannot be rebuilt through their (binary) decl.
_NARY_BUILDERS = {
    z3.Z3_OP_ADD:      z3.Sum,
    z3.Z3_OP_MUL:      z3.Product,
    z3.Z3_OP_AND:      z3.And,
    z3.Z3_OP_OR:       z3.Or,
    z3.Z3_OP_DISTINCT: z3.Distinct,
}


# ─────────────────────────────────────────────
#  TREE ACCESS
# ─────────────────────────────────────────────

def is_expression(value: Any) -> bool:
    return isinstance(value, z3.ExprRef)


def is_compound(e: Expr) -> bool:
    """Applications with arguments. Constants, numerals, bound variables
    and quantifiers are all atoms to the reasoning layer."""
    return z3.is_app(e) and e.num_args() > 0


def is_atom(e: Expr) -> bool:
    return not is_compound(e)


def operator(e: Expr) -> Operator:
    if not is_compound(e):
        raise ValueError(f"'{e}' is an atom and has no operator")
    decl = e.decl()
    return Operator(kind=decl.kind(), name=decl.name())


def operator_name(e: Expr) -> str:
    return operator(e).name


def children(e: Expr) -> List[Expr]:
    if not is_compound(e):
        return []
    return list(e.children())


def is_commutative(e: Expr) -> bool:
    return is_compound(e) and e.decl().kind() in COMMUTATIVE_KINDS


# ─────────────────────────────────────────────
#  STRUCTURAL EQUALITY
# ─────────────────────────────────────────────

def same(a: Expr, b: Expr) -> bool:
    return a.eq(b)


def contains(seq: Iterable[Expr], e: Expr) -> bool:
    return any(e.eq(item) for item in seq)


def index_of(seq: Sequence[Expr], e: Expr) -> Optional[int]:
    for i, item in enumerate(seq):
        if e.eq(item):
            return i
    return None


def unique(seq: Iterable[Expr]) -> List[Expr]:
    """De-duplicate by structural equality, keeping first occurrences."""
    seen: Set[int] = set()
    out: List[Expr] = []
    for item in seq:
        key = item.get_id()
        if key not in seen:
            seen.add(key)
            out.append(item)
    return out


# ─────────────────────────────────────────────
#  VARIABLES
# ─────────────────────────────────────────────

def is_variable(e: Expr) -> bool:
    """Uninterpreted constant, i.e. a symbol such as ``Int('x')``."""
    return z3.is_const(e) and e.decl().kind() == z3.Z3_OP_UNINTERPRETED


def free_variables(e: Expr) -> List[Expr]:
    """Free variables of ``e`` in pre-order of first occurrence.

    Quantifier and lambda bodies are walked; their bound variables are
    de Bruijn indices, not constants, so they never count as free.
    """
    found: List[Expr] = []
    visited: Set[int] = set()
    stack = [e]
    while stack:
        node = stack.pop()
        node_id = node.get_id()
        if node_id in visited:
            continue
        visited.add(node_id)
        if is_variable(node):
            found.append(node)
        elif is_compound(node):
            stack.extend(reversed(node.children()))
        elif z3.is_quantifier(node):
            stack.append(node.body())
    return found


# ─────────────────────────────────────────────
#  CONSTRUCTION
# ─────────────────────────────────────────────

def rebuild(e: Expr, new_children: Sequence[Expr]) -> Expr:
    """Apply ``e``'s operator to ``new_children``."""
    if not is_compound(e):
        return e
    builder = _NARY_BUILDERS.get(e.decl().kind())
    if builder is not None:
        if len(new_children) == 1:
            return new_children[0]
        return builder(*new_children)
    return e.decl()(*new_children)


def implies(antecedent: Expr, consequent: Expr) -> Expr:
    return z3.Implies(antecedent, consequent)


def equation(lhs: Expr, rhs: Expr) -> Expr:
    # z3 overloads == to build an equation
    return lhs == rhs


def substitute(e: Expr, old: Expr, new: Expr) -> Expr:
    """Replace every occurrence of ``old`` in ``e`` with ``new``.

    Raises ``z3.Z3Exception`` when the sorts of ``old`` and ``new`` differ.
    """
    return z3.substitute(e, (old, new))


# ─────────────────────────────────────────────
#  SHAPE PREDICATES
# ─────────────────────────────────────────────

def is_implication(e: Expr) -> bool:
    return z3.is_implies(e)


def is_equation(e: Expr) -> bool:
    return z3.is_eq(e)


def is_sum(e: Expr) -> bool:
    return z3.is_add(e)


def is_product(e: Expr) -> bool:
    return z3.is_mul(e)


def is_negation(e: Expr) -> bool:
    """Unary minus."""
    return z3.is_app_of(e, z3.Z3_OP_UMINUS)


def is_numeral(e: Expr, value: Union[int, Fraction]) -> bool:
    """True if ``e`` is an Int or Real literal equal to ``value``."""
    if z3.is_int_value(e):
        return e.as_long() == value
    if z3.is_rational_value(e):
        return e.as_fraction() == value
    return False
