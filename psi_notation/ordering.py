"""
Canonical Ordering of ψ Terms

Terms are compared by value first:
- Zero is below everything else
- Sums compare lexicographically by summand (Cantor normal form style)
- Scalar principals compare by subscript, then by argument
- Array principals compare by their tagged summand sequences: the summands
  of a_k, ..., a_0 (highest non-zero index first), each tagged with its index

Values are compared on the canonical forms of both terms, so ψ(0,0) and
ψ(0) count as the same value. Distinct terms of equal value are then ordered
by their plain rendering, shorter first, which keeps the order total.

The tagged-sequence comparison is exactly what collapse() turns into the
scalar comparison, which is why collapsing preserves order.
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import List, Sequence, Tuple

from .terms import (
    ArrayPsi, Principal, ScalarPsi, Sum, Term, Zero,
    canonicalize, summands, tier_of,
)


def _check_same_tier(s: Term, t: Term) -> None:
    a, b = tier_of(s), tier_of(t)
    if a is not None and b is not None and a != b:
        raise TypeError(
            f"Cannot compare a {a.name.lower()}-tier term"
            f" with a {b.name.lower()}-tier term"
        )


def equal(s: Term, t: Term) -> bool:
    """Exact structural equality."""
    return s == t


def same_value(s: Term, t: Term) -> bool:
    """True if the terms denote the same ordinal, whatever their shape."""
    _check_same_tier(s, t)
    return canonicalize(s) == canonicalize(t)


def less_than(s: Term, t: Term) -> bool:
    """Strict canonical order s < t for two terms of the same tier."""
    _check_same_tier(s, t)
    if s == t:
        return False
    cs, ct = canonicalize(s), canonicalize(t)
    if cs != ct:
        return _less(cs, ct)
    # Same value, different shape
    return _shape_key(s) < _shape_key(t)


def less_equal(s: Term, t: Term) -> bool:
    return s == t or less_than(s, t)


def compare(s: Term, t: Term) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if s == t:
        return 0
    return -1 if less_than(s, t) else 1


sort_key = cmp_to_key(compare)


def is_sorted_sum(term: Term) -> bool:
    """True if the summands are non-increasing (Cantor normal form order)."""
    members = summands(term)
    return all(not less_than(a, b) for a, b in zip(members, members[1:]))


def _shape_key(term: Term) -> Tuple[int, str]:
    from .printer import render_plain
    text = render_plain(term)
    return len(text), text


# =============================================================================
# Value comparison (both sides canonical)
# =============================================================================

def _less(s: Term, t: Term) -> bool:
    if isinstance(s, Zero):
        return not isinstance(t, Zero)
    if isinstance(t, Zero):
        return False
    if isinstance(s, Principal):
        if isinstance(t, Principal):
            return _principal_less(s, t)
        # A principal is below a sum exactly when it is <= the sum's head
        return s == t.head or _principal_less(s, t.head)
    if isinstance(t, Principal):
        return _principal_less(s.head, t)
    return _sequence_less(s.members, t.members)


def _sequence_less(xs: Sequence[Principal], ys: Sequence[Principal]) -> bool:
    """Lexicographic order on summand sequences; a proper prefix is smaller."""
    for x, y in zip(xs, ys):
        if x == y:
            continue
        return _principal_less(x, y)
    return len(xs) < len(ys)


def _principal_less(p: Principal, q: Principal) -> bool:
    if isinstance(p, ScalarPsi) and isinstance(q, ScalarPsi):
        if p.sub != q.sub:
            return p.sub < q.sub
        return _less(p.arg, q.arg)
    if isinstance(p, ArrayPsi) and isinstance(q, ArrayPsi):
        return _array_less(p, q)
    raise TypeError(f"Cannot compare {type(p).__name__} with {type(q).__name__}")


def tagged_summands(p: ArrayPsi) -> List[Tuple[int, Principal]]:
    """(index, summand) pairs from the highest non-zero index down to 0."""
    return [
        (i, x)
        for i in range(p.max_index, -1, -1)
        for x in summands(p.args[i])
    ]


def _array_less(p: ArrayPsi, q: ArrayPsi) -> bool:
    xs, ys = tagged_summands(p), tagged_summands(q)
    for (i, x), (j, y) in zip(xs, ys):
        if i != j:
            return i < j
        if x != y:
            return _less(x, y)
    return len(xs) < len(ys)
