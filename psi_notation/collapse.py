"""
Notation Collapsing: Array Tier → Scalar Tier

An array-tier principal ψ(a_k, ..., a_0) is re-expressed as

    ψ_0( retag(k, collapse(a_k)) + ... + retag(0, collapse(a_0)) )

where retag(i, ·) moves every top-level summand to subscript i. The
subscript records which array position a summand came from, and because
higher positions get higher subscripts the sum is already in non-increasing
subscript order. Sums collapse member-wise.

On canonical array terms the map is injective and order preserving.
"""

from __future__ import annotations
import logging

from .errors import TermError
from .terms import (
    ONE, ZERO, ArrayPsi, ScalarPsi, Sum, Term, Zero,
    sum_of,
)

logger = logging.getLogger(__name__)


def retag(n: int, term: Term) -> Term:
    """Give every top-level principal summand of a scalar-tier term subscript n."""
    if n < 0:
        raise TermError(f"Subscript must be non-negative, got {n}")
    if isinstance(term, Zero):
        return ZERO
    if isinstance(term, ScalarPsi):
        return ScalarPsi(n, term.arg)
    if isinstance(term, Sum):
        return Sum(tuple(retag(n, m) for m in term.members))
    raise TypeError(f"retag expects a scalar-tier term, got {type(term).__name__}")


def collapse(term: Term) -> Term:
    """Translate an array-tier term into the equivalent scalar-tier term."""
    logger.debug("collapsing %s term", type(term).__name__)
    return _collapse(term)


def _collapse(term: Term) -> Term:
    if isinstance(term, Zero):
        return ZERO
    if isinstance(term, Sum):
        return sum_of(_collapse(m) for m in term.members)
    if isinstance(term, ArrayPsi):
        return _collapse_principal(term)
    raise TypeError(
        f"collapse expects an array-tier term, got {type(term).__name__}"
    )


def _collapse_principal(p: ArrayPsi) -> ScalarPsi:
    k_max = p.max_index
    if k_max == -1:
        return ONE
    # Highest index first keeps the sum in non-increasing subscript order
    parts = [retag(i, _collapse(p.args[i])) for i in range(k_max, -1, -1)]
    return ScalarPsi(0, sum_of(parts))
