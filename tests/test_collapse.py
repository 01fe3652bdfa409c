"""
Tests for collapsing array-tier terms into scalar-tier terms.
"""

import itertools
import time

import pytest

from psi_notation.collapse import collapse, retag
from psi_notation.errors import TermError
from psi_notation.ordering import is_sorted_sum, less_than
from psi_notation.parser import parse
from psi_notation.printer import PLAIN_OPTIONS, render
from psi_notation.terms import (
    ARRAY_IOTA, ARRAY_LARGE_OMEGA, ARRAY_OMEGA, ARRAY_ONE,
    LARGE_OMEGA, OMEGA, ONE, ZERO,
    ScalarPsi, Sum, Tier, psi, tier_of,
)

# Canonical array-tier terms, increasing
CANONICAL = [
    "0", "ψ(0)", "ψ(0)+ψ(0)", "3", "ψ(1)", "ψ(1)+ψ(0)", "ψ(1)+ψ(1)",
    "ψ(2)", "ψ(w)", "ψ(I)", "ψ(1,0)", "ψ(1,0)+ψ(1)", "ψ(1,1)", "ψ(1,w)",
    "ψ(2,0)", "ψ(w,0)", "ψ(ψ(1,0),0)", "ψ(1,0,0)", "ψ(1,0,0)+ψ(1,0)",
    "ψ(1,0,1)", "ψ(1,1,0)", "ψ(2,0,0)", "ψ(1,0,0,0)",
]


class TestRetag:
    """Tests for moving summands to a new subscript."""

    def test_zero_passes_through(self):
        assert retag(4, ZERO) == ZERO

    def test_principal(self):
        assert retag(3, ONE) == ScalarPsi(3, ZERO)
        assert retag(0, LARGE_OMEGA) == ONE

    def test_sum(self):
        assert retag(3, Sum((OMEGA, ONE))) == Sum((ScalarPsi(3, ONE), ScalarPsi(3, ZERO)))

    def test_large_sum(self):
        ones = Sum((ONE,) * 10000)
        assert retag(3, ones) == Sum((ScalarPsi(3, ZERO),) * 10000)

    def test_arguments_untouched(self):
        """Only the top-level subscripts change."""
        deep = ScalarPsi(0, LARGE_OMEGA)
        assert retag(2, deep) == ScalarPsi(2, LARGE_OMEGA)

    def test_errors(self):
        with pytest.raises(TermError):
            retag(-1, ONE)
        with pytest.raises(TypeError):
            retag(1, ARRAY_ONE)


class TestCollapse:
    """Tests for the collapsing transform itself."""

    def test_zero(self):
        assert collapse(ZERO) == ZERO

    def test_all_zero_arguments_give_one(self):
        assert collapse(ARRAY_ONE) == ONE
        assert collapse(psi([ZERO, ZERO, ZERO])) == ONE

    def test_constants(self):
        assert collapse(ARRAY_OMEGA) == OMEGA
        assert collapse(ARRAY_LARGE_OMEGA) == ScalarPsi(0, LARGE_OMEGA)
        assert collapse(ARRAY_IOTA) == ScalarPsi(0, ScalarPsi(2, ZERO))

    def test_index_two_argument(self):
        """Only index 2 non-zero: the result is ψ_0(ψ_2(...))."""
        term = psi([ZERO, ZERO, ARRAY_OMEGA])
        result = collapse(term)
        assert result == ScalarPsi(0, ScalarPsi(2, ONE))
        assert render(result, PLAIN_OPTIONS) == "ψ_0(ψ_2(ψ_0(0)))"
        assert render(result) == "ψ_0(ψ_2(1))"
        assert render(collapse(ARRAY_IOTA), PLAIN_OPTIONS) == "ψ_0(ψ_2(0))"

    def test_sum_is_additive(self):
        three = parse("3")
        assert collapse(three) == Sum((ONE, ONE, ONE))
        assert collapse(parse("ψ(1,0)+ψ(0)")) == Sum((ScalarPsi(0, LARGE_OMEGA), ONE))

    def test_subscripts_follow_positions(self):
        """Higher array positions become higher subscripts, in order."""
        term = psi([Sum((ARRAY_ONE, ARRAY_ONE)), ARRAY_OMEGA])
        result = collapse(term)
        assert result == ScalarPsi(0, Sum((ScalarPsi(1, ONE), ONE, ONE)))
        assert is_sorted_sum(result.arg)

    def test_result_is_scalar_tier(self):
        for text in CANONICAL[1:]:
            assert tier_of(collapse(parse(text))) == Tier.SCALAR

    def test_scalar_input_rejected(self):
        with pytest.raises(TypeError):
            collapse(ONE)
        with pytest.raises(TypeError):
            collapse(Sum((OMEGA, ONE)))


class TestCollapseProperties:
    """Order preservation and injectivity on canonical terms."""

    def test_order_preserved(self):
        terms = [parse(s) for s in CANONICAL]
        for a, b in itertools.product(terms, repeat=2):
            assert less_than(a, b) == less_than(collapse(a), collapse(b)), \
                f"collapse changes the order of {a} and {b}"

    def test_injective(self):
        terms = [parse(s) for s in CANONICAL]
        collapsed = [collapse(t) for t in terms]
        assert len(set(collapsed)) == len(terms)

    def test_canonical_chain_increases(self):
        terms = [parse(s) for s in CANONICAL]
        for a, b in zip(terms, terms[1:]):
            assert less_than(a, b), f"{a} should be < {b}"

    def test_non_canonical_equivalents(self):
        """Trailing zero arguments do not change the collapsed value."""
        assert collapse(parse("ψ(0,0)")) == collapse(parse("ψ(0)"))
        assert collapse(parse("ψ(0,0,1)")) == collapse(parse("ψ(1)"))

    def test_order_preserved_on_parsed_shapes(self):
        """Terms with trailing zero arguments compare by value."""
        texts = ["ψ_0(0)+1+1", "4", "2", "ψ(0,0)", "ψ(0,w)", "ψ(ψ(0,0))", "ψ(2)"]
        terms = [parse(s) for s in texts]
        for a, b in itertools.product(terms, repeat=2):
            if collapse(a) == collapse(b):
                continue
            assert less_than(a, b) == less_than(collapse(a), collapse(b)), \
                f"collapse changes the order of {a} and {b}"

    def test_large_numeral_is_fast(self):
        start = time.perf_counter()
        collapsed = collapse(parse("ψ(10000)"))
        elapsed = time.perf_counter() - start
        assert collapsed == ScalarPsi(0, Sum((ONE,) * 10000))
        assert elapsed < 5.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
