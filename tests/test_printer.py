"""
Tests for rendering terms as text.
"""

import re

import pytest

from psi_notation import printer
from psi_notation.collapse import collapse
from psi_notation.parser import parse
from psi_notation.printer import (
    PLAIN_OPTIONS, RenderOptions, abbreviate, fold_ones, render, render_plain,
    to_tex,
)
from psi_notation.terms import (
    ARRAY_IOTA, ARRAY_LARGE_OMEGA, ARRAY_OMEGA, ARRAY_ONE,
    LARGE_OMEGA, OMEGA, ONE, ZERO,
    ScalarPsi, Sum, psi,
)


class TestPlainRendering:
    """Direct rendering without abbreviation."""

    def test_zero(self):
        assert render(ZERO) == "0"
        assert render(ZERO, PLAIN_OPTIONS) == "0"

    def test_scalar(self):
        assert render(ONE, PLAIN_OPTIONS) == "ψ_0(0)"
        assert render(LARGE_OMEGA, PLAIN_OPTIONS) == "ψ_1(0)"
        assert render(Sum((OMEGA, ONE)), PLAIN_OPTIONS) == "ψ_0(ψ_0(0))+ψ_0(0)"

    def test_array(self):
        assert render(ARRAY_ONE, PLAIN_OPTIONS) == "ψ(0)"
        assert render(ARRAY_LARGE_OMEGA, PLAIN_OPTIONS) == "ψ(ψ(0),0)"
        assert render(ARRAY_IOTA, PLAIN_OPTIONS) == "ψ(ψ(0),0,0)"

    def test_sum_order_kept(self):
        assert render(parse("1+w"), PLAIN_OPTIONS) == "ψ(0)+ψ(ψ(0))"


class TestOptions:
    """Subscript styles and TeX mode."""

    def test_omit_zero_subscript(self):
        term = ScalarPsi(0, LARGE_OMEGA)
        options = RenderOptions(abbreviate=False, omit_zero_subscript=True)
        assert render(term, options) == "ψ(ψ_1(0))"
        assert render(term, RenderOptions(omit_zero_subscript=True)) == "ψ(Ω)"

    def test_brace_head(self):
        term = ScalarPsi(2, ONE)
        assert render(term, RenderOptions(abbreviate=False, brace_head=True)) == "ψ(2,ψ(0,0))"
        assert render(term, RenderOptions(brace_head=True)) == "ψ(2,1)"
        assert render(LARGE_OMEGA, RenderOptions(brace_head=True)) == "Ω"

    def test_underscore_braces(self):
        term = ScalarPsi(12, ZERO)
        assert render(term, RenderOptions(underscore_braces=True)) == "ψ_{12}(0)"
        assert render(ONE, RenderOptions(underscore_braces=True)) == "1"

    def test_tex(self):
        options = RenderOptions(tex=True)
        assert render(collapse(ARRAY_LARGE_OMEGA), options) == r"\psi_{0}(\Omega)"
        assert render(ScalarPsi(0, Sum((OMEGA, OMEGA))), options) == r"\psi_{0}(\omega+\omega)"

    def test_tex_without_abbreviation(self):
        options = RenderOptions(abbreviate=False, tex=True)
        assert render(ONE, options) == r"\psi_{0}(0)"

    def test_to_tex(self):
        assert to_tex("ψ+ω+Ω") == r"\psi+\omega+\Omega"


class TestAbbreviation:
    """Short names for 1, ω, Ω and folded numerals."""

    def test_ones_fold(self):
        assert render(parse("1+1+1")) == "3"
        assert render(Sum((ONE, ONE))) == "2"

    def test_psi_zero_zero(self):
        assert render(parse("ψ(0,0)")) == "1"

    def test_named_constants(self):
        assert render(ONE) == "1"
        assert render(OMEGA) == "ω"
        assert render(LARGE_OMEGA) == "Ω"
        assert render(ARRAY_ONE) == "1"
        assert render(ARRAY_OMEGA) == "ω"
        assert render(ARRAY_LARGE_OMEGA) == "Ω"
        assert render(ARRAY_IOTA) == "ψ(1,0,0)"

    def test_nested(self):
        term = ScalarPsi(0, Sum((OMEGA, ONE, ONE)))
        assert render(term) == "ψ_0(ω+2)"
        assert render(parse("ψ(ψ(1,0)+2)")) == "ψ(Ω+2)"

    def test_switches(self):
        assert render(ARRAY_OMEGA, RenderOptions(abbreviate_omega=False)) == "ψ(1)"
        assert render(LARGE_OMEGA, RenderOptions(abbreviate_large_omega=False)) == "ψ_1(0)"

    def test_abbreviate_text(self):
        assert abbreviate("ψ_0(0)+ψ_0(0)") == "2"
        assert abbreviate("ψ(ψ(0))") == "ω"

    def test_collapse_rendering(self):
        assert render(collapse(psi([ZERO, ZERO, ARRAY_OMEGA]))) == "ψ_0(ψ_2(1))"
        assert render_plain(collapse(ARRAY_IOTA)) == "ψ_0(ψ_2(0))"

    def test_str_uses_render(self):
        assert str(ARRAY_OMEGA) == "ω"
        assert str(ZERO) == "0"
        assert str(parse("w+3")) == "ω+3"


class TestFold:
    """Folding runs of 1."""

    def test_runs(self):
        assert fold_ones("1+1") == "2"
        assert fold_ones("ω+1+1+ω+1+1+1") == "ω+2+ω+3"
        assert fold_ones("ψ(1,1+1)") == "ψ(1,2)"

    def test_no_run(self):
        assert fold_ones("1") == "1"
        assert fold_ones("ψ_1(0)") == "ψ_1(0)"
        assert fold_ones("ω+1") == "ω+1"

    def test_internal_guard(self, monkeypatch):
        """A pattern that matches without any 1 is a bug, not a user error."""
        monkeypatch.setattr(printer, "_ONES_RUN", re.compile(r"\+\+"))
        with pytest.raises(AssertionError):
            fold_ones("ω++ω")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
