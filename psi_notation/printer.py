"""
Rendering ψ Terms as Text

render() walks the term and then runs an abbreviation pass over the text:
1. Literal forms of 1, ω and Ω are replaced by their short names
2. ψ, ω and Ω become TeX macros in TeX mode
3. Every run 1+1+...+1 is folded into its decimal count

The pass is plain text substitution and is applied in a fixed order, so a
replacement can expose a new match for a later rule (ψ(ψ(0)) → ψ(1) → ω).
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .terms import ArrayPsi, ScalarPsi, Sum, Term, Zero


@dataclass(frozen=True)
class RenderOptions:
    """Switches for render()."""
    abbreviate: bool = True              # run the abbreviation pass
    abbreviate_omega: bool = True        # ψ_0(1) → ω
    abbreviate_large_omega: bool = True  # ψ_1(0) → Ω

    omit_zero_subscript: bool = False    # ψ_0(α) → ψ(α)
    brace_head: bool = False             # ψ_n(α) → ψ(n,α)
    underscore_braces: bool = False      # ψ_n(α) → ψ_{n}(α)
    tex: bool = False                    # TeX macros, implies underscore_braces


DEFAULT_OPTIONS = RenderOptions()
PLAIN_OPTIONS = RenderOptions(abbreviate=False)

ONE_PATTERNS: Tuple[str, ...] = ("ψ(0)", "ψ_{0}(0)", "ψ_0(0)", "ψ(0,0)")
OMEGA_PATTERNS: Tuple[str, ...] = ("ψ(1)", "ψ_{0}(1)", "ψ_0(1)", "ψ(0,1)")
LARGE_OMEGA_PATTERNS: Tuple[str, ...] = ("ψ_{1}(0)", "ψ_1(0)", "ψ(1,0)")

TEX_SYMBOLS = (
    ("ψ", r"\psi"),
    ("ω", r"\omega"),
    ("Ω", r"\Omega"),
)

_ONES_RUN = re.compile(r"(?<!\d)1(?:\+1)+(?!\d)")


def render(term: Term, options: Optional[RenderOptions] = None) -> str:
    """Render a term of either tier as text."""
    options = options or DEFAULT_OPTIONS
    text = render_plain(term, options)
    if options.abbreviate:
        text = abbreviate(text, options)
    elif options.tex:
        text = to_tex(text)
    return text


def render_plain(term: Term, options: RenderOptions = PLAIN_OPTIONS) -> str:
    """Direct recursive rendering, before any abbreviation."""
    if isinstance(term, Zero):
        return "0"
    if isinstance(term, Sum):
        return "+".join(render_plain(m, options) for m in term.members)
    if isinstance(term, ArrayPsi):
        inner = ",".join(render_plain(a, options) for a in reversed(term.args))
        return f"ψ({inner})"
    if isinstance(term, ScalarPsi):
        arg = render_plain(term.arg, options)
        if options.omit_zero_subscript and term.sub == 0:
            return f"ψ({arg})"
        if options.brace_head:
            return f"ψ({term.sub},{arg})"
        if options.underscore_braces or options.tex:
            return f"ψ_{{{term.sub}}}({arg})"
        return f"ψ_{term.sub}({arg})"
    raise TypeError(f"Cannot render {term!r}")


def to_tex(text: str) -> str:
    """Replace the reserved symbols by TeX macros."""
    for symbol, macro in TEX_SYMBOLS:
        text = text.replace(symbol, macro)
    return text


def abbreviate(text: str, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """Apply the abbreviation pass to already rendered text."""
    for pattern in ONE_PATTERNS:
        text = text.replace(pattern, "1")
    if options.abbreviate_omega:
        for pattern in OMEGA_PATTERNS:
            text = text.replace(pattern, "ω")
    if options.abbreviate_large_omega:
        for pattern in LARGE_OMEGA_PATTERNS:
            text = text.replace(pattern, "Ω")
    if options.tex:
        text = to_tex(text)
    return fold_ones(text)


def fold_ones(text: str) -> str:
    """Replace each maximal run 1+1+...+1 by its count."""
    while True:
        match = _ONES_RUN.search(text)
        if match is None:
            return text
        count = match.group(0).count("1")
        if count == 0:
            raise AssertionError(
                f"matched {match.group(0)!r} without any 1 in it"
            )
        text = text[:match.start()] + str(count) + text[match.end():]
