"""
psi_notation: ψ Ordinal Notations

Terms of two notation tiers built from a collapsing function ψ:
- Scalar tier: ψ_n(α), an integer subscript and one argument
- Array tier: ψ(a_k, ..., a_0), an argument list indexed by position

This package provides:
- Term algebra: Zero, Sum, ScalarPsi, ArrayPsi, plus, sanitize_sum
- Canonical ordering: less_than, compare, sort_key
- Collapsing: collapse() turns array-tier terms into scalar-tier terms
- Parser: parse() with STRICT, OPTIONAL and NEGATIVE_SET head policies
- Printer: render() with abbreviations (1, ω, Ω, numerals) and TeX output

Example usage:
    from psi_notation import parse, collapse, render, RenderOptions

    term = parse("ψ(1,0)+ψ(0)")
    print(render(term))                 # Ω+1
    print(render(collapse(term)))       # ψ_0(Ω)+1
    print(parse("ψ(0)") < parse("w"))   # True
"""

__version__ = "0.1.0"

from .errors import (
    NotationError,
    TermError,
    ParseError,
    UnexpectedEndError,
    UnexpectedTokenError,
    ZeroSummandError,
    LimitExceededError,
)

from .terms import (
    Term,
    Principal,
    Zero,
    Sum,
    ScalarPsi,
    ArrayPsi,
    Tier,
    ZERO,
    ONE,
    OMEGA,
    LARGE_OMEGA,
    ARRAY_ONE,
    ARRAY_OMEGA,
    ARRAY_LARGE_OMEGA,
    ARRAY_IOTA,
    plus,
    sum_of,
    sanitize_sum,
    summands,
    psi,
    psi_sub,
    tier_of,
    from_natural,
    canonicalize,
    is_canonical,
)

from .ordering import (
    equal,
    same_value,
    less_than,
    less_equal,
    compare,
    sort_key,
    is_sorted_sum,
)

from .collapse import (
    collapse,
    retag,
)

from .parser import (
    Parser,
    ParserConfig,
    HeadPolicy,
    parse,
)

from .printer import (
    RenderOptions,
    render,
    render_plain,
    abbreviate,
    to_tex,
)

__all__ = [
    # Errors
    "NotationError",
    "TermError",
    "ParseError",
    "UnexpectedEndError",
    "UnexpectedTokenError",
    "ZeroSummandError",
    "LimitExceededError",
    # Terms
    "Term",
    "Principal",
    "Zero",
    "Sum",
    "ScalarPsi",
    "ArrayPsi",
    "Tier",
    "ZERO",
    "ONE",
    "OMEGA",
    "LARGE_OMEGA",
    "ARRAY_ONE",
    "ARRAY_OMEGA",
    "ARRAY_LARGE_OMEGA",
    "ARRAY_IOTA",
    "plus",
    "sum_of",
    "sanitize_sum",
    "summands",
    "psi",
    "psi_sub",
    "tier_of",
    "from_natural",
    "canonicalize",
    "is_canonical",
    # Ordering
    "equal",
    "same_value",
    "less_than",
    "less_equal",
    "compare",
    "sort_key",
    "is_sorted_sum",
    # Collapsing
    "collapse",
    "retag",
    # Parser
    "Parser",
    "ParserConfig",
    "HeadPolicy",
    "parse",
    # Printer
    "RenderOptions",
    "render",
    "render_plain",
    "abbreviate",
    "to_tex",
]
