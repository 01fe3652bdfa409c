#!/usr/bin/env python3
"""
ψ Notation Demo

Walks through the package:
1. Terms of the scalar and array tiers
2. The canonical ordering
3. Parsing with the three head policies
4. Collapsing array terms into scalar terms
5. Rendering options
"""

import sys
sys.path.insert(0, '.')

print("""
╔══════════════════════════════════════════════════════════════════════════════╗
║                                                                              ║
║                ψ  ORDINAL NOTATIONS: parse, compare, collapse                ║
║                                                                              ║
╚══════════════════════════════════════════════════════════════════════════════╝
""")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: TERMS
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 1: TERMS")
print("═" * 80)

from psi_notation import (
    ZERO, ONE, OMEGA, LARGE_OMEGA,
    ARRAY_ONE, ARRAY_OMEGA, ARRAY_LARGE_OMEGA, ARRAY_IOTA,
    RenderOptions, render,
)

plain = RenderOptions(abbreviate=False)

print("\n  Scalar tier constants:")
print("  " + "-" * 50)
for name, term in [("0", ZERO), ("1", ONE), ("ω", OMEGA), ("Ω", LARGE_OMEGA)]:
    print(f"  {name:5} = {render(term, plain)}")

print("\n  Array tier constants:")
print("  " + "-" * 50)
for name, term in [("1", ARRAY_ONE), ("ω", ARRAY_OMEGA),
                   ("Ω", ARRAY_LARGE_OMEGA), ("ι", ARRAY_IOTA)]:
    print(f"  {name:5} = {render(term, plain)}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: ORDERING
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 2: ORDERING")
print("═" * 80)

from psi_notation import parse, sort_key

texts = ["ψ(1,0)", "3", "ψ(1)+ψ(0)", "0", "I", "ψ(w)", "ψ(1,1)"]
terms = sorted((parse(t) for t in texts), key=sort_key)

print("\n  Sorted array terms:")
print("  " + "-" * 50)
print("  " + " < ".join(render(t) for t in terms))

comparisons = [
    ("ψ(0)", "ψ(1)"),
    ("ψ(1)+ψ(1)", "ψ(2)"),
    ("ψ(I)", "ψ(1,0)"),
]
print()
for a, b in comparisons:
    result = "✓" if parse(a) < parse(b) else "✗"
    print(f"  {result} {a} < {b}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: PARSING
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 3: PARSING")
print("═" * 80)

from psi_notation import HeadPolicy, ParserConfig, ParseError

inputs = [
    (HeadPolicy.STRICT, "ψ_{1}(0)"),
    (HeadPolicy.STRICT, "p(w,0)"),
    (HeadPolicy.OPTIONAL, "_2(1)"),
    (HeadPolicy.NEGATIVE_SET, "A(A(0),0)"),
    (HeadPolicy.STRICT, "(0)"),
    (HeadPolicy.STRICT, "1+0"),
]

print()
for policy, text in inputs:
    try:
        term = parse(text, ParserConfig(head_policy=policy))
        print(f"  {policy.name:12} {text:12} → {render(term)}")
    except ParseError as e:
        print(f"  {policy.name:12} {text:12} → error: {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: COLLAPSING
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 4: COLLAPSING (array tier → scalar tier)")
print("═" * 80)

from psi_notation import collapse

print()
for text in ["ψ(0)", "w", "W", "I", "ψ(1,1)", "ψ(w,0)+2", "ψ(1,0,w)"]:
    term = parse(text)
    print(f"  {text:10} → {render(collapse(term), plain):40} = {render(collapse(term))}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: RENDERING
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 5: RENDERING")
print("═" * 80)

term = collapse(parse("ψ(1,w)+1+1"))
variants = [
    ("default", RenderOptions()),
    ("plain", plain),
    ("omit _0", RenderOptions(omit_zero_subscript=True)),
    ("brace head", RenderOptions(brace_head=True)),
    ("braces", RenderOptions(underscore_braces=True, abbreviate_large_omega=False)),
    ("TeX", RenderOptions(tex=True)),
]

print()
for name, options in variants:
    print(f"  {name:12}: {render(term, options)}")

print("\n" + "═" * 80)
print("  DEMO COMPLETE")
print("═" * 80 + "\n")
