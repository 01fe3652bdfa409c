"""
Term Algebra for ψ Ordinal Notations

A term is one of:
- Zero: the additive identity (a single shared instance, ZERO)
- Sum: two or more principal terms, in order (ordinal addition)
- Principal: a single ψ application

Two notation tiers share this shape:
- Scalar tier: ψ_n(α) with an integer subscript n and one argument α
- Array tier: ψ(a_k, ..., a_1, a_0) with an argument list stored low index
  first, so args[0] is a_0

This module provides:
1. Immutable term classes and the tier classification
2. Construction primitives (plus, sanitize_sum, psi, psi_sub)
3. Process-wide constants (1, ω, Ω, ι) for each tier
4. Canonicalization of array-tier argument lists
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence, Tuple, Union

from .errors import TermError


class Tier(IntEnum):
    """Notation tier of a non-zero term. Higher tiers collapse into lower ones."""
    SCALAR = 0          # ψ_n(α)
    ARRAY = 1           # ψ(a_k, ..., a_0)


class Term:
    """
    Base class for every term.

    Terms are frozen dataclasses, so == is exact structural equality and
    terms can be used as dict keys. The comparison operators follow the
    canonical ordering and + is ordinal addition.
    """

    __slots__ = ()

    def __lt__(self, other: Term) -> bool:
        from .ordering import less_than
        if not isinstance(other, Term):
            return NotImplemented
        return less_than(self, other)

    def __le__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return other < self

    def __ge__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self == other or other < self

    def __add__(self, other: Term) -> Term:
        if not isinstance(other, Term):
            return NotImplemented
        return plus(self, other)

    def __str__(self) -> str:
        from .printer import render
        return render(self)


class Principal(Term):
    """A single ψ application (never a sum)."""

    __slots__ = ()


@dataclass(frozen=True)
class Zero(Term):
    """The additive identity. Use the ZERO instance."""

    def __str__(self) -> str:
        return "0"


ZERO = Zero()


@dataclass(frozen=True)
class ScalarPsi(Principal):
    """Scalar-tier principal term ψ_sub(arg)."""
    sub: int
    arg: Term

    def __post_init__(self):
        if isinstance(self.sub, bool) or not isinstance(self.sub, int):
            raise TermError(f"Subscript must be an integer, got {self.sub!r}")
        if self.sub < 0:
            raise TermError(f"Subscript must be non-negative, got {self.sub}")
        _check_tier(self.arg, Tier.SCALAR, "argument of ψ_n")


@dataclass(frozen=True)
class ArrayPsi(Principal):
    """
    Array-tier principal term ψ(a_k, ..., a_0).

    `args` is stored low index first. Zero arguments at the highest indices
    are allowed here; see canonicalize() for the reduced form.
    """
    args: Tuple[Term, ...]

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))
        if not self.args:
            raise TermError("An array-tier ψ term needs at least one argument")
        for a in self.args:
            _check_tier(a, Tier.ARRAY, "argument of ψ")

    @property
    def max_index(self) -> int:
        """Highest index with a non-zero argument (-1 if all are zero)."""
        for i in range(len(self.args) - 1, -1, -1):
            if not isinstance(self.args[i], Zero):
                return i
        return -1


@dataclass(frozen=True)
class Sum(Term):
    """Ordinal sum of two or more principal terms, kept in operand order."""
    members: Tuple[Principal, ...]

    def __post_init__(self):
        object.__setattr__(self, "members", tuple(self.members))
        if len(self.members) < 2:
            raise TermError(
                f"A sum needs at least 2 members, got {len(self.members)}"
            )
        for m in self.members:
            if not isinstance(m, Principal):
                raise TermError(f"Sum members must be principal terms, got {m!r}")
        tiers = {tier_of(m) for m in self.members}
        if len(tiers) != 1:
            raise TermError("Sum members must all come from the same tier")

    @property
    def head(self) -> Principal:
        """Leading (largest, in canonical form) summand."""
        return self.members[0]

    @property
    def tail(self) -> Term:
        """The sum with its head removed."""
        return sanitize_sum(self.members[1:])


PrincipalTerm = Union[ScalarPsi, ArrayPsi]


def tier_of(term: Term) -> Optional[Tier]:
    """Tier of a term; None for Zero, which belongs to every tier."""
    if isinstance(term, ScalarPsi):
        return Tier.SCALAR
    if isinstance(term, ArrayPsi):
        return Tier.ARRAY
    if isinstance(term, Sum):
        return tier_of(term.head)
    if isinstance(term, Zero):
        return None
    raise TypeError(f"Not a term: {term!r}")


def _check_tier(term: Term, tier: Tier, where: str) -> None:
    if not isinstance(term, Term):
        raise TermError(f"The {where} must be a term, got {term!r}")
    found = tier_of(term)
    if found is not None and found != tier:
        raise TermError(
            f"The {where} must be a {tier.name.lower()}-tier term,"
            f" got a {found.name.lower()}-tier term"
        )


# =============================================================================
# Construction primitives
# =============================================================================

def summands(term: Term) -> Tuple[Principal, ...]:
    """Summand sequence of a term: () for Zero, (p,) for a principal."""
    if isinstance(term, Zero):
        return ()
    if isinstance(term, Sum):
        return term.members
    if isinstance(term, Principal):
        return (term,)
    raise TypeError(f"Not a term: {term!r}")


def sanitize_sum(members: Sequence[Principal]) -> Term:
    """Build a term from a summand sequence, unwrapping a single member."""
    members = tuple(members)
    if not members:
        return ZERO
    if len(members) == 1:
        return members[0]
    return Sum(members)


def plus(a: Term, b: Term) -> Term:
    """
    Ordinal sum a + b.

    Zero is absorbed on either side; otherwise the summand sequences are
    concatenated, so sums never nest.
    """
    if isinstance(a, Zero):
        return b
    if isinstance(b, Zero):
        return a
    return Sum(summands(a) + summands(b))


def sum_of(terms: Iterable[Term]) -> Term:
    """Left-to-right ordinal sum of any number of terms (Zero if empty)."""
    members = []
    for t in terms:
        members.extend(summands(t))
    return sanitize_sum(members)


def psi(args: Sequence[Term]) -> ArrayPsi:
    """Array-tier constructor; args are given low index first."""
    return ArrayPsi(tuple(args))


def psi_sub(sub: int, arg: Term) -> ScalarPsi:
    """Scalar-tier constructor ψ_sub(arg)."""
    return ScalarPsi(sub, arg)


# =============================================================================
# Constants
# =============================================================================

# Scalar tier
ONE = ScalarPsi(0, ZERO)                 # ψ_0(0) = 1
OMEGA = ScalarPsi(0, ONE)                # ψ_0(1) = ω
LARGE_OMEGA = ScalarPsi(1, ZERO)         # ψ_1(0) = Ω

# Array tier
ARRAY_ONE = ArrayPsi((ZERO,))                            # ψ(0) = 1
ARRAY_OMEGA = ArrayPsi((ARRAY_ONE,))                     # ψ(1) = ω
ARRAY_LARGE_OMEGA = ArrayPsi((ZERO, ARRAY_ONE))          # ψ(1,0) = Ω
ARRAY_IOTA = ArrayPsi((ZERO, ZERO, ARRAY_ONE))           # ψ(1,0,0) = ι

UNITS = {
    Tier.SCALAR: ONE,
    Tier.ARRAY: ARRAY_ONE,
}


def from_natural(n: int, tier: Tier = Tier.ARRAY) -> Term:
    """The natural number n as a sum of n copies of the tier's 1."""
    if n < 0:
        raise TermError(f"Cannot build a negative natural number: {n}")
    return sanitize_sum((UNITS[tier],) * n)


# =============================================================================
# Canonical form
# =============================================================================

def canonicalize(term: Term) -> Term:
    """
    Reduce array-tier argument lists by dropping zero arguments at the
    highest indices (at least one argument is kept), at every depth.

    ψ(0,0) becomes ψ(0). Scalar-tier terms are returned unchanged.
    """
    if isinstance(term, ArrayPsi):
        args = [canonicalize(a) for a in term.args]
        while len(args) > 1 and isinstance(args[-1], Zero):
            args.pop()
        return ArrayPsi(tuple(args))
    if isinstance(term, Sum):
        return Sum(tuple(canonicalize(m) for m in term.members))
    return term


def is_canonical(term: Term) -> bool:
    """True if canonicalize() would leave the term unchanged."""
    return canonicalize(term) == term
