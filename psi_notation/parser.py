"""
Recursive-Descent Parser for Array-Tier ψ Terms

Grammar (whitespace is ignored):

    term      := summand ('+' summand)*
    summand   := numeral | principal
    numeral   := digit+                 n copies of 1 joined by +
    principal := '1' | 'w' | 'ω' | 'W' | 'Ω' | 'I' | psiExpr
    psiExpr   := [head] '(' term (',' term)* ')'
               | [head] ['_'] '{' term '}' '(' term (',' term)* ')'
               | [head] ['_'] term '(' term (',' term)* ')'

Arguments are written high index first. ψ_s(a, b) is read as the argument
list s, a, b and stored reversed as (b, a, s).

How the head symbol is treated depends on the HeadPolicy:
- STRICT: the head must be ψ or p
- OPTIONAL: a ψ or p head is consumed when present
- NEGATIVE_SET: any character outside the reserved set is a head, and the
  head may be left out
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from .errors import (
    LimitExceededError, UnexpectedEndError, UnexpectedTokenError,
    ZeroSummandError,
)
from .terms import (
    ARRAY_IOTA, ARRAY_LARGE_OMEGA, ARRAY_ONE, ARRAY_OMEGA, ZERO,
    Term, Tier, Zero,
    from_natural, psi, sanitize_sum, summands,
)

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")
HEAD_SYMBOLS = ("ψ", "p")
CONSTANTS = {
    "1": ARRAY_ONE,
    "w": ARRAY_OMEGA,
    "ω": ARRAY_OMEGA,
    "W": ARRAY_LARGE_OMEGA,
    "Ω": ARRAY_LARGE_OMEGA,
    "I": ARRAY_IOTA,
}
# Characters that can never be a head under NEGATIVE_SET
RESERVED = DIGITS | frozenset("+(){}_,") | frozenset(CONSTANTS)


class HeadPolicy(IntEnum):
    """How the ψ head symbol of an application is recognized."""
    STRICT = 0          # ψ or p, required
    OPTIONAL = 1        # ψ or p, may be omitted
    NEGATIVE_SET = 2    # any non-reserved character, may be omitted


@dataclass
class ParserConfig:
    """Configuration for the term parser."""
    head_policy: HeadPolicy = HeadPolicy.STRICT

    # Inputs beyond these limits are rejected, never truncated
    max_depth: int = 100           # nested ψ applications
    max_numeral: int = 10000       # largest decimal numeral

    def __post_init__(self):
        assert self.max_depth > 0, "max_depth must be positive"
        assert self.max_numeral >= 0, "max_numeral must be non-negative"


class Parser:
    """
    Single-use parser over one input string.

    parse() reads the whole string; parse_term() and parse_principal() read
    a prefix and leave `pos` after it.
    """

    def __init__(self, text: str, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.text = "".join(text.split())
        self.pos = 0
        self.depth = 0

    def peek(self) -> Optional[str]:
        """Next character, or None at the end of the input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def consume(self, op: str) -> bool:
        """Advance past `op` if it is the next character."""
        if self.peek() != op:
            return False
        self.pos += 1
        return True

    def expect(self, op: str) -> None:
        """Advance past `op`, or fail if something else comes next."""
        if not self.consume(op):
            self.fail(f"'{op}'")

    def fail(self, expected: str):
        """Raise the error for a missing `expected` at the current position."""
        ch = self.peek()
        if ch is None:
            raise UnexpectedEndError(self.pos + 1, expected)
        raise UnexpectedTokenError(self.pos + 1, expected, ch)

    def parse(self) -> Term:
        """Parse the complete input as one term."""
        logger.debug(
            "parsing %d characters with %s head policy",
            len(self.text), self.config.head_policy.name,
        )
        if not self.text:
            raise UnexpectedEndError(1, "a term")
        term = self.parse_term()
        if self.peek() is not None:
            self.fail("end of input")
        return term

    def parse_term(self) -> Term:
        start = self.pos
        term = self.parse_summand()
        if self.peek() != "+":
            return term
        if isinstance(term, Zero):
            raise ZeroSummandError(start + 1)
        members = list(summands(term))
        while self.consume("+"):
            start = self.pos
            term = self.parse_summand()
            if isinstance(term, Zero):
                raise ZeroSummandError(start + 1)
            members.extend(summands(term))
        return sanitize_sum(members)

    def parse_summand(self) -> Term:
        ch = self.peek()
        if ch is None:
            self.fail("a term")
        if ch == "0":
            # A lone zero; "05" leaves the 5 for the caller to reject
            self.pos += 1
            return ZERO
        if ch in DIGITS:
            return self.parse_numeral()
        return self.parse_principal()

    def parse_numeral(self) -> Term:
        start = self.pos
        while self.peek() in DIGITS:
            self.pos += 1
        digits = self.text[start:self.pos]
        limit = self.config.max_numeral
        if len(digits) > len(str(limit)) or int(digits) > limit:
            logger.debug("rejecting numeral %s (limit %d)", digits, limit)
            raise LimitExceededError(
                start + 1, "numeral limit", f"{digits} > {limit}"
            )
        return from_natural(int(digits), Tier.ARRAY)

    def parse_principal(self) -> Term:
        ch = self.peek()
        if ch in CONSTANTS:
            self.pos += 1
            return CONSTANTS[ch]
        return self.parse_application()

    def parse_application(self) -> Term:
        """Parse a ψ application in any of its surface forms."""
        self.depth += 1
        try:
            if self.depth > self.config.max_depth:
                logger.debug("rejecting nesting deeper than %d", self.config.max_depth)
                raise LimitExceededError(
                    self.pos + 1, "nesting limit",
                    f"more than {self.config.max_depth} levels",
                )
            return self._parse_application()
        finally:
            self.depth -= 1

    def _parse_application(self) -> Term:
        has_head = self.read_head()
        args: List[Term] = []
        if self.consume("("):
            args.append(self.parse_term())
            if self.consume(")"):
                # Unary form ψ(x)
                return psi(args)
            if not self.consume(","):
                self.fail("',' or ')'")
        else:
            if not has_head and self.peek() not in ("_", "{"):
                self.fail(self._head_description() + ", '(', '_' or '{'")
            self.consume("_")
            if self.consume("{"):
                args.append(self.parse_term())
                self.expect("}")
            else:
                args.append(self.parse_term())
            self.expect("(")
        args.append(self.parse_term())
        while self.consume(","):
            args.append(self.parse_term())
        self.expect(")")
        args.reverse()
        return psi(args)

    def read_head(self) -> bool:
        """Consume a head symbol according to the policy; True if one was read."""
        policy = self.config.head_policy
        ch = self.peek()
        if policy == HeadPolicy.STRICT:
            if ch not in HEAD_SYMBOLS:
                self.fail(self._head_description())
            self.pos += 1
            return True
        if policy == HeadPolicy.OPTIONAL:
            if ch in HEAD_SYMBOLS:
                self.pos += 1
                return True
            return False
        if ch is not None and ch not in RESERVED:
            self.pos += 1
            return True
        return False

    def _head_description(self) -> str:
        if self.config.head_policy == HeadPolicy.NEGATIVE_SET:
            return "a head symbol"
        return " or ".join(HEAD_SYMBOLS)


def parse(text: str, config: Optional[ParserConfig] = None) -> Term:
    """Parse a complete array-tier term."""
    return Parser(text, config).parse()
