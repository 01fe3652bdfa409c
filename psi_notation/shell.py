"""
Interactive Notation Shell

A line-oriented read-eval-print loop. Each input line is
either a command or a term:

    <term>                 show the term, its collapse and canonicality
    compare <a> ; <b>      print a < b, a = b or a > b
    policy <name>          strict | optional | negative
    set <option> on|off    toggle a RenderOptions field
    help
    quit
"""

from __future__ import annotations
import argparse
import logging
from dataclasses import fields, replace
from typing import List, Optional

from .collapse import collapse
from .errors import NotationError
from .ordering import compare
from .parser import HeadPolicy, ParserConfig, parse
from .printer import RenderOptions, render
from .terms import is_canonical

logger = logging.getLogger(__name__)

POLICY_NAMES = {
    "strict": HeadPolicy.STRICT,
    "optional": HeadPolicy.OPTIONAL,
    "negative": HeadPolicy.NEGATIVE_SET,
}
OPTION_NAMES = tuple(f.name for f in fields(RenderOptions))
SWITCHES = {"on": True, "off": False}


class NotationShell:
    """Reads terms and commands, answers with rendered text."""

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        options: Optional[RenderOptions] = None,
    ):
        self.config = config or ParserConfig()
        self.options = options or RenderOptions()

    def handle(self, line: str) -> List[str]:
        """Answer one input line. Errors are reported, not raised."""
        line = line.strip()
        if not line:
            return []
        try:
            return self._dispatch(line)
        except NotationError as e:
            return [f"Error: {e}"]

    def _dispatch(self, line: str) -> List[str]:
        cmd, _, rest = line.partition(" ")
        if cmd == "help":
            return [__doc__.strip()]
        if cmd == "policy":
            return self._set_policy(rest.strip())
        if cmd == "set":
            return self._set_option(rest.split())
        if cmd == "compare":
            return self._compare(rest)
        return self._describe(line)

    def _describe(self, text: str) -> List[str]:
        term = parse(text, self.config)
        return [
            render(term, self.options),
            f"  collapse: {render(collapse(term), self.options)}",
            f"  canonical: {'yes' if is_canonical(term) else 'no'}",
        ]

    def _compare(self, rest: str) -> List[str]:
        left, sep, right = rest.partition(";")
        if not sep:
            return ["Usage: compare <a> ; <b>"]
        a = parse(left, self.config)
        b = parse(right, self.config)
        symbol = "<=>"[compare(a, b) + 1]
        return [f"{render(a, self.options)} {symbol} {render(b, self.options)}"]

    def _set_policy(self, name: str) -> List[str]:
        if name not in POLICY_NAMES:
            return [f"Unknown policy {name!r}; choose from {', '.join(POLICY_NAMES)}"]
        self.config = replace(self.config, head_policy=POLICY_NAMES[name])
        logger.debug("head policy set to %s", self.config.head_policy.name)
        return [f"policy {name}"]

    def _set_option(self, words: List[str]) -> List[str]:
        if len(words) != 2 or words[0] not in OPTION_NAMES or words[1] not in SWITCHES:
            return [f"Usage: set <{'|'.join(OPTION_NAMES)}> on|off"]
        name, value = words
        self.options = replace(self.options, **{name: SWITCHES[value]})
        return [f"{name} {value}"]

    def loop(self):
        """Run the read-eval-print loop on stdin until quit or end of input."""
        print("ψ notation shell (type help for commands)")
        while True:
            try:
                line = input().strip()
            except EOFError:
                break
            if line == "quit":
                break
            for out in self.handle(line):
                print(out)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Parse, compare and collapse ψ terms")
    parser.add_argument("-e", "--expr", default=None,
                        help="Describe one term and exit")
    parser.add_argument("--head", choices=sorted(POLICY_NAMES), default="strict",
                        help="Head symbol policy")
    parser.add_argument("--plain", action="store_true",
                        help="Do not abbreviate 1, ω, Ω and numerals")
    parser.add_argument("--tex", action="store_true",
                        help="Render TeX")
    parser.add_argument("--verbose", action="store_true",
                        help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    shell = NotationShell(
        ParserConfig(head_policy=POLICY_NAMES[args.head]),
        RenderOptions(abbreviate=not args.plain, tex=args.tex),
    )
    if args.expr is not None:
        lines = shell.handle(args.expr)
        for out in lines:
            print(out)
        return 1 if lines and lines[0].startswith("Error") else 0
    shell.loop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
