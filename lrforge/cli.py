"""Command line: print the FIRST sets of a grammar file."""

from __future__ import annotations

import argparse
import sys

from .first import FirstSets, compute_first_sets
from .grammar import load_grammar
from .symbols import SymbolTable

DEFAULT_GRAMMAR = "./grammar/hulk_grammar.txt"


def format_first_sets(first_sets: FirstSets) -> str:
    """One ``First(X) = {a, b, } `` line per symbol."""
    lines = []
    for name, members in first_sets.items():
        body = "".join(f"{member}, " for member in members)
        lines.append(f"First({name}) = {{{body}}} \n")
    return "".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="lrforge", description="Print the FIRST sets of a grammar."
    )
    parser.add_argument(
        "grammar", nargs="?", default=DEFAULT_GRAMMAR, help="grammar file to read"
    )
    args = parser.parse_args(argv)

    try:
        grammar = load_grammar(args.grammar)
    except OSError as exc:
        print(f"Error opening grammar file: {exc}", file=sys.stderr)
        return 1

    try:
        symbols = SymbolTable.from_grammar(grammar)
        first_sets = compute_first_sets(symbols, grammar)
    except KeyError as exc:
        print(f"Invalid grammar: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_first_sets(first_sets))
    return 0


if __name__ == "__main__":
    sys.exit(main())