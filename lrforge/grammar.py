"""Grammar productions and the plain-text grammar format."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

EPSILON = "ε"
ARROW = "->"
MAX_RHS_SYMBOLS = 64
MAX_LHS_LENGTH = 127

_BLANKS = " \t"
_RHS_SEPARATORS = re.compile(r"[ \t\n]+")

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Production:
    """A single rule ``lhs -> rhs``; an empty ``rhs`` derives the empty string."""

    lhs: str
    rhs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rhs", tuple(self.rhs))

    def __str__(self) -> str:
        body = " ".join(self.rhs) if self.rhs else EPSILON
        return f"{self.lhs} {ARROW} {body}"


@dataclass
class Grammar:
    """An ordered list of productions; the first one names the start symbol."""

    productions: list[Production] = field(default_factory=list)

    def add(self, production: Production) -> None:
        self.productions.append(production)

    @property
    def start(self) -> str:
        if not self.productions:
            raise ValueError("grammar has no productions")
        return self.productions[0].lhs

    def productions_for(self, lhs: str) -> list[Production]:
        """Return the productions whose left-hand side is ``lhs``, in order."""
        return [p for p in self.productions if p.lhs == lhs]

    def format(self) -> str:
        """Render the grammar one production per line."""
        return "".join(f"{p}\n" for p in self.productions)

    def __iter__(self) -> Iterator[Production]:
        return iter(self.productions)

    def __len__(self) -> int:
        return len(self.productions)

    def __getitem__(self, index):
        return self.productions[index]


def parse_grammar(text: str) -> Grammar:
    """Parse grammar text: one ``LHS -> sym sym ...`` per line.

    Blank lines and lines starting with ``#`` are ignored; lines without an
    arrow are reported and skipped.
    """
    grammar = Grammar()
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if not line or line.startswith("#"):
            continue
        lhs, arrow, rhs = line.partition(ARROW)
        if not arrow:
            log.warning("Invalid production format: %s", line)
            continue
        lhs = lhs.strip(_BLANKS)[:MAX_LHS_LENGTH]
        symbols = [token for token in _RHS_SEPARATORS.split(rhs) if token]
        grammar.add(Production(lhs, tuple(symbols[:MAX_RHS_SYMBOLS])))
    return grammar


def load_grammar(path) -> Grammar:
    """Read and parse a grammar file."""
    return parse_grammar(Path(path).read_text(encoding="utf-8"))