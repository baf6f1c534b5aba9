"""Terminal and nonterminal symbols of a grammar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .grammar import Grammar

END_MARKER = "$"


@dataclass(frozen=True)
class Symbol:
    name: str
    is_terminal: bool

    def __str__(self) -> str:
        return self.name


class SymbolTable:
    """Symbols in a fixed order: nonterminals, then terminals, then ``$``."""

    def __init__(self, symbols: Iterable[Symbol] = ()) -> None:
        self._symbols: dict[str, Symbol] = {}
        for symbol in symbols:
            self._symbols.setdefault(symbol.name, symbol)

    @classmethod
    def from_grammar(cls, grammar: Grammar) -> "SymbolTable":
        """Every left-hand side is a nonterminal; any other symbol is terminal."""
        found: dict[str, Symbol] = {}
        for production in grammar:
            found.setdefault(production.lhs, Symbol(production.lhs, False))
        for production in grammar:
            for name in production.rhs:
                found.setdefault(name, Symbol(name, True))
        found.setdefault(END_MARKER, Symbol(END_MARKER, True))
        return cls(found.values())

    def get(self, name: str) -> Symbol:
        try:
            return self._symbols[name]
        except KeyError:
            raise KeyError(f"unknown symbol: {name!r}") from None

    @property
    def terminals(self) -> list[Symbol]:
        return [s for s in self._symbols.values() if s.is_terminal]

    @property
    def nonterminals(self) -> list[Symbol]:
        return [s for s in self._symbols.values() if not s.is_terminal]

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)