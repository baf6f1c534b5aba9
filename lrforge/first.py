"""FIRST sets of grammar symbols."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from .grammar import EPSILON, Grammar
from .symbols import SymbolTable


class FirstSets:
    """FIRST set of every symbol, each kept in discovery order."""

    def __init__(self, sets: Mapping[str, Iterable[str]]) -> None:
        self._sets = {name: tuple(members) for name, members in sets.items()}

    def of(self, name: str) -> tuple[str, ...]:
        try:
            return self._sets[name]
        except KeyError:
            raise KeyError(f"no FIRST set for symbol {name!r}") from None

    def of_sequence(self, names: Iterable[str]) -> tuple[str, ...]:
        """FIRST of a string of symbols; contains ε only if all are nullable."""
        result: dict[str, None] = {}
        for name in names:
            first = self.of(name)
            for member in first:
                if member != EPSILON:
                    result.setdefault(member)
            if EPSILON not in first:
                return tuple(result)
        result.setdefault(EPSILON)
        return tuple(result)

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(self._sets.items())

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def __len__(self) -> int:
        return len(self._sets)


def compute_first_sets(symbols: SymbolTable, grammar: Grammar) -> FirstSets:
    """Iterate to a fixed point over the productions."""
    sets: dict[str, dict[str, None]] = {
        s.name: ({s.name: None} if s.is_terminal else {}) for s in symbols
    }

    def lookup(name: str) -> dict[str, None]:
        try:
            return sets[name]
        except KeyError:
            raise KeyError(f"symbol {name!r} is not in the symbol table") from None

    changed = True
    while changed:
        changed = False
        for production in grammar:
            target = lookup(production.lhs)
            before = len(target)
            nullable = True
            for name in production.rhs:
                first = lookup(name)
                for member in list(first):
                    if member != EPSILON:
                        target.setdefault(member)
                if EPSILON not in first:
                    nullable = False
                    break
            if nullable:
                target.setdefault(EPSILON)
            if len(target) != before:
                changed = True
    return FirstSets(sets)