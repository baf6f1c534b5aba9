"""FOLLOW sets of nonterminals."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from .first import FirstSets
from .grammar import EPSILON, Grammar
from .symbols import END_MARKER, SymbolTable


class FollowSets:
    """FOLLOW set of every nonterminal, each kept in discovery order."""

    def __init__(self, sets: Mapping[str, Iterable[str]]) -> None:
        self._sets = {name: tuple(members) for name, members in sets.items()}

    def of(self, name: str) -> tuple[str, ...]:
        try:
            return self._sets[name]
        except KeyError:
            raise KeyError(f"no FOLLOW set for symbol {name!r}") from None

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(self._sets.items())

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def __len__(self) -> int:
        return len(self._sets)


def compute_follow_sets(
    symbols: SymbolTable, first_sets: FirstSets, grammar: Grammar
) -> FollowSets:
    """Iterate to a fixed point; the start symbol is followed by ``$``."""
    start = grammar.start
    sets: dict[str, dict[str, None]] = {s.name: {} for s in symbols.nonterminals}
    if start in sets:
        sets[start][END_MARKER] = None

    changed = True
    while changed:
        changed = False
        for production in grammar:
            follow_a = sets[production.lhs]
            for i, name in enumerate(production.rhs):
                if symbols.get(name).is_terminal:
                    continue
                follow_b = sets[name]
                before = len(follow_b)
                rest = first_sets.of_sequence(production.rhs[i + 1:])
                for member in rest:
                    if member != EPSILON:
                        follow_b.setdefault(member)
                if EPSILON in rest:
                    for member in list(follow_a):
                        follow_b.setdefault(member)
                if len(follow_b) != before:
                    changed = True
    return FollowSets(sets)