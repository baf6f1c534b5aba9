"""LR(1) items, closure, goto and the canonical collection of item sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .first import FirstSets, compute_first_sets
from .follow import FollowSets, compute_follow_sets
from .grammar import ARROW, EPSILON, Grammar, Production
from .symbols import END_MARKER, SymbolTable


@dataclass(frozen=True)
class LR1Item:
    """A production with a dot position and one lookahead terminal."""

    production: Production
    lookahead: str
    dot: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.dot <= len(self.production.rhs):
            raise ValueError(
                f"dot position {self.dot} out of range for {self.production}"
            )

    def next_symbol(self) -> str | None:
        """The symbol right after the dot, or None if the item is complete."""
        rhs = self.production.rhs
        return rhs[self.dot] if self.dot < len(rhs) else None

    def advance(self) -> "LR1Item":
        """The same item with the dot moved one symbol to the right."""
        if self.next_symbol() is None:
            raise ValueError(f"cannot advance complete item {self}")
        return LR1Item(self.production, self.lookahead, self.dot + 1)

    def __str__(self) -> str:
        rhs = list(self.production.rhs)
        rhs.insert(self.dot, ".")
        return f"{self.production.lhs} {ARROW} {' '.join(rhs)}, {self.lookahead}"


@dataclass(frozen=True)
class ParserContext:
    """Everything the item-set construction needs about a grammar."""

    grammar: Grammar
    symbols: SymbolTable
    first_sets: FirstSets
    follow_sets: FollowSets

    @classmethod
    def from_grammar(cls, grammar: Grammar) -> "ParserContext":
        if not len(grammar):
            raise ValueError("grammar has no productions")
        symbols = SymbolTable.from_grammar(grammar)
        first_sets = compute_first_sets(symbols, grammar)
        follow_sets = compute_follow_sets(symbols, first_sets, grammar)
        return cls(grammar, symbols, first_sets, follow_sets)

    def is_nonterminal(self, name: str) -> bool:
        return not self.symbols.get(name).is_terminal


ItemSet = tuple[LR1Item, ...]


def first_of_beta(item: LR1Item, dot: int, context: ParserContext) -> tuple[str, ...]:
    """Lookaheads for items spawned from ``item``: FIRST(rhs[dot:] lookahead)."""
    first = context.first_sets.of_sequence(item.production.rhs[dot:])
    result: dict[str, None] = {}
    for member in first:
        if member != EPSILON:
            result.setdefault(member)
    if EPSILON in first:
        result.setdefault(item.lookahead)
    return tuple(result)


def closure(items: Iterable[LR1Item], context: ParserContext) -> ItemSet:
    """Close a set of items, keeping the order in which items are found."""
    ordered = list(dict.fromkeys(items))
    seen = set(ordered)
    for item in ordered:
        name = item.next_symbol()
        if name is None or not context.is_nonterminal(name):
            continue
        lookaheads = first_of_beta(item, item.dot + 1, context)
        for production in context.grammar.productions_for(name):
            for lookahead in lookaheads:
                new = LR1Item(production, lookahead, 0)
                if new not in seen:
                    seen.add(new)
                    ordered.append(new)
    return tuple(ordered)


def goto(items: Iterable[LR1Item], symbol: str, context: ParserContext) -> ItemSet:
    """Items reached by moving the dot over ``symbol``, closed."""
    moved = [item.advance() for item in items if item.next_symbol() == symbol]
    if not moved:
        return ()
    return closure(moved, context)


def canonical_collection(context: ParserContext) -> list[ItemSet]:
    """The canonical collection of LR(1) item sets, the start state first."""
    start = LR1Item(context.grammar[0], END_MARKER, 0)
    states: list[ItemSet] = [closure([start], context)]
    known = {frozenset(states[0])}
    for state in states:
        for symbol in context.symbols:
            target = goto(state, symbol.name, context)
            if not target:
                continue
            key = frozenset(target)
            if key not in known:
                known.add(key)
                states.append(target)
    return states