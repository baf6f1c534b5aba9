import pytest

from lrforge.grammar import Production, parse_grammar
from lrforge.lr1 import (
    LR1Item,
    ParserContext,
    canonical_collection,
    closure,
    first_of_beta,
    goto,
)

GRAMMAR_TEXT = """\
S' -> S
S -> C C
C -> c C
C -> d
"""


@pytest.fixture
def context():
    return ParserContext.from_grammar(parse_grammar(GRAMMAR_TEXT))


@pytest.fixture
def start_item(context):
    return LR1Item(context.grammar[0], "$", 0)


def test_next_symbol_and_advance():
    item = LR1Item(Production("S", ("C", "C")), "$")
    assert item.next_symbol() == "C"
    advanced = item.advance().advance()
    assert advanced.dot == 2
    assert advanced.next_symbol() is None
    assert advanced.lookahead == "$"


def test_advance_complete_item_raises():
    item = LR1Item(Production("C", ("d",)), "c", 1)
    with pytest.raises(ValueError):
        item.advance()


def test_dot_out_of_range_raises():
    with pytest.raises(ValueError):
        LR1Item(Production("C", ("d",)), "c", 2)


def test_item_str_marks_dot():
    item = LR1Item(Production("S", ("C", "C")), "$", 1)
    assert str(item) == "S -> C . C, $"


def test_items_equal_by_value():
    p = Production("C", ("c", "C"))
    assert LR1Item(p, "d", 1) == LR1Item(p, "d", 1)
    assert len({LR1Item(p, "d", 0), LR1Item(p, "d", 1), LR1Item(p, "c", 0)}) == 3


def test_context_from_grammar(context):
    assert "S" in context.symbols
    assert set(context.first_sets.of("C")) == {"c", "d"}
    assert "$" in context.follow_sets.of("S'")


def test_context_from_empty_grammar_raises():
    with pytest.raises(ValueError):
        ParserContext.from_grammar(parse_grammar(""))


def test_first_of_beta(context):
    item = LR1Item(context.grammar[1], "$", 0)
    assert set(first_of_beta(item, 1, context)) == {"c", "d"}
    assert first_of_beta(item, 2, context) == ("$",)


def test_closure_of_start(context, start_item):
    items = closure([start_item], context)
    assert items[0] == start_item
    assert len(items) == 6
    c_items = {(i.production.rhs, i.lookahead) for i in items if i.production.lhs == "C"}
    assert c_items == {
        (("c", "C"), "c"),
        (("c", "C"), "d"),
        (("d",), "c"),
        (("d",), "d"),
    }


def test_closure_is_idempotent(context, start_item):
    once = closure([start_item], context)
    assert set(closure(once, context)) == set(once)


def test_goto_over_terminal(context, start_item):
    state = closure([start_item], context)
    target = goto(state, "c", context)
    assert all(i.production.lhs == "C" for i in target)
    assert {i.lookahead for i in target} == {"c", "d"}
    moved = [i for i in target if i.dot == 1]
    assert {i.production.rhs for i in moved} == {("c", "C")}


def test_goto_without_transition_is_empty(context, start_item):
    state = closure([start_item], context)
    assert goto(state, "$", context) == ()


def test_canonical_collection(context, start_item):
    states = canonical_collection(context)
    assert len(states) == 10
    assert states[0] == closure([start_item], context)
    assert len({frozenset(s) for s in states}) == len(states)


def test_canonical_collection_closed_under_goto(context):
    states = canonical_collection(context)
    known = {frozenset(s) for s in states}
    for state in states:
        for symbol in context.symbols:
            target = goto(state, symbol.name, context)
            if target:
                assert frozenset(target) in known