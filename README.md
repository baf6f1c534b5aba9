# lrforge

Tools for analysing context-free grammars on the way to an LR(1) parser:

- reading a grammar from a plain text file (`lrforge.grammar`),
- building the table of terminal and nonterminal symbols (`lrforge.symbols`),
- computing FIRST sets (`lrforge.first`) and FOLLOW sets (`lrforge.follow`),
- building LR(1) items, closures, GOTO sets and the canonical collection of
  item sets (`lrforge.lr1`).

## Grammar files

One production per line, with the left-hand side and the right-hand side
separated by `->`. Right-hand side symbols are separated by spaces or tabs.
Empty lines and lines starting with `#` are ignored; a line without `->` is
logged as a warning and skipped. The left-hand side of the first production
is the start symbol, and `ε` stands for the empty string.

```
# expressions
E -> T E'
E' -> + T E'
E' -> ε
T -> id
```

A left-hand side is cut to 127 characters and a right-hand side to 64
symbols.

Every symbol that appears on a left-hand side is a nonterminal; every other
symbol is a terminal. The end-of-input marker `$` is always added as a
terminal. `SymbolTable` keeps its symbols in that order: nonterminals in order
of first appearance, then terminals, then `$`.

## Command line

```
lrforge path/to/grammar.txt
```

prints the FIRST set of every symbol in the symbol table, one per line, in
symbol-table order, for example:

```
First(E) = {id, } 
```

Without an argument the command reads `./grammar/hulk_grammar.txt`. It exits
with status 1 and a message on standard error if the file cannot be read.

## Library use

```python
from lrforge.grammar import load_grammar, parse_grammar
from lrforge.symbols import SymbolTable
from lrforge.first import compute_first_sets
from lrforge.follow import compute_follow_sets
from lrforge.lr1 import ParserContext, canonical_collection

grammar = parse_grammar("S -> a S\nS -> b\n")
symbols = SymbolTable.from_grammar(grammar)
first = compute_first_sets(symbols, grammar)
follow = compute_follow_sets(symbols, first, grammar)

print(first.of("S"))    # ('a', 'b')
print(follow.of("S"))   # ('$',)

context = ParserContext.from_grammar(grammar)
for state in canonical_collection(context):
    for item in state:
        print(item)     # e.g. "S -> . a S, $"
```

- `Grammar.format()` renders the productions back to text, one per line, and
  `Grammar.productions_for(lhs)` returns the productions of one nonterminal.
- `FirstSets.of_sequence(names)` gives FIRST of a string of symbols; it holds
  `ε` only when every symbol in it can derive the empty string.
- FOLLOW sets are kept for nonterminals only; the start symbol's holds `$`.
- `LR1Item` is a production, a lookahead terminal and a dot position;
  `next_symbol()` and `advance()` move over its right-hand side.
- `closure(items, context)` and `goto(items, symbol, context)` return item
  sets as tuples in discovery order; `first_of_beta(item, dot, context)` gives
  the lookaheads used for the items a closure adds.
- `canonical_collection(context)` returns the item sets with the start state
  first, seeded with the first production and lookahead `$`.

## What it does not do

The package stops at the canonical collection of LR(1) item sets. It does not
build ACTION/GOTO parse tables, report conflicts, or parse input text with
the grammar, and the command line prints FIRST sets only.

## Installing and testing

```
pip install .[test]
pytest
```