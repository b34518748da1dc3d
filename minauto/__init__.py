r"""
minauto
=======

`minauto` is a small Python package for minimizing deterministic
finite automata (DFAs), e.g. the ones produced (often with lots of
redundant states) when building a lexer from regular expressions.

Given a DFA as a transition table, the package computes an equivalent
DFA with the fewest possible states, and marks the states which are
dead (unreachable from the initial state, or unable to reach an accept
state). It provides modules to:

- build and query DFAs (`minauto.automaton`)

- minimize them, via partition refinement on a union-find forest
  (`minauto.minimize`, `minauto.partition`, `minauto.unionfind`)

- find dead states (`minauto.dead`)

- read and print DFAs as plain-text transition tables
  (`minauto.table_parse`, `minauto.table_format`)

## Example usage

```python
from minauto import Automaton, minimize, format_automaton

dfa = Automaton([
    [1, 2],
    [1, 2],
    [1, 2]
], accept_states=[1], alphabet="ab")

print(format_automaton(minimize(dfa)))

```

This prints:

```
         a    b

A0       A0   s1
s1       A0   s1

Initial state: s1
```

The same thing can be done from the command line with `python -m
minauto table_file`.

"""

from .base import AutomatonError, CapacityError
from .automaton import Automaton, StateAttribute
from .minimize import minimize, compress
from .dead import find_dead_states
from .table_parse import parse_table, load_table_file, TableInputException
from .table_format import format_automaton
