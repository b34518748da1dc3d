"""table_format.py: render DFAs as human-readable transition tables.

Each live state is printed on its own line, prefixed with its attribute
letter (`A` for accept states, `s` for the others) and followed by its
transitions. Dead states are left out, and so are transitions into
them (printed as `-`).

"""

EMPTY_MESSAGE = "DFA minimized to EMPTY DFA..."


def state_name(automaton, state):
    return "{}{}".format(automaton.attribute(state).value, state)


def format_automaton(automaton):
    """Get a printable transition table for an automaton.

    Parameters
    ----------
    automaton : Automaton
        the automaton to format

    Returns
    -------
    string
        the table, ending with the initial state (or with
        `EMPTY_MESSAGE` if every state is dead).

    """
    output = "{:9}".format("")
    for label in automaton.alphabet:
        output += "{:<5}".format(label)
    output += "\n"

    empty = True
    for state in automaton.states():
        if automaton.is_dead(state):
            continue
        empty = False

        output += "\n{:<9}".format(state_name(automaton, state))
        for symbol in range(automaton.alphabet_size):
            target = automaton.transition(state, symbol)
            if target is None or automaton.is_dead(target):
                output += "{:<5}".format("-")
            else:
                output += "{:<5}".format(state_name(automaton, target))

    if empty:
        output += EMPTY_MESSAGE + "\n"
    else:
        output += "\n\nInitial state: {}\n".format(
            state_name(automaton, automaton.initial_state))

    return output

