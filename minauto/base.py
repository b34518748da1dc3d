class AutomatonError(Exception):
    """Thrown if there's an attempt to construct or use an automaton with
    transition data that doesn't make sense for a DFA.

    """
    pass

class CapacityError(AutomatonError):
    """Thrown if an automaton has more states or alphabet symbols than
    the configured limits allow.

    """
    pass
