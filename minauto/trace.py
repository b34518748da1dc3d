"""Checkpoint events reported during minimization.

The minimization functions accept an optional `trace` callable. When
one is given it is called as `trace(event, **details)` at each of the
checkpoints below:

- `PASS_START`: `pass_number`, `class_count`

- `CLASS_SPLIT`: `representative` (of the class at pass start),
  `classes` (the sub-classes it was split into)

- `STATE_COMPRESSION`: `old_state`, `new_state`

- `DEAD_STATE`: `state`, `reason` (`UNREACHABLE` or `UNPRODUCTIVE`)

"""

import logging

PASS_START = "pass_start"
CLASS_SPLIT = "class_split"
STATE_COMPRESSION = "state_compression"
DEAD_STATE = "dead_state"

UNREACHABLE = "unreachable"
UNPRODUCTIVE = "unproductive"


def emit(trace, event, **details):
    if trace is not None:
        trace(event, **details)


def logging_tracer(logger=None, level=logging.DEBUG):
    """Get a trace callable which reports every event to a logger.

    Parameters
    ----------
    logger : logging.Logger
        logger to report to. If `None`, use this module's logger.
    level : int
        logging level for the reports.

    Returns
    -------
    callable
        a function suitable for the `trace` argument of `minimize`.

    """
    if logger is None:
        logger = logging.getLogger(__name__)

    def trace(event, **details):
        logger.log(level, "%s: %s", event,
                   ", ".join("{}={}".format(k, v)
                             for k, v in sorted(details.items())))
    return trace
