"""Helpers shared by the minauto test suite.

"""

from . import testing
