"""Application engine for malt.

Function values are opaque capabilities: the evaluator hands them an
already-evaluated argument list and takes back a value.
"""

from __future__ import annotations

from typing import Sequence

from malt import LispValue
from malt.errors import MaltTypeError
from malt.types.function import Function


def apply(head: LispValue, args: Sequence[LispValue]) -> LispValue:
    """Invoke `head` with `args`; raises MaltTypeError for non-functions."""
    if not isinstance(head, Function):
        raise MaltTypeError(f"not a function: {head}")
    return head(list(args))
