"""Order-statistic selection: n-th smallest value of a numeric sequence."""

from .advanced.heap_select import HeapSelect
from .basic.quick_select import QuickSelect
from .result import InvalidRankError, SelectionResult
from .selector import (
    SelectionStrategy,
    nth_smallest,
    resolve_strategy,
    select,
    select_heap,
    select_partition,
)

__all__ = [
    "HeapSelect",
    "InvalidRankError",
    "QuickSelect",
    "SelectionResult",
    "SelectionStrategy",
    "nth_smallest",
    "resolve_strategy",
    "select",
    "select_heap",
    "select_partition",
]
