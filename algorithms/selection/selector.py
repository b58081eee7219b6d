"""选择算法的统一入口。

默认使用快速选择（平均情况更快）；需要与输入顺序无关的
O(len * log n) 上界时可显式选择有界堆算法。
"""
from __future__ import annotations

from enum import Enum
from numbers import Real
from typing import Dict, Sequence, Union

from ..base import Algorithm
from .advanced.heap_select import HeapSelect
from .basic.quick_select import QuickSelect
from .result import SelectionResult


class SelectionStrategy(Enum):
    """可选的选择策略"""
    PARTITION = "partition"
    HEAP = "heap"


_IMPLEMENTATIONS: Dict[SelectionStrategy, Algorithm] = {
    SelectionStrategy.PARTITION: QuickSelect(),
    SelectionStrategy.HEAP: HeapSelect(),
}


def resolve_strategy(strategy: Union[SelectionStrategy, str]) -> SelectionStrategy:
    """把策略名或枚举值转换为 SelectionStrategy，未知名称抛出 ValueError。"""
    if isinstance(strategy, SelectionStrategy):
        return strategy
    try:
        return SelectionStrategy(str(strategy).lower())
    except ValueError:
        choices = ", ".join(s.value for s in SelectionStrategy)
        raise ValueError(f"未知的选择策略: {strategy!r}（可选: {choices}）") from None


def select(
    values: Sequence[Real],
    n: int,
    strategy: Union[SelectionStrategy, str] = SelectionStrategy.PARTITION,
) -> SelectionResult:
    """用指定策略选出第 n 小的值。"""
    return _IMPLEMENTATIONS[resolve_strategy(strategy)].execute(values, n)


def select_partition(values: Sequence[Real], n: int) -> SelectionResult:
    return select(values, n, SelectionStrategy.PARTITION)


def select_heap(values: Sequence[Real], n: int) -> SelectionResult:
    return select(values, n, SelectionStrategy.HEAP)


def nth_smallest(
    values: Sequence[Real],
    n: int,
    strategy: Union[SelectionStrategy, str] = SelectionStrategy.PARTITION,
) -> Real:
    """直接返回第 n 小的值。

    异常:
        InvalidRankError: n 不在 [1, len(values)] 内
    """
    return select(values, n, strategy).unwrap()
