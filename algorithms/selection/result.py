"""选择结果的封装。

选择算法不再用 -1 之类的哨兵值表示名次非法（-1 本身就可能是合法答案），
而是返回带标记的 :class:`SelectionResult`：成功时携带值和工作副本，
失败时携带 :class:`InvalidRankError`。
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Optional, Tuple


class InvalidRankError(ValueError):
    """名次 n 不在 [1, size] 范围内。"""

    def __init__(self, rank: int, size: int) -> None:
        self.rank = rank
        self.size = size
        super().__init__(f"名次 {rank} 超出有效范围 [1, {size}]")


@dataclass(frozen=True)
class SelectionResult:
    """一次选择调用的结果。

    属性:
        rank: 请求的名次 n
        value: 第 n 小的值，失败时为 None
        working: 调用结束时的工作副本，前 n 个位置（作为多重集）
            恰好是原序列最小的 n 个值；失败时为空
        error: 失败原因，成功时为 None
    """

    rank: int
    value: Optional[Real] = None
    working: Tuple[Real, ...] = ()
    error: Optional[InvalidRankError] = None

    @classmethod
    def success(cls, rank: int, value: Real, working) -> "SelectionResult":
        return cls(rank=rank, value=value, working=tuple(working))

    @classmethod
    def invalid(cls, rank: int, size: int) -> "SelectionResult":
        return cls(rank=rank, error=InvalidRankError(rank, size))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def prefix(self) -> Tuple[Real, ...]:
        """工作副本中最小的 n 个值（内部顺序不保证）。"""
        if not self.ok:
            return ()
        return self.working[: self.rank]

    def unwrap(self) -> Real:
        """返回选中的值，失败时抛出保存的异常。"""
        if self.error is not None:
            raise self.error
        return self.value
