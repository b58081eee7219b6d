"""快速选择算法实现。"""
import logging
from typing import List, Sequence

from ...base import Algorithm
from ...utils import check_rank, rank_in_range, swap, working_copy
from ..result import SelectionResult

logger = logging.getLogger(__name__)


class QuickSelect(Algorithm):
    """使用快速选择算法查找第 n 小的元素。

    与快速排序使用相同的分区步骤，但每次只进入包含目标名次的那一侧。
    基准值固定取区间最后一个元素，因此有序或逆序输入会退化到 O(n^2)。
    """

    def execute(self, data: Sequence[float], n: int) -> SelectionResult:
        """返回数据中第 n 小的元素（n 从 1 开始）。

        参数:
            data: 待选择的数值序列，不会被修改
            n: 名次，1 表示最小值

        返回:
            SelectionResult: 成功时 working 的前 n 个位置恰好是最小的 n 个值；
            n 不在 [1, len(data)] 内时为失败结果

        时间复杂度:
            - 平均情况: O(n)
            - 最坏情况: O(n^2) - 每次基准值都是区间的最值时
        空间复杂度: O(1) - 在副本上原地分区
        """
        n = check_rank(n)
        arr = working_copy(data)  # 创建数据副本，避免修改原数组
        if not rank_in_range(n, len(arr)):
            logger.debug("rejected rank %d for %d values", n, len(arr))
            return SelectionResult.invalid(n, len(arr))

        value = self._quickselect(arr, 0, len(arr) - 1, n - 1)
        return SelectionResult.success(n, value, arr)

    def _quickselect(self, arr: List[float], low: int, high: int, target: int) -> float:
        """在 [low, high] 内迭代分区，直到基准值落在 target 上。"""
        steps = 0
        while low <= high:
            pivot = self._partition(arr, low, high)
            steps += 1
            if pivot == target:
                break
            if pivot > target:
                # 目标在左半部分
                high = pivot - 1
            else:
                # 目标在右半部分
                low = pivot + 1
        logger.debug("quickselect finished after %d partition steps", steps)
        return arr[target]

    def _partition(self, arr: List[float], low: int, high: int) -> int:
        """分区函数，将区间分为两部分。

        选择最后一个元素作为基准值，将小于等于基准值的元素放在左边，
        大于基准值的元素放在右边。相等元素归入左边，重复值不会导致死循环。

        返回:
            int: 基准值的最终位置索引
        """
        pivot = arr[high]
        i = low - 1

        for j in range(low, high):
            if arr[j] <= pivot:
                i += 1
                swap(arr, i, j)

        swap(arr, i + 1, high)
        return i + 1
