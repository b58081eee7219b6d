"""有界堆选择算法实现。"""
import logging
from typing import List, Sequence

from ...base import Algorithm
from ...utils import check_rank, rank_in_range, swap, working_copy
from ..result import SelectionResult

logger = logging.getLogger(__name__)


class HeapSelect(Algorithm):
    """用容量为 n 的最大堆查找第 n 小的元素。

    堆建在工作副本的前 n 个位置上，始终保存已扫描元素中最小的 n 个，
    堆顶就是其中的最大值。运行时间与输入顺序无关。
    """

    def execute(self, data: Sequence[float], n: int) -> SelectionResult:
        """返回数据中第 n 小的元素（n 从 1 开始）。

        参数:
            data: 待选择的数值序列，不会被修改
            n: 名次，1 表示最小值

        返回:
            SelectionResult: 成功时 working 的前 n 个位置是一个最大堆，
            装着最小的 n 个值，且 working[0] 等于返回值

        时间复杂度: O(len * log n)，建堆 O(n)
        空间复杂度: O(1)
        """
        n = check_rank(n)
        arr = working_copy(data)
        size = len(arr)
        if not rank_in_range(n, size):
            logger.debug("rejected rank %d for %d values", n, size)
            return SelectionResult.invalid(n, size)

        # 用前 n 个元素构建最大堆
        for i in range((n - 2) // 2, -1, -1):
            self._sift_down(arr, i, n - 1)

        # 比堆顶小的元素替换堆顶并下沉
        replaced = 0
        for i in range(n, size):
            if arr[i] < arr[0]:
                arr[0] = arr[i]
                self._sift_down(arr, 0, n - 1)
                replaced += 1
        logger.debug("heap select replaced the root %d times", replaced)

        return SelectionResult.success(n, arr[0], arr)

    def _sift_down(self, arr: List[float], start: int, end: int) -> None:
        """把 start 处的节点下沉，恢复 [start, end] 内的最大堆性质。"""
        parent = start
        child = 2 * parent + 1

        while child <= end:
            if child + 1 <= end and arr[child + 1] > arr[child]:
                child += 1
            if arr[parent] >= arr[child]:
                break
            swap(arr, parent, child)
            parent = child
            child = 2 * parent + 1
