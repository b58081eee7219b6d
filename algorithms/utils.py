"""选择算法共用的辅助函数。

包括原地元素交换以及输入序列、名次参数的校验。
"""
from numbers import Integral, Real
from typing import Any, List, Sequence


def swap(items: List[Any], i: int, j: int) -> None:
    """在列表中原地交换两个元素的位置。

    参数:
        items: 要操作的列表
        i: 第一个元素的索引
        j: 第二个元素的索引

    示例:
        >>> arr = [1, 2, 3]
        >>> swap(arr, 0, 2)
        >>> arr
        [3, 2, 1]
    """
    items[i], items[j] = items[j], items[i]


def working_copy(values: Sequence[Any]) -> List[Any]:
    """校验元素类型并返回调用方序列的私有副本。

    只接受整数和浮点数（bool 除外）。

    异常:
        TypeError: 序列不可迭代或包含非数值元素
    """
    if isinstance(values, (str, bytes)):
        raise TypeError("values 必须是数值序列，而不是字符串")
    arr = list(values)
    for item in arr:
        if isinstance(item, bool) or not isinstance(item, Real):
            raise TypeError(f"元素必须是数值类型，得到: {type(item).__name__}")
    return arr


def check_rank(n: Any) -> int:
    """确认名次参数是整数。范围检查由算法自己完成。"""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise TypeError(f"名次 n 必须是整数，得到: {type(n).__name__}")
    return int(n)


def rank_in_range(n: int, size: int) -> bool:
    """名次是否落在 [1, size] 内。"""
    return 0 < n <= size
