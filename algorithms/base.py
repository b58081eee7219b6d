from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """所有选择算法的基类。

    具体算法接收一个数值序列和 1 起始的名次 n，
    在私有副本上原地工作，返回封装后的选择结果。

    子类必须实现:
        execute: 执行算法并返回结果的抽象方法
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，通常为 (values, n)
            **kwargs: 关键字参数，具体取决于算法实现

        返回:
            Any: 算法执行的结果，选择算法返回 SelectionResult
        """
        raise NotImplementedError
