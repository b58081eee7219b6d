"""
算法管理器 - 选择算法的注册、执行与监控

按名称注册选择算法，统一执行并记录每次调用的耗时、输入规模和成败，
支持在线程池中批量执行互不相关的调用。
"""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .base import Algorithm
from .config import SelectionSettings
from .selection.advanced.heap_select import HeapSelect
from .selection.basic.quick_select import QuickSelect
from .selection.result import SelectionResult


class AlgorithmCategory(Enum):
    """算法分类枚举"""
    SELECTION = "selection"


@dataclass
class AlgorithmMetrics:
    """算法执行指标"""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None
    rank: Optional[int] = None


@dataclass
class AlgorithmConfig:
    """算法配置"""
    enable_metrics: bool = True  # 是否启用指标收集
    log_invalid_rank: bool = True  # 名次非法时是否记录警告


class AlgorithmRegistry:
    """算法注册表"""

    def __init__(self):
        self._algorithms: Dict[str, Type[Algorithm]] = {}
        self._categories: Dict[str, AlgorithmCategory] = {}
        self._configs: Dict[str, AlgorithmConfig] = {}
        self._register_default_algorithms()

    def _register_default_algorithms(self) -> None:
        """注册默认算法"""
        self.register("quick_select", QuickSelect, AlgorithmCategory.SELECTION)
        self.register("heap_select", HeapSelect, AlgorithmCategory.SELECTION)

    def register(self, name: str, algorithm_class: Type[Algorithm],
                 category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
        """
        注册算法

        Args:
            name: 算法名称
            algorithm_class: 算法类
            category: 算法分类
            config: 算法配置
        """
        if not isinstance(algorithm_class, type) or not issubclass(algorithm_class, Algorithm):
            raise ValueError(f"算法类 {algorithm_class} 必须继承自 Algorithm")

        self._algorithms[name] = algorithm_class
        self._categories[name] = category
        self._configs[name] = config or AlgorithmConfig()

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise KeyError(f"未找到算法: {name}")
        return self._algorithms[name]

    def get_category(self, name: str) -> Optional[AlgorithmCategory]:
        return self._categories.get(name)

    def get_config(self, name: str) -> AlgorithmConfig:
        return self._configs.get(name, AlgorithmConfig())

    def list_algorithms(self, category: Optional[AlgorithmCategory] = None) -> List[str]:
        """列出算法"""
        if category is None:
            return list(self._algorithms.keys())
        return [name for name, cat in self._categories.items() if cat == category]


class AlgorithmManager:
    """
    算法管理器

    每次执行都新建算法实例，并在调用方序列的副本上运行，
    因此可以在多个线程中并发处理互不相关的输入。
    """

    def __init__(self, settings: Optional[SelectionSettings] = None):
        self.settings = settings or SelectionSettings()
        self.logger = logging.getLogger(__name__)
        self.registry = AlgorithmRegistry()
        self.executor = ThreadPoolExecutor(max_workers=self.settings.max_workers)
        self._metrics_history: Dict[str, List[AlgorithmMetrics]] = {}

    def execute_algorithm(self, algorithm_name: str, values, n: int) -> SelectionResult:
        """
        执行算法

        Args:
            algorithm_name: 算法名称
            values: 数值序列
            n: 名次（从 1 开始）

        Returns:
            SelectionResult，名次非法时为失败结果

        Raises:
            KeyError: 算法不存在
            TypeError: 输入类型错误
        """
        algorithm_class = self.registry.get_algorithm(algorithm_name)
        config = self.registry.get_config(algorithm_name)
        record = config.enable_metrics and self.settings.enable_metrics

        start_time = time.perf_counter()

        try:
            result = algorithm_class().execute(values, n)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            if record:
                self._record_metrics(algorithm_name, AlgorithmMetrics(
                    execution_time=execution_time,
                    success=False,
                    error_message=str(e),
                    input_size=self._estimate_input_size(values),
                    rank=n if isinstance(n, int) else None,
                ))
            self.logger.error(f"算法 {algorithm_name} 执行失败: {e}")
            raise

        execution_time = time.perf_counter() - start_time
        if record:
            self._record_metrics(algorithm_name, AlgorithmMetrics(
                execution_time=execution_time,
                success=result.ok,
                error_message=None if result.ok else str(result.error),
                input_size=self._estimate_input_size(values),
                rank=n,
            ))

        if result.ok:
            self.logger.info(f"算法 {algorithm_name} 执行成功，耗时: {execution_time:.4f}s")
        elif config.log_invalid_rank:
            self.logger.warning(f"算法 {algorithm_name} 拒绝了请求: {result.error}")
        return result

    def execute_algorithm_async(self, algorithm_name: str, values, n: int) -> Future:
        """在线程池中异步执行算法，返回 Future"""
        return self.executor.submit(self.execute_algorithm, algorithm_name, values, n)

    def batch_execute(self, tasks: List[Dict[str, Any]]) -> List[Optional[SelectionResult]]:
        """
        批量执行算法

        Args:
            tasks: 任务列表，每个任务形如
                {"algorithm": "quick_select", "values": [...], "n": 3}

        Returns:
            与任务一一对应的结果列表，抛出异常的任务对应 None
        """
        futures = []
        for task in tasks:
            future = self.execute_algorithm_async(task['algorithm'], task.get('values', []), task.get('n', 1))
            futures.append(future)

        results = []
        for future in futures:
            try:
                results.append(future.result())
            except Exception as e:
                self.logger.error(f"批量执行任务失败: {e}")
                results.append(None)

        return results

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        """获取算法执行指标"""
        return self._metrics_history.get(algorithm_name, [])

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """
        获取算法性能摘要

        Args:
            algorithm_name: 算法名称

        Returns:
            性能摘要字典
        """
        metrics = self.get_metrics(algorithm_name)
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times)
        }

    def _estimate_input_size(self, values: Any) -> Optional[int]:
        """估算输入数据大小"""
        if hasattr(values, '__len__'):
            return len(values)
        return None

    def _record_metrics(self, algorithm_name: str, metrics: AlgorithmMetrics) -> None:
        """记录算法执行指标"""
        history = self._metrics_history.setdefault(algorithm_name, [])
        history.append(metrics)

        # 限制历史记录数量
        max_history = self.settings.metrics_history
        if len(history) > max_history:
            del history[:-max_history]

    def shutdown(self) -> None:
        """关闭算法管理器"""
        self.executor.shutdown(wait=True)


# 全局算法管理器实例
_algorithm_manager = None


def get_algorithm_manager() -> AlgorithmManager:
    """获取全局算法管理器实例"""
    global _algorithm_manager
    if _algorithm_manager is None:
        _algorithm_manager = AlgorithmManager()
    return _algorithm_manager


def execute_algorithm(algorithm_name: str, values, n: int) -> SelectionResult:
    """便捷函数：执行算法"""
    return get_algorithm_manager().execute_algorithm(algorithm_name, values, n)


def register_algorithm(name: str, algorithm_class: Type[Algorithm],
                       category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
    """便捷函数：注册算法"""
    get_algorithm_manager().registry.register(name, algorithm_class, category, config)
