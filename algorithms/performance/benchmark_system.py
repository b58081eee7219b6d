"""
选择算法性能基准测试系统

在多种数据模式（随机、有序、逆序、大量重复）下对比快速选择与有界堆选择，
按输入规模汇总耗时与吞吐量，并把结果写成 JSON 报告。
"""

import json
import logging
import statistics
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ..selection.result import SelectionResult
from ..selection.selector import select_heap, select_partition

SelectFunc = Callable[[List[int], int], SelectionResult]


class BenchmarkStatus(Enum):
    """基准测试状态"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class DataPattern(Enum):
    """测试数据模式"""
    RANDOM = "random"
    SORTED = "sorted"
    REVERSE_SORTED = "reverse_sorted"
    DUPLICATE_HEAVY = "duplicate_heavy"


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    algorithm_name: str
    test_sizes: List[int]
    pattern: DataPattern = DataPattern.RANDOM
    rank_fraction: float = 0.5  # 名次 = max(1, round(size * rank_fraction))
    iterations: int = 3
    warmup_iterations: int = 1
    seed: Optional[int] = None

    def rank_for(self, size: int) -> int:
        return min(size, max(1, round(size * self.rank_fraction)))


@dataclass
class PerformanceMetrics:
    """性能指标"""
    algorithm_name: str
    input_size: int
    rank: int
    execution_time: float
    throughput: Optional[float] = None
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

        # 计算吞吐量（每秒处理的元素数）
        if self.throughput is None and self.execution_time > 0:
            self.throughput = self.input_size / self.execution_time


@dataclass
class BenchmarkResult:
    """基准测试结果"""
    config: BenchmarkConfig
    status: BenchmarkStatus
    start_time: str
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """按输入规模分组汇总"""
        if not self.metrics:
            return {}

        size_groups: Dict[int, List[PerformanceMetrics]] = {}
        for metric in self.metrics:
            size_groups.setdefault(metric.input_size, []).append(metric)

        summary = {}
        for size, group_metrics in size_groups.items():
            execution_times = [m.execution_time for m in group_metrics]
            throughputs = [m.throughput for m in group_metrics if m.throughput]

            size_summary = {
                "input_size": size,
                "rank": group_metrics[0].rank,
                "sample_count": len(execution_times),
                "execution_time": _describe(execution_times),
            }
            if throughputs:
                size_summary["throughput"] = _describe(throughputs)

            summary[f"size_{size}"] = size_summary

        return summary

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["status"] = self.status.value
        payload["config"]["pattern"] = self.config.pattern.value
        return payload


def _describe(samples: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(samples),
        "median": statistics.median(samples),
        "std": statistics.stdev(samples) if len(samples) > 1 else 0,
        "min": min(samples),
        "max": max(samples),
    }


class DataGenerator:
    """测试数据生成器"""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def generate(self, pattern: DataPattern, size: int) -> List[int]:
        if pattern is DataPattern.RANDOM:
            return self.generate_random_integers(size)
        if pattern is DataPattern.SORTED:
            return self.generate_sorted_integers(size)
        if pattern is DataPattern.REVERSE_SORTED:
            return self.generate_sorted_integers(size, reverse=True)
        return self.generate_duplicate_heavy(size)

    def generate_random_integers(self, size: int, min_val: int = 0, max_val: Optional[int] = None) -> List[int]:
        """生成随机整数列表"""
        if max_val is None:
            max_val = max(1, size * 2)
        return self._rng.integers(min_val, max_val, size).tolist()

    @staticmethod
    def generate_sorted_integers(size: int, reverse: bool = False) -> List[int]:
        """生成有序整数列表"""
        data = list(range(size))
        return data[::-1] if reverse else data

    def generate_duplicate_heavy(self, size: int, unique_ratio: float = 0.1) -> List[int]:
        """生成重复元素较多的数据"""
        unique_count = max(1, int(size * unique_ratio))
        return self._rng.integers(0, unique_count, size).tolist()


class PerformanceBenchmark:
    """
    性能基准测试系统

    results_dir 为 None 时只在内存中保存结果，不写文件。
    """

    def __init__(self, results_dir: Optional[str] = "benchmarks/selection"):
        self.results_dir = Path(results_dir) if results_dir else None
        if self.results_dir is not None:
            self.results_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(__name__)

    def run_benchmark(self, algorithm_func: SelectFunc, config: BenchmarkConfig) -> BenchmarkResult:
        """
        运行基准测试

        Args:
            algorithm_func: 形如 select_partition(values, n) 的选择函数
            config: 测试配置

        Returns:
            测试结果
        """
        result = BenchmarkResult(
            config=config,
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat()
        )
        generator = DataGenerator(config.seed)

        try:
            self.logger.info(f"开始基准测试: {config.algorithm_name} ({config.pattern.value})")

            for size in config.test_sizes:
                if size < 1:
                    raise ValueError(f"数据大小必须为正数: {size}")
                test_data = generator.generate(config.pattern, size)
                rank = config.rank_for(size)
                expected = sorted(test_data)[rank - 1]

                for _ in range(config.warmup_iterations):
                    algorithm_func(test_data, rank)

                for _ in range(config.iterations):
                    metrics = self._measure_performance(
                        algorithm_func, test_data, rank, expected, config.algorithm_name
                    )
                    result.metrics.append(metrics)

            result.status = BenchmarkStatus.COMPLETED
            self.logger.info(f"基准测试完成: {config.algorithm_name}")

        except Exception as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            self.logger.error(f"基准测试失败: {config.algorithm_name} - {e}")

        finally:
            result.end_time = datetime.now().isoformat()
            self._save_result(f"{config.algorithm_name}_{config.pattern.value}", result)

        return result

    def run_comparative_benchmark(self, test_sizes: List[int],
                                  algorithms: Optional[Dict[str, SelectFunc]] = None,
                                  patterns: Optional[List[DataPattern]] = None,
                                  iterations: int = 3, rank_fraction: float = 0.5,
                                  seed: Optional[int] = None) -> Dict[str, Dict[str, BenchmarkResult]]:
        """
        在每种数据模式下对比各算法

        Returns:
            {数据模式: {算法名称: 测试结果}}
        """
        algorithms = algorithms or {"quick_select": select_partition, "heap_select": select_heap}
        patterns = patterns or list(DataPattern)

        results: Dict[str, Dict[str, BenchmarkResult]] = {}
        for pattern in patterns:
            results[pattern.value] = {}
            for name, algorithm_func in algorithms.items():
                config = BenchmarkConfig(
                    algorithm_name=name,
                    test_sizes=test_sizes,
                    pattern=pattern,
                    iterations=iterations,
                    rank_fraction=rank_fraction,
                    seed=seed,
                )
                results[pattern.value][name] = self.run_benchmark(algorithm_func, config)

        self._generate_comparative_report(results)
        return results

    def _measure_performance(self, algorithm_func: SelectFunc, test_data: List[int], rank: int,
                             expected: int, algorithm_name: str) -> PerformanceMetrics:
        """测量一次调用，并核对结果"""
        start_time = time.perf_counter()
        outcome = algorithm_func(test_data, rank)
        execution_time = time.perf_counter() - start_time

        if outcome.unwrap() != expected:
            raise RuntimeError(
                f"{algorithm_name} 在 n={rank} 时返回 {outcome.value}，期望 {expected}"
            )

        return PerformanceMetrics(
            algorithm_name=algorithm_name,
            input_size=len(test_data),
            rank=rank,
            execution_time=execution_time
        )

    def _save_result(self, benchmark_id: str, result: BenchmarkResult) -> None:
        if self.results_dir is None:
            return
        stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        result_file = self.results_dir / f"{benchmark_id}_{stamp}.json"
        with open(result_file, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    def _generate_comparative_report(self, results: Dict[str, Dict[str, BenchmarkResult]]) -> Dict[str, Any]:
        """生成对比报告"""
        report: Dict[str, Any] = {
            "timestamp": datetime.now().isoformat(),
            "patterns": list(results.keys()),
            "summary": {}
        }

        for pattern, by_algorithm in results.items():
            report["summary"][pattern] = {
                name: result.get_summary_statistics()
                for name, result in by_algorithm.items()
                if result.status == BenchmarkStatus.COMPLETED
            }

        if self.results_dir is not None:
            report_file = self.results_dir / f"comparative_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            with open(report_file, 'w', encoding='utf-8') as f:
                json.dump(report, f, indent=2, ensure_ascii=False)
            self.logger.info(f"对比报告已生成: {report_file}")

        return report


def create_selection_benchmark(results_dir: Optional[str] = "benchmarks/selection") -> PerformanceBenchmark:
    """创建选择算法基准测试实例"""
    return PerformanceBenchmark(results_dir)
