import json

from algorithms.performance.benchmark_system import (
    BenchmarkConfig,
    BenchmarkStatus,
    DataGenerator,
    DataPattern,
    PerformanceBenchmark,
)
from algorithms.selection.result import SelectionResult
from algorithms.selection.selector import select_heap


def test_data_generator_patterns():
    generator = DataGenerator(seed=7)
    assert generator.generate(DataPattern.SORTED, 5) == [0, 1, 2, 3, 4]
    assert generator.generate(DataPattern.REVERSE_SORTED, 3) == [2, 1, 0]
    dup = generator.generate(DataPattern.DUPLICATE_HEAVY, 100)
    assert len(dup) == 100 and len(set(dup)) <= 10
    assert len(generator.generate(DataPattern.RANDOM, 20)) == 20


def test_rank_for_size():
    config = BenchmarkConfig(algorithm_name="x", test_sizes=[1], rank_fraction=0.5)
    assert config.rank_for(1) == 1
    assert config.rank_for(10) == 5
    assert BenchmarkConfig(algorithm_name="x", test_sizes=[1], rank_fraction=1.5).rank_for(4) == 4


def test_run_benchmark_writes_result(tmp_path):
    bench = PerformanceBenchmark(str(tmp_path))
    config = BenchmarkConfig(algorithm_name="heap_select", test_sizes=[10, 50], iterations=2, seed=3)
    result = bench.run_benchmark(select_heap, config)

    assert result.status is BenchmarkStatus.COMPLETED
    assert len(result.metrics) == 4
    summary = result.get_summary_statistics()
    assert set(summary) == {"size_10", "size_50"}
    assert summary["size_50"]["rank"] == 25

    files = list(tmp_path.glob("heap_select_random_*.json"))
    assert len(files) == 1
    payload = json.loads(files[0].read_text(encoding="utf-8"))
    assert payload["status"] == "completed"


def test_wrong_answer_fails_benchmark():
    def broken(values, n):
        return SelectionResult.success(n, -999, values)

    bench = PerformanceBenchmark(None)
    config = BenchmarkConfig(algorithm_name="broken", test_sizes=[5], warmup_iterations=0)
    result = bench.run_benchmark(broken, config)
    assert result.status is BenchmarkStatus.FAILED
    assert "broken" in result.error_message


def test_comparative_benchmark(tmp_path):
    bench = PerformanceBenchmark(str(tmp_path))
    results = bench.run_comparative_benchmark(
        [20], patterns=[DataPattern.SORTED, DataPattern.DUPLICATE_HEAVY], iterations=1, seed=1
    )
    assert set(results) == {"sorted", "duplicate_heavy"}
    for by_algorithm in results.values():
        assert set(by_algorithm) == {"quick_select", "heap_select"}
        assert all(r.status is BenchmarkStatus.COMPLETED for r in by_algorithm.values())
    assert len(list(tmp_path.glob("comparative_report_*.json"))) == 1
