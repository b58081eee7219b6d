import pytest

from algorithms.algorithm_manager import (
    AlgorithmCategory,
    AlgorithmManager,
    AlgorithmRegistry,
)
from algorithms.config import SelectionSettings
from algorithms.selection.basic.quick_select import QuickSelect


@pytest.fixture
def manager():
    mgr = AlgorithmManager(SelectionSettings(max_workers=2, metrics_history=3))
    yield mgr
    mgr.shutdown()


def test_registry_lists_selection_algorithms():
    registry = AlgorithmRegistry()
    assert set(registry.list_algorithms(AlgorithmCategory.SELECTION)) == {"quick_select", "heap_select"}
    assert registry.get_algorithm("quick_select") is QuickSelect
    with pytest.raises(KeyError):
        registry.get_algorithm("bubble_sort")


def test_registry_rejects_non_algorithm():
    with pytest.raises(ValueError):
        AlgorithmRegistry().register("bad", dict, AlgorithmCategory.SELECTION)


@pytest.mark.parametrize("name", ["quick_select", "heap_select"])
def test_execute_records_metrics(manager, name):
    result = manager.execute_algorithm(name, [3, 1, 4, 1, 5], 3)
    assert result.value == 3
    metrics = manager.get_metrics(name)
    assert len(metrics) == 1
    assert metrics[0].success
    assert metrics[0].input_size == 5
    assert metrics[0].rank == 3


def test_invalid_rank_is_recorded_as_failure(manager):
    result = manager.execute_algorithm("quick_select", [1, 2, 3], 0)
    assert not result.ok
    summary = manager.get_performance_summary("quick_select")
    assert summary == {"total_executions": 1, "success_rate": 0.0}


def test_type_error_propagates(manager):
    with pytest.raises(TypeError):
        manager.execute_algorithm("heap_select", [1, "x"], 1)
    assert manager.get_metrics("heap_select")[0].success is False


def test_metrics_history_is_bounded(manager):
    for n in range(1, 6):
        manager.execute_algorithm("heap_select", [5, 4, 3, 2, 1], n)
    history = manager.get_metrics("heap_select")
    assert [m.rank for m in history] == [3, 4, 5]


def test_batch_execute(manager):
    results = manager.batch_execute([
        {"algorithm": "quick_select", "values": [9, 7, 8], "n": 1},
        {"algorithm": "heap_select", "values": [9, 7, 8], "n": 3},
        {"algorithm": "missing", "values": [1], "n": 1},
    ])
    assert results[0].value == 7
    assert results[1].value == 9
    assert results[2] is None


def test_performance_summary(manager):
    manager.execute_algorithm("quick_select", [2, 1], 1)
    manager.execute_algorithm("quick_select", [2, 1], 2)
    summary = manager.get_performance_summary("quick_select")
    assert summary["total_executions"] == 2
    assert summary["success_rate"] == 1.0
    assert summary["min_execution_time"] <= summary["max_execution_time"]
