"""
选择算法验证工具

对给定序列的每个名次同时运行两种选择策略，与完整排序得到的参考答案比较，
并检查前缀多重集、堆顶等性质。内置场景覆盖普通数据、重复值、有序、逆序、
单元素以及非法名次。
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .result import SelectionResult
from .selector import SelectionStrategy, select

logger = logging.getLogger(__name__)


@dataclass
class CaseOutcome:
    """单个 (序列, 名次) 的检查结果"""
    label: str
    rank: int
    expected: Optional[float]
    results: Dict[str, Optional[float]]
    passed: bool
    problems: List[str] = field(default_factory=list)


@dataclass
class VerificationReport:
    """验证报告"""
    outcomes: List[CaseOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failures(self) -> List[CaseOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    def summary(self) -> Dict[str, int]:
        return {
            "total": len(self.outcomes),
            "passed": len(self.outcomes) - len(self.failures),
            "failed": len(self.failures),
        }


DEFAULT_SCENARIOS: List[Tuple[str, List[int]]] = [
    ("basic", [3, 1, 4, 1, 5, 9, 2, 6]),
    ("duplicates", [5, 2, 2, 1, 1, 3, 3, 3]),
    ("already sorted", [1, 2, 3, 4, 5, 6, 7, 8]),
    ("reverse sorted", [8, 7, 6, 5, 4, 3, 2, 1]),
    ("single element", [42]),
]

INVALID_SCENARIOS: List[Tuple[str, List[int], List[int]]] = [
    ("invalid rank", [1, 2, 3], [0, 5]),
]


def check_case(label: str, values: Sequence[float], rank: int,
               strategies: Sequence[SelectionStrategy] = tuple(SelectionStrategy)) -> CaseOutcome:
    """检查一个名次下所有策略的结果。"""
    reference = sorted(values)
    valid = 0 < rank <= len(reference)
    expected = reference[rank - 1] if valid else None
    smallest = Counter(reference[:rank]) if valid else Counter()

    results: Dict[str, Optional[float]] = {}
    problems: List[str] = []
    for strategy in strategies:
        result: SelectionResult = select(values, rank, strategy)
        results[strategy.value] = result.value
        if not valid:
            if result.ok:
                problems.append(f"{strategy.value}: 非法名次未被拒绝")
            continue
        if not result.ok:
            problems.append(f"{strategy.value}: 合法名次被拒绝")
            continue
        if result.value != expected:
            problems.append(f"{strategy.value}: 得到 {result.value}，期望 {expected}")
        if Counter(result.prefix) != smallest:
            problems.append(f"{strategy.value}: 前 {rank} 个位置不是最小的 {rank} 个值")
        if strategy is SelectionStrategy.HEAP and result.working[0] != result.value:
            problems.append("heap: 堆顶与返回值不一致")

    return CaseOutcome(
        label=label,
        rank=rank,
        expected=expected,
        results=results,
        passed=not problems,
        problems=problems,
    )


def verify_sequence(label: str, values: Sequence[float],
                    ranks: Optional[Sequence[int]] = None) -> List[CaseOutcome]:
    """对序列的每个名次（默认 1..len）运行检查。"""
    ranks = ranks if ranks is not None else range(1, len(values) + 1)
    outcomes = []
    for rank in ranks:
        outcome = check_case(label, values, rank)
        if outcome.passed:
            logger.info("%s n=%d: %s expected=%s PASS", label, rank, outcome.results, outcome.expected)
        else:
            logger.error("%s n=%d: %s", label, rank, "; ".join(outcome.problems))
        outcomes.append(outcome)
    return outcomes


def run_default_scenarios() -> VerificationReport:
    """运行内置的全部验证场景"""
    report = VerificationReport()
    for label, values in DEFAULT_SCENARIOS:
        logger.info("场景 %s: %s", label, values)
        report.outcomes.extend(verify_sequence(label, values))
    for label, values, ranks in INVALID_SCENARIOS:
        logger.info("场景 %s: %s", label, values)
        report.outcomes.extend(verify_sequence(label, values, ranks))
    logger.info("验证完成: %s", report.summary())
    return report
