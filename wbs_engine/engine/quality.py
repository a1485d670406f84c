"""데이터 품질 점검.

문제를 보고만 하고 작업을 고치지 않습니다.
"""

from wbs_engine.models import DataQualityReport, Forest, IntervalIssue

from .traversal import count_nodes, flatten, iter_with_depth


def find_invalid_intervals(forest: Forest) -> list[IntervalIssue]:
    """시작일이 종료일보다 늦은 작업 목록 (전위 순서)."""
    return [
        IntervalIssue(task_id=task.id, start_date=task.start_date, end_date=task.end_date)
        for task in flatten(forest)
        if not task.has_valid_interval
    ]


def find_duplicate_ids(forest: Forest) -> list[str]:
    """두 번 이상 등장하는 작업 ID (처음 중복이 발견된 순서)."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for task in flatten(forest):
        if task.id in seen and task.id not in duplicates:
            duplicates.append(task.id)
        seen.add(task.id)
    return duplicates


def find_level_mismatches(forest: Forest) -> list[str]:
    """지정된 level이 실제 깊이 + 1과 다른 작업 ID."""
    return [task.id for task, depth in iter_with_depth(forest) if task.level != depth + 1]


def build_quality_report(forest: Forest) -> DataQualityReport:
    """포레스트 전체의 데이터 품질 점검 결과를 만듭니다."""
    return DataQualityReport(
        total_tasks=count_nodes(forest),
        invalid_intervals=find_invalid_intervals(forest),
        duplicate_ids=find_duplicate_ids(forest),
        level_mismatches=find_level_mismatches(forest),
    )
