"""공유 pytest fixture 모음."""

import pytest

from wbs_engine.engine import build_month_axis
from wbs_engine.models import TaskNode


def _task(task_id, name, level, start, end, status, progress, assignee=None, assignee_id=None, children=None):
    data = {
        "id": task_id,
        "name": name,
        "level": level,
        "startDate": start,
        "endDate": end,
        "status": status,
        "progress": progress,
    }
    if assignee is not None:
        data["assignee"] = assignee
    if assignee_id is not None:
        data["assigneeId"] = assignee_id
    if children is not None:
        data["children"] = children
    return data


def make_wbs_payload():
    """웹사이트 리뉴얼 프로젝트 WBS (13개 작업, camelCase 본문)."""
    return [
        _task("1", "1. 프로젝트 기획", 1, "2024-01-01", "2024-01-31", "완료", 100, "김의현", "u1", [
            _task("1-1", "1.1 요구사항 분석", 2, "2024-01-01", "2024-01-15", "완료", 100, "김의현", "u1", [
                _task("1-1-1", "1.1.1 사용자 인터뷰", 3, "2024-01-01", "2024-01-05", "완료", 100, "김분석", "u3"),
                _task("1-1-2", "1.1.2 요구사항 정리", 3, "2024-01-06", "2024-01-10", "완료", 100, "김분석", "u3"),
            ]),
            _task("1-2", "1.2 프로젝트 계획 수립", 2, "2024-01-16", "2024-01-31", "완료", 100, "박계획", "u4"),
        ]),
        _task("2", "2. 디자인", 1, "2024-02-01", "2024-02-28", "진행중", 70, "디자인팀", None, [
            _task("2-1", "2.1 UI/UX 디자인", 2, "2024-02-01", "2024-02-15", "진행중", 70, "이디자인", "u5", [
                _task("2-1-1", "2.1.1 와이어프레임", 3, "2024-02-01", "2024-02-05", "완료", 100, "이디자인", "u5"),
                _task("2-1-2", "2.1.2 프로토타입", 3, "2024-02-06", "2024-02-10", "진행중", 80, "이디자인", "u5"),
            ]),
            _task("2-2", "2.2 그래픽 디자인", 2, "2024-02-16", "2024-02-28", "진행중", 80, "최그래픽"),
        ]),
        _task("3", "3. 개발", 1, "2024-03-01", "2024-05-31", "계획중", 0, "개발팀", None, [
            _task("3-1", "3.1 프론트엔드 개발", 2, "2024-03-01", "2024-04-30", "계획중", 0, "김프론트"),
            _task("3-2", "3.2 백엔드 개발", 2, "2024-03-15", "2024-05-15", "해야할 일", 0, "박백엔드", "u9"),
        ]),
    ]


WBS_PREORDER_IDS = [
    "1", "1-1", "1-1-1", "1-1-2", "1-2",
    "2", "2-1", "2-1-1", "2-1-2", "2-2",
    "3", "3-1", "3-2",
]


@pytest.fixture
def wbs_payload():
    """요청 본문 형태의 WBS 포레스트."""
    return make_wbs_payload()


@pytest.fixture
def wbs_forest(wbs_payload):
    """TaskNode로 변환된 WBS 포레스트."""
    return [TaskNode.model_validate(task) for task in wbs_payload]


@pytest.fixture
def scenario_forest():
    """부모 하나와 자식 둘로 이루어진 1월 작업."""
    return [
        TaskNode.model_validate(
            _task("1", "1. 기획", 1, "2024-01-01", "2024-01-31", "계획중", 0, children=[
                _task("1-1", "1.1 분석", 2, "2024-01-01", "2024-01-15", "계획중", 0),
                _task("1-2", "1.2 계획", 2, "2024-01-16", "2024-01-31", "계획중", 0),
            ])
        )
    ]


@pytest.fixture
def jan_to_may_axis():
    """2024년 1월 ~ 5월 월 축."""
    return build_month_axis(2024, 1, 5)
