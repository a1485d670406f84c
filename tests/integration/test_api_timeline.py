"""
타임라인 API 통합 테스트.
여러 프로젝트의 작업이 하나의 월 축 위에 묶여 반환되는지 확인합니다.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from tests.conftest import make_wbs_payload
from wbs_engine.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def body():
    return {
        "projects": [
            {"id": "p1", "name": "웹사이트 리뉴얼", "status": "진행중", "tasks": make_wbs_payload()},
            {"id": "p2", "name": "마케팅", "tasks": [
                {"id": "1", "name": "1. 여름 캠페인", "startDate": "2024-06-01", "endDate": "2024-06-30"},
            ]},
        ],
    }


async def test_timeline_inferred_axis(client: AsyncClient, body):
    """축을 지정하지 않으면 모든 프로젝트 작업을 덮는 축을 추론해야 한다."""
    response = await client.post("/api/v1/timeline", json=body)

    assert response.status_code == 200
    data = response.json()
    assert [header["label"] for header in data["headers"]] == [
        "2024년 1월", "2024년 2월", "2024년 3월", "2024년 4월", "2024년 5월", "2024년 6월",
    ]
    assert [group["projectId"] for group in data["groups"]] == ["p1", "p2"]
    assert [row["id"] for row in data["groups"][0]["rows"]] == ["1", "2", "3"]


async def test_timeline_with_axis_and_depth(client: AsyncClient, body):
    body["axis"] = {"startYear": 2024, "startMonth": 1, "months": 5}
    body["maxDepth"] = 1
    response = await client.post("/api/v1/timeline", json=body)

    assert response.status_code == 200
    data = response.json()
    assert len(data["headers"]) == 5
    rows = {row["id"]: row for row in data["groups"][0]["rows"]}
    assert len(rows) == 9
    assert rows["3-1"]["inBuckets"] == [False, False, True, True, False]
    assert rows["3-1"]["span"]["offset"] == 1
    assert rows["3-1"]["span"]["width"] == 3
    assert data["groups"][1]["rows"][0]["inBuckets"] == [False] * 5


async def test_timeline_default_months(client: AsyncClient, body):
    """개월 수가 없으면 설정 기본값(5개월)을 사용해야 한다."""
    body["axis"] = {"startYear": 2024, "startMonth": 11}
    response = await client.post("/api/v1/timeline", json=body)

    assert response.status_code == 200
    labels = [header["label"] for header in response.json()["headers"]]
    assert labels[0] == "2024년 11월"
    assert labels[-1] == "2025년 3월"


async def test_timeline_without_tasks_or_axis(client: AsyncClient):
    """프로젝트가 없으면 빈 그룹과 기본 개월 수의 헤더를 반환해야 한다."""
    response = await client.post("/api/v1/timeline", json={"projects": []})

    assert response.status_code == 200
    data = response.json()
    assert data["groups"] == []
    assert len(data["headers"]) == 5


async def test_timeline_invalid_depth(client: AsyncClient, body):
    body["maxDepth"] = -1
    response = await client.post("/api/v1/timeline", json=body)

    assert response.status_code == 422
