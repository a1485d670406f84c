"""작업 표시 색상 매핑.

Lv1 작업 ID(첫 세그먼트)별 테마색과, 상태/진행률에 따른 배지 색상을 제공합니다.
"""

from wbs_engine.models import TaskStatus


# Lv1별 테마색 (base: Lv1, light: Lv2, lighter: Lv3 이하)
THEME_COLORS = {
    "1": {"base": "#3b82f6", "light": "#dbeafe", "lighter": "#eff6ff"},  # 프로젝트 기획
    "2": {"base": "#10b981", "light": "#d1fae5", "lighter": "#ecfdf5"},  # 디자인
    "3": {"base": "#f59e0b", "light": "#fef3c7", "lighter": "#fffbeb"},  # 개발
    "4": {"base": "#ef4444", "light": "#fecaca", "lighter": "#fef2f2"},  # 테스트
    "5": {"base": "#8b5cf6", "light": "#e9d5ff", "lighter": "#f5f3ff"},  # 배포
}
DEFAULT_THEME = "1"

STATUS_COLORS = {
    TaskStatus.DONE.value: "bg-green-100 text-green-800",
    TaskStatus.IN_PROGRESS.value: "bg-blue-100 text-blue-800",
    TaskStatus.PLANNED.value: "bg-yellow-100 text-yellow-800",
    TaskStatus.DELAYED.value: "bg-red-100 text-red-800",
}
DEFAULT_STATUS_COLOR = "bg-gray-100 text-gray-800"


def theme_color(task_id: str, level: int) -> str:
    """작업 ID의 첫 세그먼트로 테마를 고르고, 레벨에 따라 농도를 정합니다."""
    root = task_id.replace(".", "-").split("-")[0]
    theme = THEME_COLORS.get(root, THEME_COLORS[DEFAULT_THEME])
    if level <= 1:
        return theme["base"]
    if level == 2:
        return theme["light"]
    return theme["lighter"]


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)


def progress_color(progress: int) -> str:
    """진행률 막대 색상 (80% 이상 녹색, 60% 이상 파랑, 40% 이상 노랑, 그 외 빨강)."""
    if progress >= 80:
        return "bg-green-500"
    if progress >= 60:
        return "bg-blue-500"
    if progress >= 40:
        return "bg-yellow-500"
    return "bg-red-500"
