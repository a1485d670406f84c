"""Data models for the WBS engine."""

from .task import (
    TaskStatus,
    TaskNode,
    ProjectTasks,
    Forest,
    clamp_progress,
)
from .timeline import (
    MonthBucket,
    MonthAxis,
    AxisSpec,
    BarSpan,
    BucketHeader,
    TaskProjection,
    GanttRow,
    TimelineRow,
    TimelineGroup,
    Timeline,
)
from .summary import TaskStats, IntervalIssue, DataQualityReport
from .resource import AssigneeRef
from .error import ErrorResponse

__all__ = [
    # Task models
    "TaskStatus",
    "TaskNode",
    "ProjectTasks",
    "Forest",
    "clamp_progress",
    # Timeline models
    "MonthBucket",
    "MonthAxis",
    "AxisSpec",
    "BarSpan",
    "BucketHeader",
    "TaskProjection",
    "GanttRow",
    "TimelineRow",
    "TimelineGroup",
    "Timeline",
    # Summary models
    "TaskStats",
    "IntervalIssue",
    "DataQualityReport",
    # Resource models
    "AssigneeRef",
    # Error models
    "ErrorResponse",
]
