"""유틸리티 모듈."""

from .validation import parse_compact_date, parse_task_date

__all__ = ["parse_compact_date", "parse_task_date"]
