"""WBS(작업분해구조) 엔진 및 API 서비스."""

__version__ = "1.0.0"
