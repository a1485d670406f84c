"""API endpoints package."""

from . import health
from . import wbs
from . import timeline
from . import resources

__all__ = ["health", "wbs", "timeline", "resources"]
