# Service package init
from .snapshot_service import ProgressSnapshot, build_snapshot  # noqa: F401 re-export

__all__ = ["ProgressSnapshot", "build_snapshot"]
