"""Services module for timr - Business logic layer."""

from .migration_service import MigrationService, NormalizationReport
from .task_service import (
    TaskService,
    calc_diff,
    get_task_service,
    resolve_store_path,
    sum_task_total_time,
)

__all__ = [
    "TaskService",
    "MigrationService",
    "NormalizationReport",
    "calc_diff",
    "get_task_service",
    "resolve_store_path",
    "sum_task_total_time",
]
