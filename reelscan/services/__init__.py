"""
Services metier : reconciliation, scan, nettoyage et planification.
"""

from .bootstrap import ensure_config_libraries, ensure_default_tasks
from .cleanup import CleanupReport, CleanupService
from .reconciler import ReconcilerService
from .scanner import LibraryScanReport, ScannerService
from .scheduler import SchedulerService, TaskRegistry

__all__ = [
    "CleanupReport",
    "CleanupService",
    "LibraryScanReport",
    "ReconcilerService",
    "ScannerService",
    "SchedulerService",
    "TaskRegistry",
    "ensure_config_libraries",
    "ensure_default_tasks",
]
