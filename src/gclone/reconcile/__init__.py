"""
Handling of local directories that collide with the clone destination.
"""
from .prompts import confirm
from .reconciler import DirectoryReconciler, ReconcileError, ReconcileOutcome
from .timestamps import ModifiedTimeSource, StatModifiedTime, renamed_path, timestamp_suffix
from .trash import TrashAvailable, TrashUnavailable, probe_trash

__all__ = [
    "DirectoryReconciler",
    "ModifiedTimeSource",
    "ReconcileError",
    "ReconcileOutcome",
    "StatModifiedTime",
    "TrashAvailable",
    "TrashUnavailable",
    "confirm",
    "probe_trash",
    "renamed_path",
    "timestamp_suffix",
]
