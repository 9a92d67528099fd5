"""
Service layer orchestrators for gclone.
"""
from .cloner import CloneResult, CloneService, CloneStatus, CloneTarget

__all__ = ["CloneResult", "CloneService", "CloneStatus", "CloneTarget"]
