"""Data models for orphyctl.

This module exports the classification and disposition models.
"""

from orphyctl.models.disposition import DispositionAction, DispositionSummary
from orphyctl.models.folder import REPORT_ORDER, ClassifiedFolder, Label, ScanResult

__all__ = [
    "REPORT_ORDER",
    "ClassifiedFolder",
    "DispositionAction",
    "DispositionSummary",
    "Label",
    "ScanResult",
]
