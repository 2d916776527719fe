"""Data models for the resume analyzer."""

from skillens.models.analysis import AnalysisResult, AnalyzeRequest

__all__ = [
    "AnalysisResult",
    "AnalyzeRequest",
]
