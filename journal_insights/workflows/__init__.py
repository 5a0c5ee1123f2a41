"""Pipelines that sequence the service layer."""

from .analysis_pipeline import AnalysisOrchestrator, AnalysisState, run  # noqa: F401

__all__ = ["AnalysisOrchestrator", "AnalysisState", "run"]
