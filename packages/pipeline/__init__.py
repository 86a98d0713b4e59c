from .core import AnalysisResult, run_analysis

__all__ = ["AnalysisResult", "run_analysis"]
