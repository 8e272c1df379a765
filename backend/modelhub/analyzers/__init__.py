"""Dataset and model-metric analysis helpers."""

from .comparison import METRICS, MetricsComparison
from .dataset import DatasetAnalyzer

__all__ = ["METRICS", "DatasetAnalyzer", "MetricsComparison"]
