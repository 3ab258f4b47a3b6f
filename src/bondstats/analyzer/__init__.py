"""Analyzer subpackage exports."""

from .dataset import DatasetAnalyzer
from .pair import PairAnalyzer

__all__ = ["DatasetAnalyzer", "PairAnalyzer"]
