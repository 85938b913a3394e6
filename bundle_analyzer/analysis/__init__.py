"""Analysis module for deriving bundle size metrics."""

from .analyzer import BundleAnalyzer
from .size_calculator import SizeCalculator

__all__ = ['BundleAnalyzer', 'SizeCalculator']
