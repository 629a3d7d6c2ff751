# ========================================
# utils/__init__.py
# ========================================
"""
Utilities: допоміжні алгоритми над результатами recognizers.
"""
from utils.conflict_resolution import (
    remove_overlapping_paths,
    ScoreBasedResolver,
    LongestSpanResolver
)

__all__ = [
    "remove_overlapping_paths",
    "ScoreBasedResolver",
    "LongestSpanResolver"
]
