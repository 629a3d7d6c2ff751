# ========================================
# recognizers/__init__.py
# ========================================
"""
Recognizers: пошук шляхів у тексті на базі Presidio.
"""
from recognizers.path_recognizer import (
    DrivePathRecognizer,
    UncPathRecognizer,
    PathPatternRecognizer
)

__all__ = [
    "DrivePathRecognizer",
    "UncPathRecognizer",
    "PathPatternRecognizer"
]
