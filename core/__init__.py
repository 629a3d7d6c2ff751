# ========================================
# core/__init__.py
# ========================================
"""
Core functionality: класифікація форм шляхів та конфігурація.

Public API для імпорту з інших модулів.
"""
from core.config import config, PathConfig, EntityConfig
from core.path_patterns import (
    DRIVE_PATTERN,
    START_WITH_DRIVE_PATTERN,
    PathPatternMatcher,
    get_default_matcher,
    reset_default_matcher,
    is_drive_spec,
    starts_with_drive_spec,
    starts_with_unc_prefix,
    is_unc_root
)

__all__ = [
    "config",
    "PathConfig",
    "EntityConfig",
    "DRIVE_PATTERN",
    "START_WITH_DRIVE_PATTERN",
    "PathPatternMatcher",
    "get_default_matcher",
    "reset_default_matcher",
    "is_drive_spec",
    "starts_with_drive_spec",
    "starts_with_unc_prefix",
    "is_unc_root"
]
