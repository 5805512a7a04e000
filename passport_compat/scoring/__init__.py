"""
Scoring module for passport compatibility.

This module compares two partners' passport answers and produces a
compatibility report with four scores and qualitative insights.
"""

from .schema import (
    Answer,
    Question,
    QuestionType,
    QuestionMode,
    ReportCategory,
    CompatibilityReport,
    CompatibilityInsights,
    QuestionInsight,
)
from .categories import DEFAULT_CATEGORY_MAPPING, map_category, mapping_from_config, normalize_mapping
from .compare import ScoringConfig, compare_passport_answers, round_half_up

__all__ = [
    "Answer",
    "Question",
    "QuestionType",
    "QuestionMode",
    "ReportCategory",
    "CompatibilityReport",
    "CompatibilityInsights",
    "QuestionInsight",
    "DEFAULT_CATEGORY_MAPPING",
    "map_category",
    "mapping_from_config",
    "normalize_mapping",
    "ScoringConfig",
    "compare_passport_answers",
    "round_half_up",
]
