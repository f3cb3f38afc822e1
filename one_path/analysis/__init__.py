"""
Analysis module: the request/response contract with the analysis engine.

This module provides:
- Pydantic models for the analysis and roadmap hierarchy
- The fixed analysis prompt and the response schema
- Strict reply parsing
- The AnalysisEngine client
"""

from one_path.analysis.schemas import (
    AnalysisItem,
    AnalysisResult,
    AnalysisSection,
    ItemCategory,
    Phase,
    Resource,
    Roadmap,
    Subject,
    Topic,
)
from one_path.analysis.parsers import parse_analysis_reply
from one_path.analysis.engine import AnalysisEngine

__all__ = [
    "AnalysisItem",
    "AnalysisResult",
    "AnalysisSection",
    "ItemCategory",
    "Phase",
    "Resource",
    "Roadmap",
    "Subject",
    "Topic",
    "parse_analysis_reply",
    "AnalysisEngine",
]
