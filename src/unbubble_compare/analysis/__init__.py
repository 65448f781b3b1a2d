"""Heuristic comparison engine."""

from unbubble_compare.analysis.datapoints import extract_data_points
from unbubble_compare.analysis.divergence import map_divergences
from unbubble_compare.analysis.evidence import analyze_evidence_patterns
from unbubble_compare.analysis.facts import (
    find_shared_baseline,
    find_shared_numbers,
    match_key_facts,
)
from unbubble_compare.analysis.heuristic import HeuristicAnalyzer
from unbubble_compare.analysis.perspective import generate_perspective_analysis
from unbubble_compare.analysis.similarity import calculate_similarity, find_similar_statements
from unbubble_compare.analysis.themes import common_themes, tag_themes
from unbubble_compare.analysis.thresholds import Thresholds

__all__ = [
    "HeuristicAnalyzer",
    "Thresholds",
    "analyze_evidence_patterns",
    "calculate_similarity",
    "common_themes",
    "extract_data_points",
    "find_shared_baseline",
    "find_shared_numbers",
    "find_similar_statements",
    "generate_perspective_analysis",
    "map_divergences",
    "match_key_facts",
    "tag_themes",
]
