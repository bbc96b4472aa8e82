"""
Attraction Recommendation - Maps-Grounded LLM Architecture

This module contains the prompt templates for the Gemini-based attraction
recommendation system.

Architecture:
- Pattern: Grounded LLM (single API call with Google Maps tool)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Output: numbered-line text (list), schema-constrained JSON (detail)

The service layer is in:
- attraction_finder/services/recommendation_service.py

Prompt templates are in:
- attraction_finder/agents/attractions/prompts.py
"""

from attraction_finder.agents.attractions.prompts import (
    CATEGORY_LABELS,
    DISTANCE_LABELS,
    RESULT_COUNT,
    build_attraction_detail_prompt,
    build_attractions_prompt,
    get_category_label,
    get_distance_label,
)

__all__ = [
    "CATEGORY_LABELS",
    "DISTANCE_LABELS",
    "RESULT_COUNT",
    "build_attraction_detail_prompt",
    "build_attractions_prompt",
    "get_category_label",
    "get_distance_label",
]
