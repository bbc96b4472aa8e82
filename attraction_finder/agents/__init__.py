"""
AI Components for the AI Attraction Finder backend.

Contains the prompt side of the Gemini workflows:

1. Attraction list (Maps-Grounded LLM)
   - Gemini with the Google Maps tool, biased to the user's coordinates
   - Free-text reply in a numbered-line grammar, parsed by
     attraction_finder/services/attraction_parser.py

2. Attraction detail (Schema-Constrained LLM)
   - Gemini with response_schema=AttractionDetail
   - Decoded by attraction_finder/services/detail_decoder.py

Both calls are made from attraction_finder/services/recommendation_service.py.
"""

from attraction_finder.agents.attractions import (
    build_attraction_detail_prompt,
    build_attractions_prompt,
)

__all__ = [
    "build_attractions_prompt",
    "build_attraction_detail_prompt",
]
