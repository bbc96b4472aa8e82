"""
AI Attraction Finder backend.

Recommends nearby attractions with Gemini (Google Maps grounding) and
serves per-attraction details on demand.
"""

__version__ = "0.1.0"
