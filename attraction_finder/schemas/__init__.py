"""
Pydantic schemas for API request and response validation.

All FastAPI endpoints MUST use strict Pydantic models with explicit types.
The domain models in attractions.py are also used by the service layer.
"""
