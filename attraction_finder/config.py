"""
Configuration module for the AI Attraction Finder backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

# Keys shorter than this are almost certainly placeholders
MIN_API_KEY_LENGTH = 10


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini API
    # GEMINI_API_KEY is preferred; API_KEY is accepted for older deployments
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings
    CORS_ORIGINS: List[str] = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173"
    ).split(",")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If the Gemini API key is missing or looks truncated.
        """
        if not cls.GEMINI_API_KEY:
            raise ValueError(
                "Missing required environment variable: GEMINI_API_KEY. "
                "Please check your .env file."
            )

        if len(cls.GEMINI_API_KEY) < MIN_API_KEY_LENGTH:
            raise ValueError(
                f"GEMINI_API_KEY is shorter than {MIN_API_KEY_LENGTH} characters. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash: requests report the
        # missing key to the client instead
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   Attraction queries will fail until you configure your .env file.")
        else:
            raise
