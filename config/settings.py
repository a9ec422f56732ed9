"""
Configuration & Settings
SynergyAI — Brand Partnership Evaluator
"""

from pydantic import BaseModel
import os


class Settings(BaseModel):
    # App
    APP_NAME: str = "SynergyAI — Brand Partnership Evaluator"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("SYNERGY_DEBUG", "").lower() in ("1", "true", "yes")

    # Credentials (process-level defaults; user-entered keys take precedence)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", ""))
    TRACXN_API_KEY: str = os.getenv("TRACXN_API_KEY", "")

    # Profile lookup (Tracxn)
    TRACXN_COMPANY_URL: str = "https://api.tracxn.com/company"
    REQUEST_TIMEOUT: int = 30
    MAX_FETCH_WORKERS: int = 2

    # Analysis (Gemini + Google Search grounding)
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    ANALYSIS_TEMPERATURE: float = 0.2
    # Characters of serialized profile data embedded per brand
    PROFILE_EXCERPT_CHARS: int = 1500

    # Rubric weights
    MAX_PARAMETER_WEIGHT: int = 40
    TARGET_WEIGHT_TOTAL: int = 100

    # Form defaults
    DEFAULT_BRAND_A: str = "Blue Tokai"
    DEFAULT_BRAND_B: str = "Oatly"
    DEFAULT_SCOPE: str = "Co-branded product & Distribution"
    DEFAULT_GEOGRAPHY: str = "India / SE Asia"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000


settings = Settings()
