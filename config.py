"""
Simple configuration for the LawSimple Legal Document Explainer.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Configuration class for the Legal Document Explainer."""

    # Model gateway (any OpenAI-compatible endpoint)
    LLM_API_KEY = os.environ.get("LLM_API_KEY") or os.environ.get("OPENAI_API_KEY")
    LLM_BASE_URL = os.environ.get("LLM_BASE_URL")

    # Model Settings
    ANALYSIS_MODEL = os.environ.get("ANALYSIS_MODEL", "gpt-4o-mini")
    ANALYSIS_TEMPERATURE = float(os.environ.get("ANALYSIS_TEMPERATURE", "0.3"))
    LLM_TIMEOUT = float(os.environ.get("LLM_TIMEOUT", "90"))

    # Document Processing
    MIN_CONTENT_LENGTH = 20
    CLAUSE_QUOTE_LENGTH = 200
    DISPLAY_ORIGINAL_LENGTH = 300

    # File Upload
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    ALLOWED_EXTENSIONS = {".pdf", ".txt"}

    # Client Settings
    ANALYSIS_SERVICE_URL = os.environ.get(
        "ANALYSIS_SERVICE_URL", "http://localhost:5001/analyze-document"
    )
    REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "60"))
    PROGRESS_INTERVAL = 0.25

    # API Settings
    API_HOST = os.environ.get("API_HOST", "0.0.0.0")
    API_PORT = int(os.environ.get("API_PORT", "5001"))
    API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
    API_VERSION = "1.0.0"


# Module-level names for direct import
LLM_API_KEY = Config.LLM_API_KEY
LLM_BASE_URL = Config.LLM_BASE_URL
ANALYSIS_MODEL = Config.ANALYSIS_MODEL
ANALYSIS_TEMPERATURE = Config.ANALYSIS_TEMPERATURE
LLM_TIMEOUT = Config.LLM_TIMEOUT
MIN_CONTENT_LENGTH = Config.MIN_CONTENT_LENGTH
CLAUSE_QUOTE_LENGTH = Config.CLAUSE_QUOTE_LENGTH
DISPLAY_ORIGINAL_LENGTH = Config.DISPLAY_ORIGINAL_LENGTH
UPLOAD_FOLDER = Config.UPLOAD_FOLDER
MAX_FILE_SIZE = Config.MAX_FILE_SIZE
ALLOWED_EXTENSIONS = Config.ALLOWED_EXTENSIONS
ANALYSIS_SERVICE_URL = Config.ANALYSIS_SERVICE_URL
REQUEST_TIMEOUT = Config.REQUEST_TIMEOUT
PROGRESS_INTERVAL = Config.PROGRESS_INTERVAL
API_HOST = Config.API_HOST
API_PORT = Config.API_PORT
API_DEBUG = Config.API_DEBUG
API_VERSION = Config.API_VERSION
