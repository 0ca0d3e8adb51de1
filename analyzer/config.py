"""
CONFIGURATION - Environment-based settings management

This file loads configuration from environment variables with sensible defaults.
It handles:
1. OpenAI credentials and model selection
2. Sampling parameters and the request timeout for completions
3. CORS origins for the frontend

All settings can be overridden via environment variables or .env file.
"""

import os
from dotenv import load_dotenv
from analyzer.utils import Constants, split_csv

# Load environment variables from .env file if it exists
load_dotenv()

# STEP 1: Completion API credentials
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "").strip() or Constants.DEFAULT_MODEL
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "").strip() or None  # None = SDK default endpoint

# STEP 2: Sampling and cost limits
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", str(Constants.DEFAULT_TIMEOUT)))
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", str(Constants.DEFAULT_TEMPERATURE)))
LLM_TOP_P = float(os.getenv("LLM_TOP_P", str(Constants.DEFAULT_TOP_P)))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", str(Constants.DEFAULT_MAX_TOKENS)))

# STEP 3: HTTP settings
CORS_ORIGINS = split_csv(os.getenv("CORS_ORIGINS", Constants.DEFAULT_CORS_ORIGINS))
