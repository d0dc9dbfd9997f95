"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Validation ---
# Mode for run_example.py; the library default stays non-lazy.
DEFAULT_LAZY: bool = os.getenv("OBJECT_VALIDATOR_LAZY", "false").lower() == "true"

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_PAYLOAD_CHARS: int = int(os.getenv("LOG_PAYLOAD_CHARS", "200"))
