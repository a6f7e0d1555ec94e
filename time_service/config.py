import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root
BASE_DIR = Path(__file__).resolve().parent.parent
DOTENV_PATH = BASE_DIR / ".env"
ENV_LOADED = load_dotenv(DOTENV_PATH)

# Server
HOST = os.getenv("PLATFORM_TIME_HOST", "0.0.0.0")
PORT = int(os.getenv("PLATFORM_TIME_PORT", 8080))

# Logging
LOG_DIR = os.getenv("PLATFORM_TIME_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("PLATFORM_TIME_LOG_LEVEL", "INFO").upper()

# Optional, e.g. 2024-01-01T00:00:00Z. Unset means the system clock.
FIXED_INSTANT = os.getenv("PLATFORM_TIME_FIXED_INSTANT")
