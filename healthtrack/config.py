import os
from dotenv import load_dotenv

load_dotenv()

# --- Log storage backend ---
LOG_STORE_URL = os.getenv("LOG_STORE_URL", "http://localhost:3001").rstrip("/")
LOG_STORE_TIMEOUT = float(os.getenv("LOG_STORE_TIMEOUT", "10"))

# --- Dashboard ---
DEFAULT_WINDOW_SIZE = int(os.getenv("DEFAULT_WINDOW_SIZE", "7"))

# --- Server ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
