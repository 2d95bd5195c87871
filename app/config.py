import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables only for local development
if os.path.exists(".env"):
    load_dotenv()
    logger.info("Loading from .env file (local development)")

# ------------------------------------------------------------------------------
# DATABASE
# ------------------------------------------------------------------------------

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./strings.db")

# Hosting providers hand out plain mysql:// URLs
if DATABASE_URL.startswith("mysql://"):
    DATABASE_URL = DATABASE_URL.replace("mysql://", "mysql+pymysql://", 1)

# ------------------------------------------------------------------------------
# STORAGE
# ------------------------------------------------------------------------------

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "database").lower()
DATA_FILE = os.getenv("DATA_FILE", os.path.join("data", "strings.json"))

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", 8000))
