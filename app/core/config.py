"""
Basic configuration

- File locations for the JSON store, static files and uploads
- Default admin credential written when the store is first created
- CORS origins for development and production
- Supports environment variables for deployment overrides
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Project root directory (parent of app/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Load environment variables from .env file early
load_dotenv(dotenv_path=BASE_DIR / '.env')

PORT = int(os.getenv("PORT", "3000"))
HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DB_PATH = Path(os.getenv("DB_PATH", str(BASE_DIR / "database.json")))
PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", str(BASE_DIR / "public")))

# Attachments always live under the public root so the stored /uploads/ URLs resolve
UPLOAD_SUBDIR = "uploads"
UPLOAD_DIR = PUBLIC_DIR / UPLOAD_SUBDIR
UPLOAD_URL_PREFIX = f"/{UPLOAD_SUBDIR}/"

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# Default localhost origins for development
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# Get additional CORS origins from environment variable
ADDITIONAL_CORS_ORIGINS = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else []

# Filter out empty strings from split
ADDITIONAL_CORS_ORIGINS = [origin.strip() for origin in ADDITIONAL_CORS_ORIGINS if origin.strip()]

# Combine default and additional origins
CORS_ORIGINS = DEFAULT_CORS_ORIGINS + ADDITIONAL_CORS_ORIGINS
