from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root and the working directory (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path.cwd() / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./taskflow.db")

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-to-a-long-random-secret")
JWT_ISSUER = os.getenv("JWT_ISSUER", "taskflow-api")
JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "taskflow-clients")
ACCESS_TOKEN_EXPIRE_HOURS = float(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "1"))
TOKEN_CLOCK_SKEW_SECONDS = int(os.getenv("TOKEN_CLOCK_SKEW_SECONDS", "60"))

DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]
