# /app/core/config.py

"""
Central runtime configuration.

Every value is read from the environment (a local `.env` file is loaded first
for development) so the same image can run against SQLite locally and
PostgreSQL in production.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./records.db")
# Creates missing tables on startup. Production deployments run Alembic instead.
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "true").lower() == "true"

# --- Security ---
SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# --- Notifications ---
WELCOME_EMAIL_DELAY_SECONDS = float(os.getenv("WELCOME_EMAIL_DELAY_SECONDS", "3"))

# --- Logging & HTTP ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
