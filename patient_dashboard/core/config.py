"""
Basic configuration

- CORS origins for development and production
- Data directory for the JSON record store
- Defaults used when a dashboard has to synthesize appointments and notes
- Supports environment variables for every setting
"""
import os

# Default localhost origins for development
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8081",
]

# Get additional CORS origins from environment variable
ADDITIONAL_CORS_ORIGINS = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else []

# Filter out empty strings from split
ADDITIONAL_CORS_ORIGINS = [origin.strip() for origin in ADDITIONAL_CORS_ORIGINS if origin.strip()]

# Combine default and additional origins
CORS_ORIGINS = DEFAULT_CORS_ORIGINS + ADDITIONAL_CORS_ORIGINS

# Root directory of the JSON record store
DATA_DIR = os.getenv("DATA_DIR", "data")

# Vitals window used when the client does not select one
DEFAULT_TIME_WINDOW = os.getenv("DEFAULT_TIME_WINDOW", "24h")

# Placeholders for synthesized appointment / note entries
DEFAULT_PHYSICIAN = os.getenv("DEFAULT_PHYSICIAN", "Dr. Smith")
DEFAULT_APPOINTMENT_TIME = os.getenv("DEFAULT_APPOINTMENT_TIME", "09:00 AM")
DEFAULT_APPOINTMENT_TYPE = os.getenv("DEFAULT_APPOINTMENT_TYPE", "Check-up")

# Shown for summary fields the store does not provide
MISSING_VALUE_PLACEHOLDER = "N/A"

# Write demo patients into DATA_DIR on startup
SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "false").strip().lower() in {"1", "true", "yes"}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
