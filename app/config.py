import logging
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./bookings.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"

# comma separated, "*" for any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
