"""Runtime configuration read from the environment."""

import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated list; "*" allows any origin (mobile client in development)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Display only: bills are single-currency
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")
