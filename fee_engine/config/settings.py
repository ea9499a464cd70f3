import os
from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR") or None  # unset: console only

# Fees (any decimal rounding mode name, e.g. ROUND_HALF_UP)
FEE_ROUNDING = os.getenv("FEE_ROUNDING", "ROUND_HALF_EVEN")
