# placescout/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# Webhook that returns places for a (location, search term) pair
PLACES_WEBHOOK_URL = os.getenv(
    "PLACES_WEBHOOK_URL",
    "https://n8n.srv963601.hstgr.cloud/webhook/9fba89b1-9202-4ec0-9845-fb331ede3582",
)

# Runtime parameters
APP_NAME = "placescout"
PAGE_SIZES = (10, 50, 100)
DEFAULT_PAGE_SIZE = 10
REQUEST_TIMEOUT = int(os.getenv("PLACESCOUT_REQUEST_TIMEOUT", "60"))
CONCURRENCY = 5
LOG_LEVEL = os.getenv("PLACESCOUT_LOG_LEVEL", "INFO")

# Output
EXPORT_DIR = os.getenv("PLACESCOUT_EXPORT_DIR", ".")
