# ecorevive/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CHECKOUT_LOCK_TTL_SECONDS = int(os.getenv("CHECKOUT_LOCK_TTL_SECONDS", 30))

PAYMENT_SERVICE_URL = os.getenv("PAYMENT_SERVICE_URL", "https://api.stripe.com")
PAYMENT_API_KEY = os.getenv("PAYMENT_API_KEY", "")
PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "usd")
PAYMENT_TIMEOUT_SECONDS = int(os.getenv("PAYMENT_TIMEOUT_SECONDS", 5))

# stala oplata za wysylke, niezalezna od wagi i odleglosci
FLAT_SHIPPING_RATE = Decimal(os.getenv("FLAT_SHIPPING_RATE", "5.99"))

SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "false").lower() in ("1", "true", "yes")
