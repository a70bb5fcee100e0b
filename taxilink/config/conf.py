from taxilink.utils.utils import get_secret

# Store
STORE_BACKEND = get_secret("STORE_BACKEND", "memory")
STORE_PREFIX = get_secret("STORE_PREFIX", "taxilinksa")

REDIS_HOST = get_secret("REDIS_HOST", "localhost")
REDIS_PORT = int(get_secret("REDIS_PORT", "6379"))
REDIS_DB = int(get_secret("REDIS_DB", "0"))
REDIS_PASSWORD = get_secret("REDIS_PASSWORD")

# Offline channels (display only, no gateway behind them)
SMS_SHORT_CODE = get_secret("SMS_SHORT_CODE", "40404")
USSD_DIAL_CODE = get_secret("USSD_DIAL_CODE", "*120*8294#")

# first | nearest | cheapest
MATCH_STRATEGY = get_secret("MATCH_STRATEGY", "first")

LOG_LEVEL = get_secret("LOG_LEVEL", "INFO")
PORT = int(get_secret("PORT", "3000"))
