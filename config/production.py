import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:8080/api"),
    "timeout": float(os.getenv("API_TIMEOUT", "10")),
}

DEBUG = False

NOTICE_DISMISS_SECONDS = int(os.getenv("NOTICE_DISMISS_SECONDS", "5"))
SUBMIT_GRACE_SECONDS = float(os.getenv("SUBMIT_GRACE_SECONDS", "0.5"))

# Per-session drafts: dropped after this much idle time, and capped in number
DRAFT_IDLE_SECONDS = float(os.getenv("DRAFT_IDLE_SECONDS", "3600"))
MAX_DRAFTS = int(os.getenv("MAX_DRAFTS", "500"))

INCLUDE_DATE_IN_EXPORT = bool(int(os.getenv("INCLUDE_DATE_IN_EXPORT", "1")))
