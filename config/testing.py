import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://backend.test/api"),
    "timeout": 2,
}

DEBUG = False
TESTING = True

NOTICE_DISMISS_SECONDS = 5
SUBMIT_GRACE_SECONDS = 0
DRAFT_IDLE_SECONDS = 3600
MAX_DRAFTS = 50

INCLUDE_DATE_IN_EXPORT = True
