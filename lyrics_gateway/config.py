"""Runtime settings, read from the environment (and `.env` when present)."""

import os

from dotenv import load_dotenv

load_dotenv()


def _timeout(value):
    # "0" or an empty value means requests waits forever
    if not value:
        return None
    seconds = float(value)
    return seconds if seconds > 0 else None


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8090"))
DEBUG = os.getenv("DEBUG", "").lower() in {"1", "true", "yes"}
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

UPSTREAM_TIMEOUT = _timeout(os.getenv("UPSTREAM_TIMEOUT", "10"))
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36",
)

AZLYRICS_SITE = os.getenv("AZLYRICS_SITE", "www.azlyrics.com")
SEARCH_ENGINE_URL = os.getenv("SEARCH_ENGINE_URL", "https://www.google.com/search")
# The result parser expects the engine's plain-HTML page, served to text browsers
SEARCH_USER_AGENT = os.getenv(
    "SEARCH_USER_AGENT",
    "Lynx/2.8.9rel.1 libwww-FM/2.14 SSL-MM/1.4.1 OpenSSL/1.1.1",
)

# Lyrics block on an azlyrics song page: the <div> right after two <br>s
LYRICS_SELECTOR = os.getenv("LYRICS_SELECTOR", "br + br + div")
