import os

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
TRANSLATE_SERVICE_URLS = [
    url.strip() for url in os.getenv("TRANSLATE_SERVICE_URLS", "translate.googleapis.com").split(",") if url.strip()
]
