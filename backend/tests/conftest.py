"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach the real HP API
os.environ.setdefault("HP_API_BASE_URL", "http://hp-api.test")
os.environ.setdefault("LOG_FORMAT", "text")
