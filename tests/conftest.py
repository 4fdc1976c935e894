"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use real credentials
os.environ.setdefault("APIKEY", "test-api-key")
os.environ.setdefault("FIREBASE_SETTINGS", "")
