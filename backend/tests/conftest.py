"""Root conftest — shared test configuration."""

import os

# Ensure tests don't pick up a developer's .env overrides
os.environ.setdefault("DEFAULT_LEGACY_ID", "reset")
os.environ.setdefault("LOG_FORMAT", "text")
