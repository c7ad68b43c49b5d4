"""Root conftest - shared test configuration."""

import json
import os

# Deterministic credentials, never the defaults from a developer's .env
os.environ.setdefault(
    "API_KEYS",
    json.dumps({
        "test-admin-token": "admin=true,trusted_member=true",
        "test-member-token": "trusted_member=true",
    }),
)
os.environ.setdefault("LOG_FORMAT", "text")
