"""Pytest configuration and fixtures for tests."""

import os

# Settings are read from the environment; keep a real Asana account out of the tests
os.environ["ASANA_API_URL"] = "https://asana.test/api/1.0"
os.environ["ASANA_API_KEY"] = "test-api-key"
os.environ.pop("ASANA_TIMEOUT", None)
