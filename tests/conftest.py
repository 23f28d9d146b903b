"""Shared pytest configuration for the communications service."""

from __future__ import annotations

import os
import pathlib
import sys
import tempfile

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# The engine is created at import time, so the database must be configured
# before any test module imports the package.
_TEST_DB_DIR = pathlib.Path(tempfile.mkdtemp(prefix="alumni-portal-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB_DIR / 'test.db'}"
os.environ["APP_TIMEZONE"] = "UTC"
