"""
Test settings for Showroom.

This file overrides the main settings to:
1. Skip external secrets (fixed JWT secret for auth tests)
2. Use SQLite in-memory database (fast, no network)
3. Disable DEBUG to catch production-like issues

Usage:
    pytest uses this automatically via pyproject.toml:
    [tool.pytest.ini_options]
    DJANGO_SETTINGS_MODULE = "showroom.settings_test"
"""

# Import everything from base settings, then override
from showroom.settings import *  # noqa: F401, F403, E402

# =============================================================================
# TEST DATABASE CONFIGURATION
# =============================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# =============================================================================
# TEST-SPECIFIC SETTINGS
# =============================================================================

# Disable debug in tests to catch production issues
DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

# Use a simple password hasher for faster tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

SUPABASE_JWT_SECRET = "test-supabase-jwt-secret-with-enough-length"
AUTH_DISABLED = False

SHOWROOM_SITE_NAME = "Showroom Test"
