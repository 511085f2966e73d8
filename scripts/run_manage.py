#!/usr/bin/env python
"""
Helper script to run Django management commands with .env values taking
precedence over the shell environment.

Usage:
    python scripts/run_manage.py <command> [args...]

Examples:
    python scripts/run_manage.py migrate
    python scripts/run_manage.py createsuperuser
    python scripts/run_manage.py runserver
"""

import os
import sys
from pathlib import Path

from dotenv import dotenv_values

# Ensure we're in the project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
os.chdir(PROJECT_ROOT)
sys.path.insert(0, str(PROJECT_ROOT))

# Keys where a stale shell export must not win over .env
OVERRIDE_KEYS = ("DATABASE_URL", "SUPABASE_JWT_SECRET")


def load_env_with_override():
    """Load .env and force-override OVERRIDE_KEYS if present in .env."""
    env_path = PROJECT_ROOT / ".env"
    if not env_path.exists():
        return

    env_vars = dotenv_values(env_path)
    for key in OVERRIDE_KEYS:
        env_value = env_vars.get(key)
        if not env_value:
            continue

        current = os.environ.get(key, "")
        if current and current != env_value:
            print(f"Overriding {key} from shell with .env value", file=sys.stderr)
        os.environ[key] = env_value


def main():
    load_env_with_override()

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "showroom.settings")

    from django.core.management import execute_from_command_line

    # Build argv: ['manage.py', <command>, <args>...]
    argv = ["manage.py"] + sys.argv[1:]
    execute_from_command_line(argv)


if __name__ == "__main__":
    main()
