#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the users and meals tables against DATABASE_URL
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings  # noqa: E402
from domain.models import Database  # noqa: E402

logger = logging.getLogger("dailydiet.scripts.init_db")


def main(database_url: str = None) -> int:
    """Create the schema; returns a process exit code"""
    database = Database(database_url or settings.database_url, echo=settings.db_echo)
    try:
        database.create_schema()
    except Exception as exc:
        logger.error(f"Schema creation failed: {exc}")
        return 1
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )

    print("\n" + "=" * 60)
    print("DailyDiet Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("SUCCESS! Tables 'users' and 'meals' are ready.")
    else:
        print("FAILED! Check the errors above.")

    sys.exit(exit_code)
