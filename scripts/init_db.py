#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the feeding table in the database named by DATABASE_URL
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models import init_database

logger = logging.getLogger("tamagotchi.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    logger.info(
        "Initializing schema at %s",
        make_url(settings.database_url).render_as_string(hide_password=True),
    )
    try:
        init_database()
    except SQLAlchemyError as exc:
        logger.error("Database initialization failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    exit_code = main()

    print("\n" + "=" * 60)
    if exit_code == 0:
        print("SUCCESS! The feeding table is ready to use.")
    else:
        print("FAILED! Check the errors above.")
    print("=" * 60 + "\n")

    sys.exit(exit_code)
