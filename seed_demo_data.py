"""
Load the university demo data set (departments, vacancies, applicants,
applications, status history and evaluations) into an empty database.

Demo accounts: admin@wmsu.edu.ph / hrstaff@wmsu.edu.ph, password "password123".

Run this script from the project root after "alembic upgrade head":
    python seed_demo_data.py
"""

import os
import sys

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.logging_config import setup_logging
from app.services.demo_data import seed_if_empty


def main():
    setup_logging(log_level=settings.LOG_LEVEL, json_logs=False)
    init_db()

    db = SessionLocal()
    try:
        if seed_if_empty(db):
            print("✓ Demo data loaded")
        else:
            print("Database already has users. Nothing to do.")
    except Exception:
        db.rollback()
        print("✗ Seeding failed, database changes have been rolled back.")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
