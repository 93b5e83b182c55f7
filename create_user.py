"""
Script to create an HR office account.

Accounts are not self-service; use this to bootstrap the first admin and
to add staff members.

Run this script from the project root:
    python create_user.py --email admin@example.edu --name "Maria Santos" --role admin
"""

import argparse
import getpass
import os
import sys

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.database import SessionLocal, init_db
from app.core.security import get_password_hash
from app.models.user import User, UserRole


def parse_args():
    parser = argparse.ArgumentParser(description="Create an HR office account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--role", choices=[r.value for r in UserRole], default=UserRole.STAFF.value)
    return parser.parse_args()


def create_user(email: str, name: str, role: UserRole, password: str) -> None:
    """Insert the account unless the email is already registered."""
    init_db()
    db = SessionLocal()

    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"✗ Email already exists: {email}")
            sys.exit(1)

        user = User(
            email=email,
            name=name,
            role=role,
            hashed_password=get_password_hash(password),
        )
        db.add(user)
        db.commit()
        print(f"✓ Created {role.value} account {email} (ID: {user.id})")

    except Exception as e:
        db.rollback()
        print(f"\n✗ Error creating user: {e}")
        print("Database changes have been rolled back.")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    args = parse_args()
    password = getpass.getpass("Password: ")
    if not password or password != getpass.getpass("Confirm password: "):
        print("✗ Passwords are empty or do not match.")
        sys.exit(1)
    create_user(args.email, args.name, UserRole(args.role), password)
