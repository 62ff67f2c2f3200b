"""
Script to create an admin account, or promote an existing user to admin.

Admins are the only users allowed to create, update and delete jobs and
companies; /auth/register never creates one.

Run this script from the project root:
    python create_admin.py <username>
"""

import getpass
import os
import sys

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.database import SessionLocal
from app.core.security import get_password_hash
from app.models.user import User


def create_admin(username: str):
    """Create the admin user, or set is_admin on an existing account."""
    db = SessionLocal()

    try:
        user = db.query(User).filter(User.username == username).first()

        if user:
            if user.is_admin:
                print(f"{username} is already an admin.")
                return

            confirm = input(f"User {username} exists. Promote to admin? (yes/no): ")
            if confirm.lower() != 'yes':
                print("Canceled.")
                return

            user.is_admin = True
            db.commit()
            print(f"Promoted {username} to admin.")
            return

        password = getpass.getpass("Password: ")
        if len(password) < 5:
            print("Password must be at least 5 characters.")
            sys.exit(1)

        user = User(
            username=username,
            hashed_password=get_password_hash(password),
            first_name=input("First name: ").strip() or username,
            last_name=input("Last name: ").strip() or "Admin",
            email=input("Email: ").strip(),
            is_admin=True,
        )
        db.add(user)
        db.commit()
        print(f"Created admin user {username}.")

    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)

    create_admin(sys.argv[1])
