"""One-time admin setup from the command line.

Creates the first administrator (or promotes an existing account when its
password is given) and records that setup has been completed. Refuses to run
a second time.
"""

import getpass
import os
import sys

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.infrastructure.database import Base, SessionLocal, engine
from app.core.exceptions import AppError
from app.domain.models.user import User
from app.domain.models.admin_record import AdminRecord  # noqa: F401  (table registration)
from app.domain.models.site_setting import SiteSetting  # noqa: F401
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.application.services.auth_service import setup_first_admin


def create_admin():
    print("Nonprofit site: first administrator setup")
    print("-------------------------------------")

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        repo = SQLAlchemyUserRepository(db, User)
        if repo.is_setup_completed():
            print("Admin setup has already been completed. Grant further admins from the dashboard.")
            return 1

        email = input("Email: ").strip()
        username = input(f"Username [{email.split('@')[0]}]: ").strip() or email.split("@")[0]
        password = getpass.getpass("Password: ")
        if not email or "@" not in email or not password:
            print("A valid email and a password are required.")
            return 1

        user = setup_first_admin(repo, username, email, password)
        print(f"Administrator created: {user.email} (id {user.id})")
        return 0
    except AppError as e:
        print(f"Setup failed: {e.message}")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(create_admin())
