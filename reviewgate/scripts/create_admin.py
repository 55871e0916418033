"""
Create the first admin, or reset an existing account's password and promote it. Run from project root:
  python -m reviewgate.scripts.create_admin EMAIL [--password PASSWORD]
If --password is omitted, ADMIN_PASSWORD from the environment is used.
Example:
  ADMIN_PASSWORD=your-secure-password python -m reviewgate.scripts.create_admin owner@example.com
"""
import argparse
import logging
import os
import sys

from sqlalchemy.orm import Session

from reviewgate.core.config import get_settings
from reviewgate.core.database import session_scope
from reviewgate.core.security import hash_password
from reviewgate.models import UserRole
from reviewgate.services.auth import check_password_policy, get_user_by_email
from reviewgate.services.errors import AuthServiceError
from reviewgate.services.users import create_user

logger = logging.getLogger(__name__)


def upsert_admin(db: Session, email: str, password: str) -> tuple[int, bool]:
    """Create or reset an admin account. Returns (user id, created)."""
    existing = get_user_by_email(db, email)
    if existing is None:
        user = create_user(db, email, password, role=UserRole.ADMIN.value)
        return user.id, True

    check_password_policy(password)
    existing.password_hash = hash_password(password)
    existing.role = UserRole.ADMIN
    db.commit()
    return existing.id, False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create or reset a reviewgate admin user.")
    parser.add_argument("email", help="Admin email address")
    parser.add_argument("--password", help="Password (defaults to $ADMIN_PASSWORD)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )

    password = args.password or os.environ.get("ADMIN_PASSWORD")
    if not password:
        print("A password is required: pass --password or set ADMIN_PASSWORD.", file=sys.stderr)
        return 1

    try:
        with session_scope() as db:
            user_id, created = upsert_admin(db, args.email, password)
    except AuthServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Failed to create admin user")
        return 1

    if created:
        print(f"Created admin user id={user_id}.")
    else:
        print(f"User id={user_id} already existed; password reset and role set to admin.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
