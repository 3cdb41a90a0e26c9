"""
Create an admin account, or promote an existing account to admin.

There is no API route that grants the admin role, so the first admin is
bootstrapped from the command line:

    python scripts/create_admin.py admin@example.org 'a-strong-password'
"""
import argparse
import sys

from farmhub.core.config import get_settings
from farmhub.db.base import Base
from farmhub.db.session import make_engine, make_session_factory
from farmhub.models.user import UserRole
from farmhub.services.user_service import create_user, get_by_email, promote_to_admin


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("email")
    parser.add_argument("password", nargs="?", help="required when the account does not exist yet")
    args = parser.parse_args(argv)

    engine = make_engine(get_settings().DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    with make_session_factory(engine)() as db:
        user = get_by_email(db, args.email)
        if user:
            promote_to_admin(db, user)
            print(f"Promoted {user.email} to admin.")
            return 0
        if not args.password:
            print("Password required to create a new account.", file=sys.stderr)
            return 1
        user = create_user(db, email=args.email, password=args.password, role=UserRole.ADMIN)
        print(f"Created admin {user.email} ({user.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
