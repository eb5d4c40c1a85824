"""Helper CLI to add a dashboard user or reset their password.

Usage examples:
    python -m ffportal.scripts.add_user --username alice
    python -m ffportal.scripts.add_user --username alice --password s3cret
"""

import argparse
import getpass
import logging

from ffportal.config import get_config
from ffportal.db import DatabaseConnection
from ffportal.log import configure_logging
from ffportal.services.user import UserService

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create or update a dashboard user")
    parser.add_argument("--username", type=str, required=True, help="Login name")
    parser.add_argument(
        "--password",
        type=str,
        required=False,
        help="Password (prompted when omitted)",
    )
    return parser.parse_args()


def main() -> None:
    configure_logging()
    args = parse_args()
    password = args.password or getpass.getpass("Password: ")
    if not password:
        raise SystemExit("Password must not be empty")

    # Create config explicitly for CLI usage (bypass FastAPI Depends)
    db = DatabaseConnection(config=get_config())
    session = db.get_session()
    try:
        user = UserService(db=session).set_password(args.username, password)
        session.commit()
        logger.info("User id=%s username=%s saved", user.id, user.username)
    finally:
        session.close()


if __name__ == "__main__":
    main()
