"""Remove the seeded administrator and the whole catalogue.

Usage:
    python -m ffportal.scripts.clear_db

Transfer ratios are removed together with programs and credit cards, other
users are kept. Next application start seeds the database again.
"""

import logging

from sqlalchemy.orm import Session

from ffportal.config import Config, get_config
from ffportal.db import DatabaseConnection
from ffportal.log import configure_logging
from ffportal.models.credit_card import CreditCard
from ffportal.models.program import Program
from ffportal.models.transfer_ratio import TransferRatio
from ffportal.models.user import User

logger = logging.getLogger(__name__)


def clear_database(session: Session, config: Config) -> dict[str, int]:
    deleted = {
        # ratios first, they reference programs and cards
        "transfer_ratios": session.query(TransferRatio).delete(),
        "credit_cards": session.query(CreditCard).delete(),
        "programs": session.query(Program).delete(),
        "users": session.query(User)
        .filter(User.username == config.admin_username)
        .delete(),
    }
    session.commit()
    for table, count in deleted.items():
        logger.info("Deleted %d row(s) from '%s'", count, table)
    return deleted


def main() -> None:
    configure_logging()
    config = get_config()
    db = DatabaseConnection(config=config)
    session = db.get_session()
    try:
        clear_database(session, config)
    finally:
        session.close()


if __name__ == "__main__":
    main()
