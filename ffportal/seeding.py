import logging
from typing import Type

from sqlalchemy.orm import Session

from ffportal.config import Config
from ffportal.models.base import BaseModel
from ffportal.models.credit_card import CreditCard
from ffportal.models.program import Program
from ffportal.models.user import User
from ffportal.passwords import hash_password

logger = logging.getLogger(__name__)

_ASSETS_URL = "https://res.cloudinary.com/demo/image/upload/v1234567890/programs"

# demo catalogue, inserted only into empty tables
DEMO_CATALOG: dict[Type[BaseModel], list[dict]] = {
    CreditCard: [
        dict(name="Air India Signature", bank_name="SBI"),
        dict(name="Rewards", bank_name="AXIS"),
        dict(name="First Preferred credit card", bank_name="YES"),
        dict(name="Sapphire Preferred", bank_name="Chase"),
        dict(name="Gold Card", bank_name="American Express"),
        dict(name="Venture Rewards", bank_name="Capital One"),
        dict(name="Magnus Credit Card", bank_name="Axis Bank"),
        dict(name="Platinum Card", bank_name="American Express"),
    ],
    Program: [
        dict(name="Royal Orchid Plus", asset_name=f"{_ASSETS_URL}/royal-orchid-plus.svg"),
        dict(name="KrisFlyer", asset_name=f"{_ASSETS_URL}/krisflyer.svg"),
        dict(name="Asiana Club", asset_name=f"{_ASSETS_URL}/asiana-club.svg"),
        dict(name="Air India Flying Returns", asset_name=f"{_ASSETS_URL}/air-india.svg"),
        dict(name="IndiGo 6E Rewards", asset_name=f"{_ASSETS_URL}/indigo.svg"),
        dict(
            name="Vistara Club Vistara",
            asset_name=f"{_ASSETS_URL}/vistara.svg",
            enabled=False,
        ),
        dict(name="SpiceJet SpiceClub", asset_name=f"{_ASSETS_URL}/spicejet.svg"),
        dict(name="Emirates Skywards", asset_name=f"{_ASSETS_URL}/emirates.svg"),
    ],
}


def seed_admin_user(session: Session, config: Config) -> User | None:
    """Create the administrator account unless it already exists."""
    existing = session.query(User).filter(User.username == config.admin_username).first()
    if existing is not None:
        return existing
    if not config.admin_password:
        logger.warning(
            "Admin password is not configured, skipping creation of user '%s'",
            config.admin_username,
        )
        return None
    admin = User(
        username=config.admin_username,
        password_hash=hash_password(config.admin_password),
    )
    session.add(admin)
    session.flush()
    logger.info("Admin user '%s' created", admin.username)
    return admin


def seed_demo_catalog(session: Session) -> None:
    for model, seeds in DEMO_CATALOG.items():
        table_name = model.__tablename__
        if session.query(model).count() > 0:
            logger.info("Table '%s' is not empty, skipping demo data", table_name)
            continue
        session.add_all([model(**seed) for seed in seeds])
        session.flush()
        logger.info("Seeded %d demo row(s) into '%s'", len(seeds), table_name)
