"""Application configuration"""

from dataclasses import dataclass, field
from os import getenv
from pathlib import Path


def _getenv_bool(name: str, default: bool) -> bool:
    value = getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    secret_key: str | None = field(
        default_factory=lambda: getenv("FFPORTAL_SECRET_KEY", "")
    )
    token_lifetime_days: int = field(
        default_factory=lambda: int(getenv("FFPORTAL_TOKEN_LIFETIME_DAYS", 7))
    )

    app_name: str = "ffportal"
    app_version: str = "0.1.0"

    # show exception text in 500 responses
    debug: bool = field(default_factory=lambda: _getenv_bool("FFPORTAL_DEBUG", False))

    # media host credentials, uploads are disabled when any of them is empty
    cloudinary_cloud_name: str | None = field(
        default_factory=lambda: getenv("FFPORTAL_CLOUDINARY_CLOUD_NAME", "")
    )
    cloudinary_api_key: str | None = field(
        default_factory=lambda: getenv("FFPORTAL_CLOUDINARY_API_KEY", "")
    )
    cloudinary_api_secret: str | None = field(
        default_factory=lambda: getenv("FFPORTAL_CLOUDINARY_API_SECRET", "")
    )
    cloudinary_timeout: int = 10

    # dashboard user created on first start
    admin_username: str = field(
        default_factory=lambda: getenv("FFPORTAL_ADMIN_USERNAME", "admin")
    )
    admin_password: str | None = field(
        default_factory=lambda: getenv("FFPORTAL_ADMIN_PASSWORD", "")
    )
    seed_demo_data: bool = field(
        default_factory=lambda: _getenv_bool("FFPORTAL_SEED_DEMO_DATA", False)
    )

    # require existing, non-archived program and card when upserting a ratio
    ratio_reference_check: bool = field(
        default_factory=lambda: _getenv_bool("FFPORTAL_RATIO_REFERENCE_CHECK", True)
    )

    # Optional database URL for Postgres or other databases
    database_url_env: str | None = field(
        default_factory=lambda: getenv("FFPORTAL_DATABASE_URL", None)
    )

    @property
    def database_path(self) -> Path:
        return Path("./data/") / Path(f"{self.app_name}.db")

    @property
    def database_url(self) -> str:
        # Use provided DATABASE_URL if available, else fall back to SQLite file
        if self.database_url_env:
            return self.database_url_env
        return f"sqlite:///{self.database_path}"

    @property
    def uploads_enabled(self) -> bool:
        return bool(
            self.cloudinary_cloud_name
            and self.cloudinary_api_key
            and self.cloudinary_api_secret
        )


def get_config():
    return Config()
