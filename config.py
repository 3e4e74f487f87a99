import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Notifications ("email" or "console")
    notification_channel: str = os.getenv("LIBRARY_NOTIFICATION_CHANNEL", "email")
    smtp_from_email: str = os.getenv("SMTP_FROM_EMAIL", "noreply@library.com")

    # Catalog rules
    allow_concurrent_loans: bool = _env_flag("LIBRARY_ALLOW_CONCURRENT_LOANS")
    validate_identifiers: bool = _env_flag("LIBRARY_VALIDATE_IDENTIFIERS")

    # CLI output mode: plain | json | rich
    cli_output: str = os.getenv("LIB_CLI_OUTPUT", "plain")


settings = Settings()
