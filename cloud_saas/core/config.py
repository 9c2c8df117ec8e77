# Standard library imports
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

# Local application imports
from .exceptions import ConfigurationError


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_origins(value: str) -> Tuple[str, ...]:
    origins = tuple(origin.strip() for origin in value.split(",") if origin.strip())
    return origins or ("*",)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Built once at process start (see ``Settings.from_env``) and handed to the
    DI container, which passes the same instance to every use case and
    infrastructure service. Request handlers never read the environment.
    """

    # Database Configuration
    mongo_uri: str
    jwt_secret_key: str
    mongo_database_name: str = "cloud_saas"

    # JWT Configuration
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 7

    # Password hashing work factor
    bcrypt_rounds: int = 10

    # HTTP
    port: int = 5000
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    # SMTP / contact form
    email_user: str = ""
    email_password: str = ""
    admin_email: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_tls: bool = True
    email_from_name: str = "Cloud SaaS"

    @property
    def access_token_expire_seconds(self) -> int:
        return self.access_token_expire_days * 24 * 60 * 60

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_host and self.email_user and self.email_password)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If MONGO_URI or JWT_SECRET is missing
        """
        env = os.environ if environ is None else environ

        mongo_uri = env.get("MONGO_URI", "").strip()
        jwt_secret = env.get("JWT_SECRET", "").strip()
        missing = [
            name for name, value in (("MONGO_URI", mongo_uri), ("JWT_SECRET", jwt_secret))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        try:
            return cls(
                mongo_uri=mongo_uri,
                jwt_secret_key=jwt_secret,
                mongo_database_name=env.get("MONGO_DB_NAME", "cloud_saas"),
                jwt_algorithm=env.get("JWT_ALGORITHM", "HS256"),
                access_token_expire_days=int(env.get("ACCESS_TOKEN_EXPIRE_DAYS", "7")),
                bcrypt_rounds=int(env.get("BCRYPT_ROUNDS", "10")),
                port=int(env.get("PORT", "5000")),
                cors_origins=_parse_origins(env.get("CORS_ORIGINS", "*")),
                log_level=env.get("LOG_LEVEL", "INFO").upper(),
                email_user=env.get("EMAIL_USER", ""),
                email_password=env.get("EMAIL_PASS", ""),
                admin_email=env.get("ADMIN_EMAIL", ""),
                smtp_host=env.get("SMTP_HOST", "smtp.gmail.com"),
                smtp_port=int(env.get("SMTP_PORT", "465")),
                smtp_use_tls=_parse_bool(env.get("SMTP_USE_TLS", "true")),
                email_from_name=env.get("EMAIL_FROM_NAME", "Cloud SaaS"),
            )
        except ValueError as exception:
            raise ConfigurationError(f"Invalid configuration value: {exception}") from exception
