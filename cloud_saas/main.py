# Standard library imports
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.routes import auth_router, contact_router, register_exception_handlers
from .core.config import Settings
from .di.base_container import BaseContainer
from .di.container import DIContainer, set_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_connection, ping_database
from .utils.email_service import EmailService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Pings MongoDB, creates the unique email index and reports whether SMTP
    is configured. A database failure aborts start-up. The container of the
    starting application becomes the process-wide one.
    """
    container = app.state.container
    set_container(container)

    user_repository = container.get(UserRepository)
    try:
        if container.has("database"):
            await ping_database(container.get("database"))
        await user_repository.ensure_indexes()
        logger.info("MongoDB connected and user indexes ready")
    except Exception as e:
        logger.error(f"MongoDB connection error: {e}", exc_info=True)
        raise

    if container.has(EmailService) and container.get(EmailService).is_configured:
        logger.info("Email server configured")
    else:
        logger.warning("Email config missing (EMAIL_USER/EMAIL_PASS); contact form will fail")

    yield

    close_connection()
    logger.info("Application shutdown complete")


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and the immutable Settings object
    - The dependency injection container
    - CORS middleware configuration
    - API route registration and JSON error handlers

    Args:
        settings: Pre-built settings (read from the environment when omitted)
        container: Pre-built container (a DIContainer over MongoDB when omitted)

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationError: If MONGO_URI or JWT_SECRET is missing
    """
    if settings is None:
        # Load environment variables from .env file
        env_path = Path(__file__).resolve().parent.parent / ".env"
        load_dotenv(env_path)
        settings = Settings.from_env()

    configure_logging(settings.log_level)
    if container is None:
        container = DIContainer(settings)
    set_container(container)

    application = FastAPI(
        title="Cloud SaaS Backend API",
        version="1.0.0",
        description="Accounts and contact form for the Cloud SaaS marketing site",
        lifespan=lifespan,
    )
    application.state.container = container

    allow_all = "*" in settings.cors_origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(auth_router, prefix="/api")
    application.include_router(contact_router, prefix="/api")
    register_exception_handlers(application)

    return application


# Create application instance
app = create_application()
