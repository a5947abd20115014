# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.v1 import user_router
from .core.config import get_settings
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the users collection indexes on startup and releases the shared
    HTTP client and the MongoDB client on shutdown.
    """
    try:
        user_repository = get_container().get(UserRepository)
        await user_repository.ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is temporarily unavailable
        logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)

    yield

    await close_shared_http_client()
    close_database()
    logger.info("Application shutdown complete")


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration (credentials allowed for the session cookie)
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    configure_logging()
    settings = get_settings()

    application = FastAPI(
        title="Job Portal Accounts API",
        version="1.0.0",
        description="User registration, login, logout and profile updates",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(user_router, prefix="/api/v1/user")

    return application


# Create application instance
app = create_application()
